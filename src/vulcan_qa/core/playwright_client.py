"""
Direct Playwright Client
========================

Launches Playwright in-process through its synchronous API, which is what
pytest-bdd step functions need.

Usage:
    with PlaywrightClient(browser_type="firefox") as client:
        client.page.goto("https://www.saucedemo.com")
        client.page.fill("#user-name", "standard_user")
"""
from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

logger = logging.getLogger(__name__)

SUPPORTED_ENGINES = ("chromium", "firefox", "webkit")


class PlaywrightClient:
    """
    One Playwright instance, one browser, one context and its default page.

    Example:
        client = PlaywrightClient(headless=True, timeout=10000)
        client.connect()
        try:
            client.page.goto("https://example.com")
        finally:
            client.close()
    """

    def __init__(
        self,
        browser_type: str = "chromium",
        headless: bool = True,
        timeout: int = 30000,
        viewport: Optional[dict] = None,
    ):
        """
        Args:
            browser_type: Engine to launch (chromium, firefox, webkit)
            headless: Run without a visible window
            timeout: Default timeout for every page operation, in milliseconds
            viewport: ``{"width": ..., "height": ...}`` for the default context
        """
        if browser_type not in SUPPORTED_ENGINES:
            raise ValueError(f"Unknown Playwright engine: {browser_type}")
        self.browser_type = browser_type
        self.headless = headless
        self.timeout = timeout
        self.viewport = viewport

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    def __enter__(self) -> "PlaywrightClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def connect(self) -> None:
        """Launch the browser and open the default page."""
        self._playwright = sync_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        logger.info(f"Launching {self.browser_type} (headless={self.headless})")
        self._browser = launcher.launch(headless=self.headless)

        if self.viewport:
            self._context = self._browser.new_context(viewport=self.viewport)
        else:
            self._context = self._browser.new_context()
        self._context.set_default_timeout(self.timeout)

        self._page = self._context.new_page()

    def new_page(self) -> Page:
        if not self._context:
            raise RuntimeError("Client not connected. Use 'with' or call connect()")
        return self._context.new_page()

    def close(self) -> None:
        """Close all connections and release resources.

        Every stage runs even when an earlier one fails (e.g. after a browser
        crash); the first error is re-raised once everything was attempted.
        """
        stages = [
            ("page", self._page, "close"),
            ("context", self._context, "close"),
            ("browser", self._browser, "close"),
            ("playwright", self._playwright, "stop"),
        ]
        self._page = None
        self._context = None
        self._browser = None
        self._playwright = None

        first_error: Optional[Exception] = None
        for name, resource, method in stages:
            if resource is None:
                continue
            try:
                getattr(resource, method)()
            except Exception as exc:
                logger.warning(f"Failed to close {name}: {exc}")
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Client not connected")
        return self._browser

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
