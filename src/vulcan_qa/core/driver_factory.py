"""Per-thread browser lifecycle for UI scenarios."""
from __future__ import annotations

import logging
import threading
from typing import Optional

from playwright.sync_api import Page

from vulcan_qa.config import settings
from vulcan_qa.core.playwright_client import PlaywrightClient

logger = logging.getLogger(__name__)

# ui.browser value -> Playwright engine
BROWSER_ENGINES = {
    "chrome": "chromium",
    "chromium": "chromium",
    "firefox": "firefox",
    "webkit": "webkit",
    "safari": "webkit",
}


class UnsupportedBrowserError(ValueError):
    """Raised when ui.browser names a browser Playwright cannot drive."""


class DriverFactory:
    """Creates, reuses and quits the browser page of the current thread."""

    _local = threading.local()

    @classmethod
    def _client(cls) -> Optional[PlaywrightClient]:
        return getattr(cls._local, "client", None)

    @classmethod
    def get_driver(cls) -> Page:
        client = cls._client()
        if client is None:
            logger.info("Browser is not started. Creating a new instance.")
            client = cls._create_driver()
            cls._local.client = client
        else:
            logger.debug("Reusing existing browser instance.")
        return client.page

    @classmethod
    def _create_driver(cls) -> PlaywrightClient:
        browser = settings.get("ui.browser").lower()
        engine = BROWSER_ENGINES.get(browser)
        if engine is None:
            logger.error(f"Unsupported browser configured: {browser}")
            raise UnsupportedBrowserError(f"Unsupported browser: {browser}")

        implicit_wait = settings.get_int("ui.implicitWait")
        viewport = {
            "width": settings.get_int("ui.viewportWidth", 1920),
            "height": settings.get_int("ui.viewportHeight", 1080),
        }
        logger.info(
            f"Creating browser {browser} (engine={engine}) | defaultTimeout={implicit_wait}s "
            f"| viewport={viewport['width']}x{viewport['height']}"
        )

        client = PlaywrightClient(
            browser_type=engine,
            headless=settings.get_bool("ui.headless", True),
            timeout=implicit_wait * 1000,
            viewport=viewport,
        )
        client.connect()
        return client

    @classmethod
    def quit_driver(cls) -> None:
        client = cls._client()
        if client is None:
            logger.debug("quit_driver() called but no browser is running.")
            return
        logger.info("Quitting browser")
        try:
            client.close()
        finally:
            cls._local.client = None

    @classmethod
    def is_driver_initialized(cls) -> bool:
        return cls._client() is not None
