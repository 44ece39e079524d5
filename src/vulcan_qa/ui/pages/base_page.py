"""Parent class for all page objects.

Subclasses declare CSS selectors as class attributes; BasePage binds them to
Playwright locators in ``__init__`` via ``self.locator``. Interactions go
through ElementActions so every action waits and logs the same way.
Passwords and other secrets are typed with ``type_sensitive``.
"""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

from playwright.sync_api import Locator, Page

from vulcan_qa.config import settings
from vulcan_qa.core.driver_factory import DriverFactory
from vulcan_qa.core.waits import WaitUtils
from vulcan_qa.ui.element_actions import ElementActions


class BasePage:
    def __init__(self, page: Optional[Page] = None) -> None:
        self.page = page if page is not None else DriverFactory.get_driver()
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

        explicit_wait = settings.get("ui.explicitWait", None)
        if explicit_wait is None:
            timeout_seconds = settings.get_int("ui.implicitWait")
        else:
            timeout_seconds = settings.get_int("ui.explicitWait")
        self.wait = WaitUtils(self.page, timeout_seconds)
        self.actions = ElementActions(self.wait)

    def locator(self, selector: str) -> Locator:
        return self.page.locator(selector)

    def open(self, path: str = "") -> None:
        """Navigate to ``path`` relative to ui.baseUrl."""
        base_url = settings.get("ui.baseUrl")
        url = urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))
        self.logger.info(f"UI INFO | open | url='{url}'")
        self.page.goto(url)

    # ---- protected helpers ---------------------------------------------------
    def _click(self, locator: Locator, name: str) -> None:
        self.actions.click(locator, name)

    def _type(self, locator: Locator, name: str, text: str) -> None:
        self.actions.type(locator, name, text)

    def _type_sensitive(self, locator: Locator, name: str, text: str) -> None:
        self.actions.type_sensitive(locator, name, text)

    def _is_displayed(self, locator: Locator, name: str) -> bool:
        return self.actions.is_displayed(locator, name)

    def _get_text(self, locator: Locator, name: str) -> str:
        return self.actions.get_text(locator, name)

    def get_page_title(self) -> str:
        title = self.page.title()
        self.logger.info(f"UI INFO | pageTitle='{title}'")
        return title
