"""Single, logged entry point for element interactions.

Page objects describe the page. This class waits before each action and writes
one log line per action. Page objects never touch a locator directly.
"""
from __future__ import annotations

import logging

from playwright.sync_api import Locator

from vulcan_qa.core.waits import WaitUtils

logger = logging.getLogger(__name__)

SENSITIVE_MARKERS = ("password", "secret", "token")
MASK = "<masked>"


class ElementActions:
    def __init__(self, wait: WaitUtils) -> None:
        if wait is None:
            raise ValueError("wait cannot be None")
        self.wait = wait

    def click(self, locator: Locator, name: str) -> None:
        safe_name = self._normalize_name(name)
        logger.info(f"UI ACTION | click | element='{safe_name}'")
        self.wait.wait_for_clickable(locator).click()

    def type(self, locator: Locator, name: str, value: str) -> None:
        """Replace the element's content with ``value``; masked in logs for sensitive names."""
        safe_name = self._normalize_name(name)
        shown = MASK if self._is_sensitive_field(safe_name) else str(value)
        logger.info(f"UI ACTION | type | element='{safe_name}' | value={shown}")
        self.wait.wait_for_visible(locator).fill(value)

    def type_sensitive(self, locator: Locator, name: str, value: str) -> None:
        safe_name = self._normalize_name(name)
        logger.info(f"UI ACTION | typeSensitive | element='{safe_name}' | value={MASK}")
        self.wait.wait_for_visible(locator).fill(value)

    def get_text(self, locator: Locator, name: str) -> str:
        safe_name = self._normalize_name(name)
        text = self.wait.wait_for_visible(locator).inner_text()
        logger.info(f"UI ACTION | getText | element='{safe_name}' | text='{text}'")
        return text

    def is_displayed(self, locator: Locator, name: str) -> bool:
        """Visibility check that never raises."""
        safe_name = self._normalize_name(name)
        try:
            displayed = locator.is_visible()
        except Exception as exc:
            logger.info(
                f"UI ACTION | isDisplayed | element='{safe_name}' | displayed=False "
                f"(exception={type(exc).__name__})"
            )
            return False
        logger.info(f"UI ACTION | isDisplayed | element='{safe_name}' | displayed={displayed}")
        return displayed

    @staticmethod
    def _normalize_name(name: str | None) -> str:
        if name is None or not name.strip():
            return "unknown-element"
        return name.strip()

    @staticmethod
    def _is_sensitive_field(element_name: str) -> bool:
        lowered = element_name.lower()
        return any(marker in lowered for marker in SENSITIVE_MARKERS)
