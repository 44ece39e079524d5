"""Explicit waits used by the UI layer.

Pages and actions wait for a condition before interacting instead of sleeping.
The timeout comes from BasePage so it can be configured without touching pages.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict

from playwright.sync_api import Locator, Page, expect


@dataclass
class ToolError(Exception):
    """Raised when a browser operation fails."""

    name: str
    payload: Dict[str, Any]
    message: str

    def __str__(self) -> str:  # pragma: no cover - human readable helper
        return f"{self.name} failed ({self.message}) with payload={self.payload}"


class WaitTimeoutError(ToolError):
    """Raised when an explicit wait runs out of time."""


class WaitUtils:
    def __init__(self, page: Page, timeout_seconds: int) -> None:
        if page is None:
            raise ValueError("page cannot be None")
        if timeout_seconds <= 0:
            raise ValueError("Timeout must be greater than zero")
        self.page = page
        self.timeout_seconds = timeout_seconds

    @property
    def timeout_ms(self) -> float:
        return self.timeout_seconds * 1000

    def wait_for_visible(self, locator: Locator) -> Locator:
        """Wait until the element is visible and return it."""
        try:
            expect(locator).to_be_visible(timeout=self.timeout_ms)
        except AssertionError as exc:
            raise WaitTimeoutError(
                name="wait_for_visible", payload={"locator": str(locator)}, message=str(exc)
            ) from exc
        return locator

    def wait_for_clickable(self, locator: Locator) -> Locator:
        """Wait until the element is visible and enabled and return it."""
        try:
            expect(locator).to_be_visible(timeout=self.timeout_ms)
            expect(locator).to_be_enabled(timeout=self.timeout_ms)
        except AssertionError as exc:
            raise WaitTimeoutError(
                name="wait_for_clickable", payload={"locator": str(locator)}, message=str(exc)
            ) from exc
        return locator

    def wait_for_title_contains(self, expected_text: str) -> bool:
        try:
            expect(self.page).to_have_title(
                re.compile(re.escape(expected_text)), timeout=self.timeout_ms
            )
        except AssertionError as exc:
            raise WaitTimeoutError(
                name="wait_for_title_contains", payload={"expected": expected_text}, message=str(exc)
            ) from exc
        return True

    def wait_for_url_contains(self, expected_text: str) -> bool:
        try:
            expect(self.page).to_have_url(
                re.compile(re.escape(expected_text)), timeout=self.timeout_ms
            )
        except AssertionError as exc:
            raise WaitTimeoutError(
                name="wait_for_url_contains", payload={"expected": expected_text}, message=str(exc)
            ) from exc
        return True
