from __future__ import annotations

import logging

from vulcan_qa.ui.pages.inventory_page import InventoryPage
from vulcan_qa.ui.pages.login_page import LoginPage

logger = logging.getLogger(__name__)


def assert_login_form_visible(login_page: LoginPage) -> None:
    logger.info("Asserting login form is visible")
    assert login_page.is_login_form_visible(), "Login form should be visible"


def assert_inventory_loaded(inventory_page: InventoryPage) -> None:
    logger.info("Asserting inventory page is loaded")
    assert inventory_page.is_loaded(), "Products page should be loaded"


def assert_login_error_contains(login_page: LoginPage, expected: str) -> None:
    message = login_page.get_error_message()
    logger.info(f"Asserting login error contains '{expected}'")
    assert expected in message, f"'{expected}' not found in login error '{message}'"
