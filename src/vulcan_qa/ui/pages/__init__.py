from vulcan_qa.ui.pages.base_page import BasePage
from vulcan_qa.ui.pages.inventory_page import InventoryPage
from vulcan_qa.ui.pages.login_page import LoginPage

__all__ = ["BasePage", "InventoryPage", "LoginPage"]
