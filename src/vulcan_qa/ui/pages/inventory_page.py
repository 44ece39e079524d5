from __future__ import annotations

from typing import Optional

from playwright.sync_api import Page

from vulcan_qa.ui.pages.base_page import BasePage


class InventoryPage(BasePage):
    INVENTORY_CONTAINER = "#inventory_container"
    PAGE_TITLE = ".title"
    EXPECTED_TITLE = "Products"

    def __init__(self, page: Optional[Page] = None) -> None:
        super().__init__(page)
        self.inventory_container = self.locator(self.INVENTORY_CONTAINER)
        self.page_title = self.locator(self.PAGE_TITLE)
        self.logger.info("InventoryPage initialized")

    def is_loaded(self) -> bool:
        """True when the product list and its "Products" header are showing."""
        return (
            self._is_displayed(self.inventory_container, "inventoryContainer")
            and self._is_displayed(self.page_title, "pageTitle")
            and self._get_text(self.page_title, "pageTitle").strip() == self.EXPECTED_TITLE
        )
