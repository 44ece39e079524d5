"""SauceDemo login screen.

Page methods are low-level actions (enter, click, check). Flows such as
"log in as a role" belong in LoginActions.
"""
from __future__ import annotations

from typing import Optional

from playwright.sync_api import Page

from vulcan_qa.ui.pages.base_page import BasePage


class LoginPage(BasePage):
    USERNAME_FIELD = "#user-name"
    PASSWORD_FIELD = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = "[data-test='error']"

    def __init__(self, page: Optional[Page] = None) -> None:
        super().__init__(page)
        self.username_field = self.locator(self.USERNAME_FIELD)
        self.password_field = self.locator(self.PASSWORD_FIELD)
        self.login_button = self.locator(self.LOGIN_BUTTON)
        self.error_message = self.locator(self.ERROR_MESSAGE)
        self.logger.info("LoginPage initialized")

    def enter_username(self, username: str) -> None:
        self._type(self.username_field, "usernameField", username)

    def enter_password(self, password: str) -> None:
        self._type_sensitive(self.password_field, "passwordField", password)

    def click_login(self) -> None:
        self._click(self.login_button, "loginButton")

    def is_login_form_visible(self) -> bool:
        return (
            self._is_displayed(self.username_field, "usernameField")
            and self._is_displayed(self.password_field, "passwordField")
            and self._is_displayed(self.login_button, "loginButton")
        )

    def get_error_message(self) -> str:
        return self._get_text(self.error_message, "errorMessage")

    def login_as(self, username: str, password: str) -> None:
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()
