from __future__ import annotations

import logging

from vulcan_qa.shared.auth import Credentials
from vulcan_qa.ui.pages.login_page import LoginPage

logger = logging.getLogger(__name__)


class LoginActions:
    """High-level login flows that keep step definitions thin."""

    def __init__(self, login_page: LoginPage) -> None:
        self.login_page = login_page

    def login(self, username: str, password: str) -> None:
        logger.info(f"Logging in with username: {username}")
        self.login_page.login_as(username, password)
        logger.info(f"Login flow finished | username={username}")

    def login_as(self, credentials: Credentials) -> None:
        logger.info(f"Logging in as role={credentials.role.value}")
        self.login(credentials.username, credentials.password)
