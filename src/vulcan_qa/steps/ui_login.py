"""Login page steps (SauceDemo). The before-scenario hook has already opened ui.baseUrl."""
from __future__ import annotations

import logging

from pytest_bdd import given, parsers, then, when

from vulcan_qa.shared.auth import Credentials
from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys
from vulcan_qa.ui import assertions as ui_assertions
from vulcan_qa.ui.login_actions import LoginActions
from vulcan_qa.ui.pages import InventoryPage, LoginPage

logger = logging.getLogger(__name__)


@given("I am on the login page")
def i_am_on_the_login_page():
    login_page = LoginPage()
    logger.info(f"Verifying that we are on the login page | title='{login_page.get_page_title()}'")


@then("I should see the login form")
def i_should_see_the_login_form():
    ui_assertions.assert_login_form_visible(LoginPage())


@when(parsers.parse('I log in as the "{role}" user'))
def i_log_in_as_the_user(role):
    credentials = Credentials.by_role(role)
    ScenarioContext.put(ScenarioKeys.CREDENTIALS, credentials)
    LoginActions(LoginPage()).login_as(credentials)


@then("I should see the products page")
def i_should_see_the_products_page():
    ui_assertions.assert_inventory_loaded(InventoryPage())


@then(parsers.parse('I should see the login error "{message}"'))
def i_should_see_the_login_error(message):
    ui_assertions.assert_login_error_contains(LoginPage(), message)
