"""User API steps.

The UserApiClient comes from the scenario's ApiClientRegistry; the last
response is kept under ScenarioKeys.LAST_API_RESPONSE.
"""
from __future__ import annotations

import logging

import httpx
from pytest_bdd import parsers, then, when

from vulcan_qa.api import assertions as api_assertions
from vulcan_qa.api.user_client import UserApiClient
from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys
from vulcan_qa.shared.registries import api_clients, data_registry

logger = logging.getLogger(__name__)


def _user_client() -> UserApiClient:
    return api_clients().get(UserApiClient)


def _last_response() -> httpx.Response:
    return ScenarioContext.get(ScenarioKeys.LAST_API_RESPONSE, httpx.Response)


@when(parsers.parse('I request the user with id "{user_id}"'))
def i_request_the_user_with_id(user_id):
    logger.info(f"Calling API: get user by id={user_id}")
    response = _user_client().get_user_by_id(user_id)
    ScenarioContext.put(ScenarioKeys.LAST_API_RESPONSE, response)
    logger.info(f"API response stored in ScenarioContext | status={response.status_code}")


@when(parsers.parse('I create a user named "{name}" with job "{job}"'))
def i_create_a_user(name, job):
    client = _user_client()
    response = client.create_user(name, job)
    ScenarioContext.put(ScenarioKeys.LAST_API_RESPONSE, response)

    if response.is_success:
        user_id = str(response.json()["id"])
        ScenarioContext.put(ScenarioKeys.CREATED_USER_ID, user_id)
        data_registry().register_cleanup(lambda: client.delete_user(user_id))
        logger.info(f"Created user id={user_id}; delete registered for cleanup")


@then(parsers.parse("the API response status should be {expected_status:d}"))
def the_api_response_status_should_be(expected_status):
    api_assertions.assert_status_code(_last_response(), expected_status)


@then(parsers.parse('the API response field "{json_path}" should be {expected_value:d}'))
def the_api_response_field_should_be(json_path, expected_value):
    api_assertions.assert_json_int_equals(_last_response(), json_path, expected_value)


@then(parsers.parse('the API response field "{json_path}" should equal "{expected_value}"'))
def the_api_response_field_should_equal(json_path, expected_value):
    api_assertions.assert_json_equals(_last_response(), json_path, expected_value)
