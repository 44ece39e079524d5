"""Connectivity steps that also exercise ScenarioContext and DataRegistry."""
from __future__ import annotations

import logging

import httpx
from pytest_bdd import parsers, then, when

from vulcan_qa.api import assertions as api_assertions
from vulcan_qa.api.health_client import HealthApiClient
from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys
from vulcan_qa.shared.registries import api_clients, data_registry

logger = logging.getLogger(__name__)


@when("I call the API health endpoint")
def i_call_the_api_health_endpoint():
    response = api_clients().get(HealthApiClient).get_root()
    ScenarioContext.put(ScenarioKeys.LAST_API_RESPONSE, response)

    data_registry().register_cleanup(
        lambda: logger.info("Executing cleanup action for API health scenario")
    )
    logger.info(f"Health response stored in ScenarioContext under key={ScenarioKeys.LAST_API_RESPONSE}")


@then(parsers.parse('the API response body should contain "{expected_text}"'))
def the_api_response_body_should_contain(expected_text):
    response = ScenarioContext.get(ScenarioKeys.LAST_API_RESPONSE, httpx.Response)
    api_assertions.assert_body_contains(response, expected_text)
