"""pytest plugin wiring ScenarioHooks into pytest-bdd.

Registered from the root conftest through ``pytest_plugins``.
"""
from __future__ import annotations

import logging

from vulcan_qa.config import ConfigError, settings
from vulcan_qa.hooks import ScenarioHooks, ScenarioInfo

logger = logging.getLogger(__name__)

scenario_hooks = ScenarioHooks()


def pytest_configure(config):
    config.addinivalue_line("markers", "api: scenario talks to the API only, no browser")
    config.addinivalue_line("markers", "ui: scenario drives the browser")

    try:
        level = settings.get("log.level", "INFO").upper()
    except ConfigError as exc:
        logger.warning(f"Falling back to INFO logging: {exc}")
        level = "INFO"
    logging.getLogger("vulcan_qa").setLevel(level)


def pytest_bdd_before_scenario(request, feature, scenario):
    scenario_hooks.before_scenario(ScenarioInfo.from_bdd(feature, scenario))


def pytest_bdd_after_scenario(request, feature, scenario):
    scenario_hooks.after_scenario(ScenarioInfo.from_bdd(feature, scenario))


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    info = ScenarioInfo.from_bdd(feature, scenario)
    logger.error(f"Step failed | scenario='{info.name}' | step='{step.name}' | error={exception}")
    scenario_hooks.on_step_failure(info, step.name)
