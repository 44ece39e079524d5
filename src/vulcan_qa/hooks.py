"""Scenario lifecycle: browser setup for UI scenarios, ordered teardown for all.

API scenarios are recognised by the ``@api`` tag, or by living under a
``features/api/`` folder so an untagged scenario is still classified.

Teardown order after every scenario:
1. seeded-data cleanup (DataRegistry), while API clients are still open
2. API clients closed (ApiClientRegistry)
3. browser quit, only if this scenario started one
4. ScenarioContext cleared, always

A failed browser setup runs this teardown before the error propagates.
"""
from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from vulcan_qa.config import ConfigManager, settings
from vulcan_qa.core.driver_factory import DriverFactory
from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys
from vulcan_qa.shared.registries import ApiClientRegistry, DataRegistry

logger = logging.getLogger(__name__)

API_TAG = "api"
API_FEATURE_FOLDER = "/features/api/"


def _normalize_tags(tags: Iterable[str]) -> FrozenSet[str]:
    return frozenset(tag.strip().lstrip("@").lower() for tag in tags if tag and tag.strip())


@dataclass(frozen=True)
class ScenarioInfo:
    """What the hooks need to know about a running scenario."""

    name: str
    tags: FrozenSet[str] = field(default_factory=frozenset)
    uri: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    @classmethod
    def from_bdd(cls, feature, scenario) -> "ScenarioInfo":
        """Build from pytest-bdd feature/scenario objects (feature tags included)."""
        tags = set(getattr(feature, "tags", ()) or ()) | set(getattr(scenario, "tags", ()) or ())
        return cls(
            name=getattr(scenario, "name", "<unnamed>"),
            tags=frozenset(tags),
            uri=getattr(feature, "filename", None),
        )

    @property
    def is_api(self) -> bool:
        if API_TAG in self.tags:
            return True
        if self.uri:
            return API_FEATURE_FOLDER in str(self.uri).replace("\\", "/")
        return False


class ScenarioHooks:
    def __init__(self, driver_factory=DriverFactory, config: ConfigManager = settings) -> None:
        self.driver_factory = driver_factory
        self.config = config
        # Tracks per thread whether the current scenario started a browser
        self._state = threading.local()

    @property
    def ui_browser_started(self) -> bool:
        return getattr(self._state, "ui_browser_started", False)

    def before_scenario(self, info: ScenarioInfo) -> None:
        if info.is_api:
            logger.info(f"API scenario detected. Skipping browser setup. Scenario='{info.name}'")
            self._state.ui_browser_started = False
            return

        logger.info(f"UI scenario detected. Setting up browser. Scenario='{info.name}'")
        self._state.ui_browser_started = True

        # pytest-bdd does not run the after-scenario hook when this one raises
        try:
            page = self.driver_factory.get_driver()
            base_url = self.config.get("ui.baseUrl")
            logger.info(f"Navigating to baseUrl: {base_url}")
            page.goto(base_url)
        except BaseException:
            logger.error(f"Browser setup failed. Tearing down. Scenario='{info.name}'")
            self.after_scenario(info)
            raise

    def after_scenario(self, info: ScenarioInfo) -> None:
        try:
            self._cleanup_data(info)
            self._close_api_clients()
            self._quit_browser(info)
        finally:
            ScenarioContext.clear()
            self._state.ui_browser_started = False

    def on_step_failure(self, info: ScenarioInfo, step_name: str) -> Optional[Path]:
        """Save a screenshot of the failing UI step. Best effort."""
        if not self.ui_browser_started or not self.driver_factory.is_driver_initialized():
            return None
        directory = Path(self.config.get("ui.screenshotDir", "target/screenshots"))
        slug = re.sub(r"[^A-Za-z0-9]+", "-", f"{info.name}-{step_name}").strip("-").lower()
        path = directory / f"{slug}.png"
        try:
            directory.mkdir(parents=True, exist_ok=True)
            self.driver_factory.get_driver().screenshot(path=str(path), full_page=True)
        except Exception as exc:
            logger.warning(f"Could not capture failure screenshot for '{info.name}': {exc}")
            return None
        logger.info(f"Failure screenshot saved: {path}")
        return path

    # ---- teardown steps ---------------------------------------------------------
    def _cleanup_data(self, info: ScenarioInfo) -> None:
        try:
            registry = ScenarioContext.get_optional(ScenarioKeys.DATA_REGISTRY, DataRegistry)
            if registry is None or registry.is_empty():
                return
            logger.info(f"Running {len(registry)} cleanup action(s) for Scenario='{info.name}'")
            failures = registry.cleanup_all()
            if failures:
                logger.warning(f"{failures} cleanup action(s) failed for Scenario='{info.name}'")
        except Exception as exc:
            logger.warning(f"Data cleanup failed for Scenario='{info.name}': {exc}")

    def _close_api_clients(self) -> None:
        try:
            registry = ScenarioContext.get_optional(
                ScenarioKeys.API_CLIENT_REGISTRY, ApiClientRegistry
            )
            if registry is not None:
                registry.clear()
        except Exception as exc:
            logger.warning(f"Closing API clients failed: {exc}")

    def _quit_browser(self, info: ScenarioInfo) -> None:
        if self.ui_browser_started and self.driver_factory.is_driver_initialized():
            logger.info(f"UI scenario finished. Quitting browser. Scenario='{info.name}'")
            try:
                self.driver_factory.quit_driver()
            except Exception as exc:
                logger.warning(f"Quitting browser failed for Scenario='{info.name}': {exc}")
        else:
            logger.info(f"No browser to quit for Scenario='{info.name}'")
