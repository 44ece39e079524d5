"""Scenario-scoped registries stored inside ScenarioContext.

DataRegistry collects cleanup actions for data a scenario creates and runs
them in reverse creation order (create user -> create order is undone as
delete order -> delete user).

ApiClientRegistry lazily creates one API client per client class and hands
the same instance back for the rest of the scenario.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataRegistry:
    def __init__(self) -> None:
        self._cleanup_actions: List[Callable[[], Any]] = []

    def register_cleanup(self, cleanup_action: Callable[[], Any]) -> None:
        if cleanup_action is None:
            raise TypeError("cleanup_action cannot be None")
        self._cleanup_actions.append(cleanup_action)

    def cleanup_all(self) -> int:
        """Run every cleanup action, newest first.

        A failing action is logged and the remaining ones still run.
        Returns the number of actions that failed.
        """
        failures = 0
        while self._cleanup_actions:
            action = self._cleanup_actions.pop()
            try:
                action()
            except Exception as exc:
                failures += 1
                logger.warning(f"Cleanup action {action!r} failed: {exc}", exc_info=True)
        return failures

    def is_empty(self) -> bool:
        return not self._cleanup_actions

    def __len__(self) -> int:
        return len(self._cleanup_actions)


class ApiClientRegistry:
    def __init__(self) -> None:
        self._clients: Dict[type, Any] = {}

    def get(self, client_type: Type[T], factory: Optional[Callable[[], T]] = None) -> T:
        existing = self._clients.get(client_type)
        if existing is None:
            created = (factory or client_type)()
            self._clients[client_type] = created
            logger.debug(f"Created scenario API client {client_type.__name__}")
            return created

        if not isinstance(existing, client_type):
            raise TypeError(
                f"ApiClientRegistry entry for {client_type.__name__} is not of the expected type"
            )
        return existing

    def clear(self) -> None:
        """Close every client that can be closed, then forget them all."""
        for client_type, client in list(self._clients.items()):
            close = getattr(client, "close", None)
            if close is None:
                continue
            try:
                close()
            except Exception as exc:
                logger.warning(f"Error closing API client {client_type.__name__}: {exc}")
        self._clients.clear()

    def __len__(self) -> int:
        return len(self._clients)


def data_registry() -> DataRegistry:
    """The current scenario's DataRegistry, created on first use."""
    return ScenarioContext.get_or_create(ScenarioKeys.DATA_REGISTRY, DataRegistry, DataRegistry)


def api_clients() -> ApiClientRegistry:
    """The current scenario's ApiClientRegistry, created on first use."""
    return ScenarioContext.get_or_create(
        ScenarioKeys.API_CLIENT_REGISTRY, ApiClientRegistry, ApiClientRegistry
    )
