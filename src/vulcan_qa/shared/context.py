"""Per-scenario key/value store shared by steps, hooks and helpers.

Values live in a thread-local map, so scenarios running on different threads
never see each other's data. The after-scenario hook clears the map.

    ScenarioContext.put(ScenarioKeys.AUTH_TOKEN, token)
    token = ScenarioContext.get(ScenarioKeys.AUTH_TOKEN, str)
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional, Type, TypeVar

T = TypeVar("T")

_local = threading.local()


class ScenarioKeys:
    """Well-known ScenarioContext keys."""

    # Credentials member used by the scenario (UI login, API auth, hybrid flows)
    CREDENTIALS = "credentials"
    # Token obtained through an API login
    AUTH_TOKEN = "authToken"
    # httpx.Response of the most recent API call
    LAST_API_RESPONSE = "lastApiResponse"
    # DataRegistry holding cleanup actions for seeded data
    DATA_REGISTRY = "dataRegistry"
    # Id of a user created through the API. Prefer registering cleanup over reading raw ids.
    CREATED_USER_ID = "createdUserId"
    # ApiClientRegistry with the scenario's API clients
    API_CLIENT_REGISTRY = "apiClientRegistry"


def _store() -> Dict[str, Any]:
    store = getattr(_local, "store", None)
    if store is None:
        store = _local.store = {}
    return store


def _check_type(key: str, value: Any, expected_type: Type[T]) -> T:
    if not isinstance(value, expected_type):
        raise TypeError(
            f"ScenarioContext key '{key}' is not of type {expected_type.__name__} "
            f"(got {type(value).__name__})"
        )
    return value


class ScenarioContext:
    """Namespace of operations on the current thread's scenario store."""

    @staticmethod
    def put(key: str, value: Any) -> None:
        _store()[key] = value

    @staticmethod
    def get(key: str, expected_type: Type[T] = object) -> T:
        store = _store()
        if key not in store or store[key] is None:
            raise KeyError(f"ScenarioContext key not found '{key}'")
        return _check_type(key, store[key], expected_type)

    @staticmethod
    def get_optional(key: str, expected_type: Type[T] = object) -> Optional[T]:
        value = _store().get(key)
        if value is None:
            return None
        return _check_type(key, value, expected_type)

    @staticmethod
    def get_or_create(key: str, expected_type: Type[T], factory: Callable[[], T]) -> T:
        store = _store()
        value = store.get(key)
        if value is None:
            value = factory()
            store[key] = value
            return value
        return _check_type(key, value, expected_type)

    @staticmethod
    def contains(key: str) -> bool:
        return key in _store()

    @staticmethod
    def remove(key: str) -> None:
        _store().pop(key, None)

    @staticmethod
    def clear() -> None:
        """Drop every value and the thread-local map itself."""
        _store().clear()
        if hasattr(_local, "store"):
            del _local.store

    @staticmethod
    def snapshot() -> Dict[str, Any]:
        """Shallow copy of the current store, for logging and debugging."""
        return dict(_store())
