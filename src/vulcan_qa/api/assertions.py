"""Assertions over httpx responses."""
from __future__ import annotations

import re
from typing import Any, Optional

import httpx

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def read_json_path(data: Any, path: str) -> Any:
    """Resolve a dotted path such as ``data.items[0].id`` inside decoded JSON.

    Raises KeyError when any segment is missing.
    """
    current = data
    for name, index in _PATH_TOKEN.findall(path):
        try:
            if name:
                if not isinstance(current, dict):
                    raise KeyError(name)
                current = current[name]
            else:
                if not isinstance(current, list):
                    raise KeyError(index)
                current = current[int(index)]
        except (KeyError, IndexError):
            raise KeyError(f"JSON path '{path}' not found (missing segment '{name or index}')") from None
    return current


def _json_value(response: httpx.Response, json_path: str) -> Any:
    try:
        return read_json_path(response.json(), json_path)
    except KeyError as exc:
        raise AssertionError(str(exc.args[0])) from exc
    except ValueError as exc:
        raise AssertionError(f"Response body is not JSON: {response.text[:200]!r}") from exc


def assert_status_code(response: Optional[httpx.Response], expected_status: int) -> None:
    assert response is not None, "Response should not be None"
    assert response.status_code == expected_status, (
        f"Unexpected status code: expected {expected_status}, got {response.status_code}"
    )


def assert_json_int_equals(response: httpx.Response, json_path: str, expected_value: int) -> None:
    actual = _json_value(response, json_path)
    try:
        actual = int(actual)
    except (TypeError, ValueError):
        raise AssertionError(f"Value at jsonPath '{json_path}' is not an integer: {actual!r}") from None
    assert actual == expected_value, (
        f"Unexpected value at jsonPath: {json_path} (expected {expected_value}, got {actual})"
    )


def assert_json_equals(response: httpx.Response, json_path: str, expected_value: str) -> None:
    actual = _json_value(response, json_path)
    assert str(actual) == expected_value, (
        f"Unexpected value at jsonPath: {json_path} (expected {expected_value!r}, got {actual!r})"
    )


def assert_body_contains(response: httpx.Response, expected_text: str) -> None:
    assert expected_text in response.text, f"Expected response body to contain: {expected_text}"
