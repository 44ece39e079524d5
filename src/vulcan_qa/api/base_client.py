"""Base class for REST client wrappers.

Each client owns its own ``httpx.Client`` configured from api.baseUrl and
api.timeout (milliseconds), so clients of different scenarios never share
connection state.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from vulcan_qa.config import settings

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class BaseApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url or settings.get("api.baseUrl")
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.get_int("api.timeout")
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

        logger.info(
            f"Initializing API client {type(self).__name__} | baseUrl={self.base_url} "
            f"| timeoutMs={self.timeout_ms}"
        )

        headers = dict(JSON_HEADERS)
        api_key = settings.get("api.key", "")
        if api_key:
            headers["x-api-key"] = api_key

        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout_ms / 1000,
            headers=headers,
            transport=transport,
        )

    def __enter__(self) -> "BaseApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        logger.info(f"{method} Request to endpoint: {path}")
        response = self._http.request(method, path, headers=headers, **kwargs)
        logger.info(f"{method} {path} -> {response.status_code}")
        return response

    def get(self, path: str) -> httpx.Response:
        return self.request("GET", path)

    def get_html(self, path: str) -> httpx.Response:
        return self.request("GET", path, headers={"Accept": "text/html"})

    def post(self, path: str, json: Any = None) -> httpx.Response:
        return self.request("POST", path, json=json)

    def delete(self, path: str) -> httpx.Response:
        return self.request("DELETE", path)
