from __future__ import annotations

import httpx

from vulcan_qa.api.base_client import BaseApiClient


class HealthApiClient(BaseApiClient):
    """Smoke call used to validate connectivity and framework wiring.

    Not CRUD: it only checks that base URL, timeouts, logging, scenario
    context and cleanup are all hooked up.
    """

    def get_root(self) -> httpx.Response:
        """GET / on api.baseUrl. The root usually serves HTML, which is fine here."""
        self.logger.info("Calling GET / for health check")
        return self.get_html("/")
