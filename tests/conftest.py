from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from tuesday_mcp.tools.gateway import ToolDispatcher


class StubTuesdayApi:
    """Test-only stand-in for the remote API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], tuple[int, Any, str | None]] = {}

    def respond(
        self,
        method: str,
        path: str,
        *,
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        self._routes[(method, f"/api/v1{path}")] = (status_code, json_body, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        status_code, json_body, text = route
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def last_json_body(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def stub_api() -> StubTuesdayApi:
    return StubTuesdayApi()


@pytest.fixture
def dispatcher(stub_api: StubTuesdayApi) -> ToolDispatcher:
    return ToolDispatcher(fallback_api_key="env-key", transport=stub_api.transport)
