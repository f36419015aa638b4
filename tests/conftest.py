"""
Pytest configuration and fixtures for Dependency-Track client tests.
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from dtrack_client.client import DTrackClient
from dtrack_client.config import Settings

Handler = Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler | list[httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        response: httpx.Response | list[httpx.Response] | Handler,
    ) -> None:
        """Register a response, a sequence of responses or a handler."""
        if isinstance(response, httpx.Response):
            response = [response]
        self.routes[(method, path)] = response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.split(b"?")[0].decode("ascii")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text="Not registered")
        if callable(route):
            return route(request)
        # Last response repeats once the sequence is used up
        if len(route) > 1:
            return route.pop(0)
        return route[0]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def mock_settings() -> Settings:
    """Settings for testing."""
    return Settings(
        base_url="https://dtrack.test",
        api_key="test-api-key",
        timeout=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def fake_server() -> FakeServer:
    """Fake Dependency-Track server."""
    return FakeServer()


@pytest.fixture
def client(fake_server: FakeServer, mock_settings: Settings) -> DTrackClient:
    """Client wired to the fake server."""
    return DTrackClient.from_settings(mock_settings, transport=fake_server.transport)


@pytest.fixture
def sample_project_data() -> dict[str, Any]:
    """Sample project payload as returned by the server."""
    return {
        "uuid": "7f5c3a52-2b1e-4a8c-9a0f-3c2d1e0b9a87",
        "name": "acme-app",
        "version": "1.0.0",
        "active": True,
        "isLatest": True,
        "tags": [{"name": "weewoo"}],
        "collectionLogic": "NONE",
        "lastBomImport": 1700000000000,
    }
