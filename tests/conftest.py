"""
Shared fixtures for the BatchData MCP server tests.

HTTP is simulated with httpx.MockTransport: no test touches the network.
`recorder` captures every outbound request so tests can assert on the exact
document that was sent.
"""

import json

import httpx
import pytest

from core.client import ApiClient
from core.config import Settings

BASE_URL = "https://api.test/v1"


class Recorder:
    """Mock BatchData API: replies with a fixed status/body and records requests."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = {"status": {"code": 200}, "results": {}}
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)

    @property
    def last_path(self) -> str:
        return self.requests[-1].url.path


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_url=BASE_URL, request_timeout=5.0)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(settings, recorder):
    return ApiClient(settings, transport=httpx.MockTransport(recorder))
