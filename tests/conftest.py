"""
Test configuration and fixtures for the shortener client.
This centralizes all test setup, making individual tests clean.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from shortener_client.dependencies import get_clipboard, get_orchestrator
from shortener_client.services.history_store import HistoryStore
from shortener_client.services.shorten_orchestrator import ShortenOrchestrator
from shortener_client.services.side_actions import InMemoryClipboard
from shortener_client.storage.strategies import InMemoryBlobStore

API_BASE_URL = "https://sho.rt"
FIXED_NOW_MS = 1_700_000_000_000


class FakeClock:
    """Epoch-ms clock that only moves when told to"""

    def __init__(self, now_ms: int = FIXED_NOW_MS):
        self.now = now_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeShortenService:
    """
    Stand-in for the shortening service behind httpx.MockTransport.
    
    Records every request and answers with the configured status/body.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json_body = {"shortUrl": "https://sho.rt/abc"}
        self.text_body = None
        self.error = None

    def reply_json(self, body, status_code: int = 200):
        self.json_body, self.text_body, self.status_code = body, None, status_code

    def reply_text(self, text: str, status_code: int):
        self.json_body, self.text_body, self.status_code = None, text, status_code

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def blob_store():
    """Fresh in-memory persistence medium"""
    return InMemoryBlobStore()


@pytest.fixture
def history(blob_store):
    return HistoryStore(blob_store)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service():
    return FakeShortenService()


@pytest.fixture
def orchestrator(history, service, clock):
    """Orchestrator wired to the fake service, in-memory history and fake clock"""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
    return ShortenOrchestrator(
        history=history,
        api_base_url=API_BASE_URL,
        http_client=http_client,
        now_ms=clock,
    )


@pytest.fixture
def clipboard():
    return InMemoryClipboard()


@pytest.fixture(scope="function")
def client(orchestrator, clipboard):
    """
    Create a test client with the session singletons overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_clipboard] = lambda: clipboard

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
