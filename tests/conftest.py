"""Shared test configuration and fixtures for the DocumentStack test suite."""

import sys
from pathlib import Path

import httpx
import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)

from documentstack.api.client import DocumentStackClient  # noqa: E402
from documentstack.core.config import ClientConfig  # noqa: E402

PDF_BYTES = b"%PDF-1.7\n1 0 obj\n<<>>\nendobj\n%%EOF\n"


class RecordingObserver:
    """DebugObserver that keeps every event for assertions."""

    def __init__(self):
        self.requests: list[tuple[str, str, str]] = []
        self.responses: list[tuple[str, int, int]] = []

    def on_request(self, method, url, body):
        self.requests.append((method, url, body))

    def on_response(self, filename, generation_time_ms, content_length):
        self.responses.append((filename, generation_time_ms, content_length))


class FakeAPI:
    """Serves one canned response per call and records the requests it saw."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, content=PDF_BYTES)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def make_client(fake_api, observer):
    """Factory for clients wired to the fake API."""
    def _make(**config_kwargs) -> DocumentStackClient:
        config_kwargs.setdefault("api_key", "test-key")
        config_kwargs.setdefault("base_url", "https://api.test")
        return DocumentStackClient(
            ClientConfig(**config_kwargs),
            observer=observer,
            transport=fake_api.transport,
        )
    return _make
