import json
from typing import Callable, List

import httpx
import pytest

from anyparser.config import DefaultOptions, Settings

API_URL = "https://api.example.com"
API_KEY = "test-key"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep ANYPARSER_* variables from the host out of every test."""
    for name in ("ANYPARSER_API_URL", "ANYPARSER_API_KEY", "ANYPARSER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def defaults():
    return DefaultOptions(api_url=f"{API_URL}/", api_key=API_KEY)


@pytest.fixture
def settings():
    return Settings(api_url=API_URL, api_key=API_KEY, _env_file=None)


@pytest.fixture
def sample_files(tmp_path):
    first = tmp_path / "sample.pdf"
    first.write_bytes(b"%PDF-1.4 first")
    second = tmp_path / "notes.txt"
    second.write_bytes(b"plain text notes")
    return [first, second]


class RecordingTransport:
    """httpx transport that records requests and replays a canned response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._handler(request)


@pytest.fixture
def json_transport():
    def factory(payload, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(
            lambda request: httpx.Response(
                status_code,
                content=json.dumps(payload).encode(),
                headers={"Content-Type": "application/json"},
            )
        )

    return factory


@pytest.fixture
def text_transport():
    def factory(body: str, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, text=body))

    return factory


@pytest.fixture
def handler_transport():
    """Build a ``RecordingTransport`` around a custom request handler."""
    return RecordingTransport
