"""Shared fixtures for the namabar test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

import namabar
from namabar.configuration import get_configuration, set_configuration

SPEC_FILE = Path(__file__).parent.parent / "spec" / "openapi.json"

TEST_API_KEY = "test-api-key"
TEST_SERVICE_ID = "test-service-id"


# ---------------------------------------------------------------------------
# OpenAPI documents
# ---------------------------------------------------------------------------

@pytest.fixture
def spec() -> dict[str, Any]:
    """The checked-in Namabar OpenAPI document, freshly parsed per test."""
    with open(SPEC_FILE, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def spec_file() -> Path:
    return SPEC_FILE


# ---------------------------------------------------------------------------
# Global configuration: every test starts from a clean slate
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_configuration():
    old = get_configuration()
    set_configuration(None)
    yield
    set_configuration(old)


@pytest.fixture
def configured():
    return namabar.configure(api_key=TEST_API_KEY, service_id=TEST_SERVICE_ID)


# ---------------------------------------------------------------------------
# HTTP: clients wired to an httpx.MockTransport that records requests
# ---------------------------------------------------------------------------

class Recorder:
    """Collects requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.payload is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(configured, recorder) -> Callable[..., namabar.Client]:
    """Build clients that talk to the recorder instead of the network."""
    clients: list[namabar.Client] = []

    def _make(**kwargs: Any) -> namabar.Client:
        kwargs.setdefault("transport", httpx.MockTransport(recorder))
        client = namabar.client(**kwargs)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client) -> namabar.Client:
    return make_client()
