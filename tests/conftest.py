"""Shared test fixtures."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from yql_driver.db.connection import open_connection

ENDPOINT = "https://query.yahooapis.com/v1/public/yql"

Handler = Callable[[httpx.Request], httpx.Response]


class FakePinPrompt:
    """Records authorization URLs and answers with a fixed PIN."""

    def __init__(self, pin: str = "1234"):
        self.pin = pin
        self.urls: list[str] = []

    def __call__(self, authorization_url: str) -> str:
        self.urls.append(authorization_url)
        return self.pin


def envelope(results: Any) -> dict[str, Any]:
    """Wrap ``results`` the way YQL does."""
    return {"query": {"count": 1, "lang": "en-US", "results": results}}


def json_handler(body: Any, captured: list[httpx.Request] | None = None) -> Handler:
    """Handler answering every request with ``body`` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep YQL_* variables from the developer's shell out of the tests."""
    for name in (
        "YQL_ENDPOINT",
        "YQL_REQUEST_TOKEN_URL",
        "YQL_AUTHORIZE_URL",
        "YQL_ACCESS_TOKEN_URL",
        "YQL_TIMEOUT",
        "YQL_DSN",
        "YQL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def connect():
    """Factory opening public-mode connections over a mock transport."""
    clients: list[httpx.Client] = []

    def _connect(handler: Handler, dsn: str = ""):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return open_connection(dsn, http_client=client)

    yield _connect
    for client in clients:
        client.close()
