"""Reusable mock transports and fetchers for Backlog Assistant tests."""

import json
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx

from backlog_assistant.backlog import BacklogFetcher


class RecordingTransport:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: dict[tuple[str, str], dict] = {}

    def add(self, method: str, path: str, **response_kwargs) -> None:
        self.responses[(method, path)] = response_kwargs

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response_kwargs = self.responses.get(
            (request.method, request.url.path), {"status_code": 200, "json": {}}
        )
        return httpx.Response(**response_kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None


class MirrorTransport:
    """Routes requests to per-mirror handlers and records which mirror was hit."""

    def __init__(self) -> None:
        self.handlers: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: list[httpx.Request] = []

    def on(self, host: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.handlers[host] = handler

    def hosts(self) -> list[str]:
        return [request.url.host for request in self.calls]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self.handlers[request.url.host](request)


def respond(
    status_code: int = 200, **kwargs
) -> Callable[[httpx.Request], httpx.Response]:
    """Handler answering every request with the same response."""
    return lambda request: httpx.Response(status_code, **kwargs)


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def mock_backlog_fetcher(configured: bool = True) -> MagicMock:
    """BacklogFetcher stand-in whose API operations are AsyncMocks."""
    fetcher = MagicMock(spec=BacklogFetcher)
    for name in dir(BacklogFetcher):
        if name.startswith(("get_", "create_", "update_", "delete_", "add_")):
            setattr(fetcher, name, AsyncMock())
    fetcher.request = AsyncMock()
    fetcher.aclose = AsyncMock()
    fetcher.is_configured = MagicMock(return_value=configured)
    return fetcher
