"""Shared fixtures: settings, a fixed clock and mock-transport vault clients."""

from collections.abc import Callable
from datetime import datetime, timezone

import httpx
import pytest

from obsidian_bridge.config import BridgeSettings
from obsidian_bridge.core.obsidian_client import ObsidianClient

FIXED_NOW = datetime(2025, 10, 27, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> BridgeSettings:
    return BridgeSettings(api_key="secret-key", base_url="http://obsidian.test:27123")


@pytest.fixture
def make_client(settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], ObsidianClient]:
    """Build an ObsidianClient whose HTTP calls are answered by ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> ObsidianClient:
        return ObsidianClient(
            settings,
            transport=httpx.MockTransport(handler),
            clock=lambda: FIXED_NOW,
        )

    return factory


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def recorder() -> type[RecordingHandler]:
    return RecordingHandler
