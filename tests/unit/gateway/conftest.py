"""Pytest fixtures for forwarding gateway tests."""

import httpx
import pytest

from backlog_assistant.gateway import GatewayConfig, UpstreamForwarder
from tests.utils.mocks import MirrorTransport

PRIMARY = "https://demo.backlog.com/api/v2"
SECONDARY = "https://demo.backlog.jp/api/v2"


@pytest.fixture
def gateway_config():
    return GatewayConfig(upstream_urls=[PRIMARY, SECONDARY])


@pytest.fixture
def mirrors():
    return MirrorTransport()


@pytest.fixture
async def forwarder(gateway_config, mirrors):
    client = httpx.AsyncClient(transport=httpx.MockTransport(mirrors))
    forwarder = UpstreamForwarder(gateway_config, client=client)
    yield forwarder
    await forwarder.aclose()
