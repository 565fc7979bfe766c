"""Pytest fixtures for Backlog API client tests."""

import os
from unittest.mock import patch

import httpx
import pytest

from backlog_assistant.backlog import BacklogFetcher
from backlog_assistant.backlog.config import BacklogConfig
from tests.utils.mocks import RecordingTransport

RELAY_URL = "http://localhost:3001/api"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for the Backlog client."""
    with patch.dict(
        os.environ,
        {
            "BACKLOG_API_KEY": "test-api-key",
            "BACKLOG_SPACE_ID": "test-space",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def backlog_config():
    """Create a BacklogConfig instance for tests."""
    return BacklogConfig(api_key="test-api-key", space_id="test-space")


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
async def backlog_fetcher(backlog_config, transport):
    """BacklogFetcher whose session answers through the recording transport."""
    fetcher = BacklogFetcher(backlog_config, relay_url=RELAY_URL)
    real_session = fetcher.session
    fetcher.session = httpx.AsyncClient(
        base_url=real_session.base_url,
        params=real_session.params,
        headers=real_session.headers,
        transport=httpx.MockTransport(transport),
    )
    await real_session.aclose()
    yield fetcher
    await fetcher.aclose()
