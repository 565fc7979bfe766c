"""Tests for the Backlog configuration module."""

import os
from unittest.mock import patch

import pytest

from backlog_assistant.backlog.config import BacklogConfig, relay_url_from_env
from backlog_assistant.backlog.constants import DEFAULT_RELAY_URL


def test_backlog_config_basic():
    config = BacklogConfig(api_key="key", space_id="space")

    assert config.api_key == "key"
    assert config.space_id == "space"
    assert config.base_url is None


def test_backlog_config_strips_base_url():
    config = BacklogConfig(
        api_key="key", space_id="space", base_url="https://relay.example.com/api/"
    )

    assert config.base_url == "https://relay.example.com/api"


@pytest.mark.parametrize(
    "api_key,space_id,message",
    [
        ("", "space", "API key"),
        ("key", "", "space ID"),
    ],
)
def test_backlog_config_requires_credentials(api_key, space_id, message):
    with pytest.raises(ValueError) as excinfo:
        BacklogConfig(api_key=api_key, space_id=space_id)

    assert message in str(excinfo.value)


def test_backlog_config_equality():
    """Equal values make equal configurations, so reconfiguring can be skipped."""
    assert BacklogConfig("key", "space") == BacklogConfig("key", "space")
    assert BacklogConfig("key", "space") != BacklogConfig("key", "other")


def test_from_env_success(mock_env_vars):
    config = BacklogConfig.from_env()

    assert config == BacklogConfig(api_key="test-api-key", space_id="test-space")


def test_from_env_with_base_url(mock_env_vars):
    with patch.dict(os.environ, {"BACKLOG_BASE_URL": "http://proxy:8080/api"}):
        config = BacklogConfig.from_env()

    assert config.base_url == "http://proxy:8080/api"


@pytest.mark.parametrize("missing", ["BACKLOG_API_KEY", "BACKLOG_SPACE_ID"])
def test_from_env_missing_returns_none(mock_env_vars, missing):
    with patch.dict(os.environ, {missing: ""}):
        assert BacklogConfig.from_env() is None


def test_relay_url_from_env():
    with patch.dict(os.environ, {}, clear=True):
        assert relay_url_from_env() == DEFAULT_RELAY_URL

    with patch.dict(os.environ, {"BACKLOG_RELAY_URL": "http://gateway:9000/api/"}):
        assert relay_url_from_env() == "http://gateway:9000/api"
