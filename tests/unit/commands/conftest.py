"""Pytest fixtures for command dispatcher tests."""

import pytest

from backlog_assistant.commands import CommandDispatcher, Intent
from tests.utils.mocks import mock_backlog_fetcher


@pytest.fixture
def backlog():
    """Configured BacklogFetcher mock."""
    return mock_backlog_fetcher()


@pytest.fixture
def dispatcher(backlog):
    return CommandDispatcher(backlog)


@pytest.fixture
def make_intent():
    """Build an intent the way the parser hands it over."""

    def _make(entity_type: str, action: str, **params) -> Intent:
        return Intent(
            type=entity_type,
            action=action,
            params=params,
            rawCommand=f"{action} {entity_type}",
        )

    return _make
