"""Tests for the command dispatcher: routing, configuration gate and error wrapping."""

import pytest

from backlog_assistant.commands import (
    HANDLERS,
    NOT_CONFIGURED_MESSAGE,
    CommandDispatcher,
    EntityType,
)
from backlog_assistant.exceptions import UpstreamError
from tests.utils.mocks import mock_backlog_fetcher


def test_every_entity_type_has_a_handler():
    assert set(HANDLERS) == set(EntityType)


@pytest.mark.anyio
@pytest.mark.parametrize(
    "entity_type,action",
    [(entity_type.value, "list") for entity_type in EntityType]
    + [
        ("issues", "create"),
        ("tickets", "list"),
        ("projects", "archive"),
    ],
)
async def test_not_configured_makes_no_calls(make_intent, entity_type, action):
    backlog = mock_backlog_fetcher(configured=False)
    dispatcher = CommandDispatcher(backlog)

    result = await dispatcher.dispatch(
        make_intent(entity_type, action, projectIdOrKey="TEST", summary="Crash")
    )

    assert result.success is False
    assert result.message == NOT_CONFIGURED_MESSAGE
    assert [c for c in backlog.mock_calls if c[0] != "is_configured"] == []


@pytest.mark.anyio
@pytest.mark.parametrize("entity_type", ["tickets", "", "Projects"])
async def test_unknown_entity_type(dispatcher, backlog, make_intent, entity_type):
    result = await dispatcher.dispatch(make_intent(entity_type, "list"))

    assert result.success is False
    assert result.message == f"I don't know how to handle '{entity_type}' commands."
    backlog.request.assert_not_called()


@pytest.mark.anyio
@pytest.mark.parametrize(
    "entity_type,action",
    [
        ("projects", "comments"),
        ("issues", "tags"),
        ("users", "delete"),
        ("wikis", "activities"),
        ("milestones", "get"),
        ("categories", "get"),
        ("issueTypes", "get"),
        ("customFields", "get"),
        ("space", "list"),
        ("space", "explode"),
    ],
)
async def test_unknown_action(dispatcher, make_intent, entity_type, action):
    result = await dispatcher.dispatch(make_intent(entity_type, action))

    assert result.success is False
    assert result.message == f"I don't know how to {action} {entity_type}."


@pytest.mark.anyio
async def test_versions_alias_routes_to_milestones(dispatcher, backlog, make_intent):
    backlog.get_milestones.return_value = [{"id": 1, "name": "v1"}]

    result = await dispatcher.dispatch(
        make_intent("versions", "list", projectIdOrKey="TEST")
    )

    assert result.success is True
    assert result.message == "I found 1 milestones in project TEST:"
    backlog.get_milestones.assert_awaited_once_with("TEST")


@pytest.mark.anyio
async def test_upstream_error_is_wrapped(dispatcher, backlog, make_intent):
    backlog.get_project.side_effect = UpstreamError(
        "HTTP error 404: No project.", status_code=404
    )

    result = await dispatcher.dispatch(
        make_intent("projects", "get", projectIdOrKey="NOPE")
    )

    assert result.success is False
    assert result.message == "Error executing command: HTTP error 404: No project."
    assert result.data is None


@pytest.mark.anyio
async def test_unexpected_error_is_wrapped(dispatcher, backlog, make_intent):
    backlog.get_users.side_effect = RuntimeError("boom")

    result = await dispatcher.dispatch(make_intent("users", "list"))

    assert result.success is False
    assert result.message == "Error executing command: boom"


@pytest.mark.anyio
async def test_missing_param_fails_without_calls(dispatcher, backlog, make_intent):
    result = await dispatcher.dispatch(make_intent("projects", "get"))

    assert result.success is False
    assert result.message == "Please specify a project ID or key"
    backlog.get_project.assert_not_called()


@pytest.mark.anyio
async def test_blank_param_counts_as_missing(dispatcher, backlog, make_intent):
    result = await dispatcher.dispatch(
        make_intent("issues", "get", issueIdOrKey="   ")
    )

    assert result.success is False
    assert result.message == "Please specify an issue ID or key"
    backlog.get_issue.assert_not_called()


@pytest.mark.anyio
async def test_non_numeric_id_fails_without_calls(dispatcher, backlog, make_intent):
    result = await dispatcher.dispatch(make_intent("users", "get", userId="alice"))

    assert result.success is False
    assert result.message == "userId must be a number (got 'alice')"
    backlog.get_user.assert_not_called()


@pytest.mark.anyio
async def test_dispatcher_keeps_no_state(dispatcher, backlog, make_intent):
    """Two identical dispatches give identical results."""
    backlog.get_projects.return_value = [{"id": 1, "name": "Test"}]
    intent = make_intent("projects", "list")

    first = await dispatcher.dispatch(intent)
    second = await dispatcher.dispatch(intent)

    assert first == second
    assert backlog.get_projects.await_count == 2
