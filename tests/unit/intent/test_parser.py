"""Tests for the OpenAI-backed intent parser."""

import json
import os
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from backlog_assistant.intent import IntentParser
from backlog_assistant.intent.prompt import SYSTEM_PROMPT


def completion(content: str | None) -> MagicMock:
    """Build a chat completion response carrying ``content``."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def parser(openai_client):
    return IntentParser(client=openai_client)


def test_parser_unconfigured_without_key():
    assert IntentParser().is_configured() is False


def test_from_env():
    env = {"OPENAI_API_KEY": "sk-test", "OPENAI_MODEL": "gpt-4o"}
    with patch.dict(os.environ, env, clear=True):
        parser = IntentParser.from_env()

    assert parser.is_configured() is True
    assert parser.model == "gpt-4o"


def test_from_env_without_key():
    with patch.dict(os.environ, {}, clear=True):
        parser = IntentParser.from_env()

    assert parser.is_configured() is False
    assert parser.model == "gpt-4o-mini"


@pytest.mark.anyio
async def test_parse_unconfigured_returns_none():
    assert await IntentParser().parse("list projects") is None


@pytest.mark.anyio
async def test_parse_builds_intent(parser, openai_client):
    openai_client.chat.completions.create.return_value = completion(
        json.dumps(
            {"type": "issues", "action": "get", "params": {"issueIdOrKey": "TEST-1"}}
        )
    )

    intent = await parser.parse("Show me issue TEST-1")

    assert intent.entity_type == "issues"
    assert intent.action == "get"
    assert intent.params == {"issueIdOrKey": "TEST-1"}
    assert intent.raw_text == "Show me issue TEST-1"


@pytest.mark.anyio
async def test_parse_request_shape(parser, openai_client):
    openai_client.chat.completions.create.return_value = completion(
        '{"type": "projects", "action": "list", "params": {}}'
    )

    await parser.parse("list my projects")

    kwargs = openai_client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-4o-mini"
    assert kwargs["temperature"] == 0.3
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"] == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "list my projects"},
    ]


@pytest.mark.anyio
async def test_parse_missing_params_default_to_empty(parser, openai_client):
    openai_client.chat.completions.create.return_value = completion(
        '{"type": "projects", "action": "list"}'
    )

    intent = await parser.parse("projects")

    assert intent.params == {}


@pytest.mark.anyio
@pytest.mark.parametrize(
    "content",
    [
        '{"error": "Could not understand the command"}',
        '{"action": "list"}',
        '["projects", "list"]',
        "not json at all",
        "",
        None,
    ],
)
async def test_parse_unusable_answers_return_none(parser, openai_client, content):
    openai_client.chat.completions.create.return_value = completion(content)

    assert await parser.parse("make me a sandwich") is None


@pytest.mark.anyio
async def test_parse_api_error_returns_none(parser, openai_client):
    openai_client.chat.completions.create.side_effect = openai.APIConnectionError(
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    )

    assert await parser.parse("list projects") is None
