"""LLM-backed translation of free text into structured intents."""

import json
import logging
import os
from typing import Any

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from ..commands.models import Intent
from .prompt import SYSTEM_PROMPT

logger = logging.getLogger("backlog-assistant.intent")

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.3


class IntentParser:
    """Asks a chat model for a ``{type, action, params}`` JSON object.

    The parser is a black box to the dispatcher: it either yields an
    :class:`Intent` or None.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.client = client
        if self.client is None and api_key:
            self.client = AsyncOpenAI(api_key=api_key)

    @classmethod
    def from_env(cls) -> "IntentParser":
        """Create a parser from OPENAI_API_KEY and OPENAI_MODEL."""
        return cls(
            api_key=os.getenv("OPENAI_API_KEY"),
            model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        )

    def is_configured(self) -> bool:
        return self.client is not None

    async def complete(self, message: str) -> dict[str, Any]:
        """Send the message to the model and decode its JSON answer.

        Raises:
            ValueError: If the model answered with no content or invalid JSON
            OpenAIError: If the API call fails
        """
        if self.client is None:
            raise ValueError("OpenAI client is not configured")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError("Empty response from OpenAI")
        return json.loads(content)

    async def parse(self, message: str) -> Intent | None:
        """Translate one user message into an intent.

        Args:
            message: Free text typed by the user

        Returns:
            The intent, or None if the parser is unconfigured, the model could
            not understand the message, or the call failed
        """
        if not self.is_configured():
            logger.warning("OpenAI is not configured; cannot parse commands")
            return None

        try:
            result = await self.complete(message)
        except (OpenAIError, ValueError) as e:
            logger.error(f"Error parsing command with OpenAI: {e}")
            return None

        if not isinstance(result, dict) or result.get("error"):
            logger.info(
                "OpenAI couldn't understand the command: "
                f"{result.get('error') if isinstance(result, dict) else result}"
            )
            return None

        try:
            return Intent(
                type=result.get("type"),
                action=result.get("action"),
                params=result.get("params") or {},
                rawCommand=message,
            )
        except ValidationError as e:
            logger.error(f"OpenAI returned an invalid command: {e}")
            return None
