"""Glue between the intent parser and the command dispatcher."""

import logging

from ..commands import CommandDispatcher, CommandResult
from .parser import IntentParser

logger = logging.getLogger("backlog-assistant.intent")

NOT_UNDERSTOOD_MESSAGE = (
    "I'm sorry, but I don't understand that command. "
    "Try asking for projects, issues, or creating an issue."
)


class Assistant:
    """Answers one user message: parse it, then dispatch the intent."""

    def __init__(self, parser: IntentParser, dispatcher: CommandDispatcher) -> None:
        self.parser = parser
        self.dispatcher = dispatcher

    async def handle(self, message: str) -> CommandResult:
        intent = await self.parser.parse(message)
        if intent is None:
            return CommandResult.fail(NOT_UNDERSTOOD_MESSAGE)

        logger.debug(f"Parsed intent {intent.entity_type}:{intent.action}")
        return await self.dispatcher.dispatch(intent)
