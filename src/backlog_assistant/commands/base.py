"""Base class and parameter helpers for entity command handlers."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, ClassVar

from ..backlog import BacklogFetcher
from ..exceptions import InvalidParameterError
from .models import Action, CommandResult, EntityType, Intent

logger = logging.getLogger("backlog-assistant.commands")

ActionHandler = Callable[[dict[str, Any]], Awaitable[CommandResult]]


def is_missing(params: dict[str, Any], *names: str) -> bool:
    """True if any of the named params is absent or blank."""
    for name in names:
        value = params.get(name)
        if value is None:
            return True
        if isinstance(value, str) and not value.strip():
            return True
    return False


def to_int(params: dict[str, Any], name: str) -> int:
    """Coerce a numeric id param, which usually arrives as a string.

    Raises:
        InvalidParameterError: If the value is not an integer
    """
    value = params[name]
    if isinstance(value, bool):
        raise InvalidParameterError(name, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidParameterError(name, value) from None


def without(params: dict[str, Any], *names: str) -> dict[str, Any]:
    """Copy of ``params`` without the named keys."""
    return {key: value for key, value in params.items() if key not in names}


def compact(**fields: Any) -> dict[str, Any]:
    """Keyword arguments whose value is not None."""
    return {key: value for key, value in fields.items() if value is not None}


def count(items: Any) -> int:
    return len(items) if items else 0


class CommandHandler:
    """Routes the actions of one entity type to coroutines.

    Subclasses set ``entity`` and return their action table from
    :meth:`actions`.
    """

    entity: ClassVar[EntityType]

    def __init__(self, backlog: BacklogFetcher) -> None:
        self.backlog = backlog

    def actions(self) -> dict[Action, ActionHandler]:
        raise NotImplementedError

    async def handle(self, intent: Intent) -> CommandResult:
        """Run the intent's action, or explain that it is not supported."""
        action = Action.resolve(intent.action)
        handler = self.actions().get(action) if action else None
        if handler is None:
            return CommandResult.fail(
                f"I don't know how to {intent.action} {intent.entity_type}."
            )

        try:
            return await handler(dict(intent.params))
        except InvalidParameterError as e:
            logger.info(f"Rejected {intent.entity_type}:{intent.action}: {e}")
            return CommandResult.fail(str(e))
