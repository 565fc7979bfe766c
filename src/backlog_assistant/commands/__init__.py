"""Command dispatching from structured intents to Backlog API calls."""

from .dispatcher import HANDLERS, NOT_CONFIGURED_MESSAGE, CommandDispatcher
from .models import Action, CommandResult, EntityType, Intent

__all__ = [
    "Action",
    "CommandDispatcher",
    "CommandResult",
    "EntityType",
    "HANDLERS",
    "Intent",
    "NOT_CONFIGURED_MESSAGE",
]
