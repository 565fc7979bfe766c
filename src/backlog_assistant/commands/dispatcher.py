"""Command dispatcher: routes an intent to its entity handler."""

import logging

from ..backlog import BacklogFetcher
from ..logging_config import log_operation
from .base import CommandHandler
from .categories import CategoryCommands
from .custom_fields import CustomFieldCommands
from .issue_types import IssueTypeCommands
from .issues import IssueCommands
from .milestones import MilestoneCommands
from .models import CommandResult, EntityType, Intent
from .projects import ProjectCommands
from .space import SpaceCommands
from .users import UserCommands
from .wikis import WikiCommands

logger = logging.getLogger("backlog-assistant.commands")

NOT_CONFIGURED_MESSAGE = (
    "⚠️ Backlog API is not configured. "
    "Please set up your API credentials in the Settings page."
)

HANDLERS: dict[EntityType, type[CommandHandler]] = {
    EntityType.PROJECTS: ProjectCommands,
    EntityType.ISSUES: IssueCommands,
    EntityType.USERS: UserCommands,
    EntityType.WIKIS: WikiCommands,
    EntityType.MILESTONES: MilestoneCommands,
    EntityType.CATEGORIES: CategoryCommands,
    EntityType.ISSUE_TYPES: IssueTypeCommands,
    EntityType.CUSTOM_FIELDS: CustomFieldCommands,
    EntityType.SPACE: SpaceCommands,
}


class CommandDispatcher:
    """Turns intents into Backlog API calls and uniform results.

    The dispatcher keeps no state between calls. Every failure, including
    upstream errors, comes back as an unsuccessful :class:`CommandResult`.
    """

    def __init__(self, backlog: BacklogFetcher) -> None:
        self.backlog = backlog
        self.handlers: dict[EntityType, CommandHandler] = {
            entity: handler_cls(backlog) for entity, handler_cls in HANDLERS.items()
        }

    async def dispatch(self, intent: Intent) -> CommandResult:
        """Execute one intent.

        Args:
            intent: The structured command to run

        Returns:
            The result of the command; never raises
        """
        if not self.backlog.is_configured():
            return CommandResult.fail(NOT_CONFIGURED_MESSAGE)

        with log_operation(
            logger, "dispatch", entity=intent.entity_type, action=intent.action
        ):
            try:
                entity = EntityType.resolve(intent.entity_type)
                if entity is None:
                    return CommandResult.fail(
                        f"I don't know how to handle '{intent.entity_type}' commands."
                    )
                return await self.handlers[entity].handle(intent)
            except Exception as e:
                logger.error(
                    f"Error executing command {intent.entity_type}:{intent.action}: {e}",
                    exc_info=True,
                )
                return CommandResult.fail(f"Error executing command: {str(e)}")
