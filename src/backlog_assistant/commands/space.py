"""Space commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing
from .models import Action, CommandResult, EntityType


class SpaceCommands(CommandHandler):
    """Handles ``space`` intents."""

    entity = EntityType.SPACE

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.GET: self.get_space,
            Action.ACTIVITIES: self.list_activities,
            Action.NOTIFICATION: self.get_notification,
            Action.UPDATE_NOTIFICATION: self.update_notification,
        }

    async def get_space(self, params: dict[str, Any]) -> CommandResult:
        space = await self.backlog.get_space()
        return CommandResult.ok(
            "Here's information about your Backlog space:", space=space
        )

    async def list_activities(self, params: dict[str, Any]) -> CommandResult:
        activities = await self.backlog.get_space_activities(**params)
        return CommandResult.ok(
            f"I found {count(activities)} activities in your Backlog space:",
            activities=activities or [],
        )

    async def get_notification(self, params: dict[str, Any]) -> CommandResult:
        notification = await self.backlog.get_space_notification()
        return CommandResult.ok(
            "Here's the current space notification:", notification=notification
        )

    async def update_notification(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "content"):
            return CommandResult.fail("Please provide content for the notification")

        notification = await self.backlog.update_space_notification(params["content"])
        return CommandResult.ok(
            "Successfully updated space notification", notification=notification
        )
