"""User commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing, to_int
from .models import Action, CommandResult, EntityType


class UserCommands(CommandHandler):
    """Handles ``users`` intents."""

    entity = EntityType.USERS

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_users,
            Action.GET: self.get_user,
            Action.ACTIVITIES: self.list_activities,
        }

    async def list_users(self, params: dict[str, Any]) -> CommandResult:
        users = await self.backlog.get_users()
        return CommandResult.ok(f"I found {count(users)} users:", users=users or [])

    async def get_user(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "userId"):
            return CommandResult.fail("Please specify a user ID")

        user = await self.backlog.get_user(to_int(params, "userId"))
        return CommandResult.ok(
            f"Here's information about user {user.get('name')}:", user=user
        )

    async def list_activities(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "userId"):
            return CommandResult.fail("Please specify a user ID to get activities")

        user_id = to_int(params, "userId")
        activities = await self.backlog.get_user_activities(user_id)
        return CommandResult.ok(
            f"I found {count(activities)} activities for user {user_id}:",
            activities=activities or [],
        )
