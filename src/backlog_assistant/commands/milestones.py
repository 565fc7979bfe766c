"""Milestone (version) commands."""

from typing import Any

from .base import (
    ActionHandler,
    CommandHandler,
    compact,
    count,
    is_missing,
    to_int,
    without,
)
from .models import Action, CommandResult, EntityType


class MilestoneCommands(CommandHandler):
    """Handles ``milestones`` intents (also reached as ``versions``)."""

    entity = EntityType.MILESTONES

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_milestones,
            Action.CREATE: self.create_milestone,
            Action.UPDATE: self.update_milestone,
            Action.DELETE: self.delete_milestone,
        }

    async def list_milestones(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project_id_or_key = params["projectIdOrKey"]
        milestones = await self.backlog.get_milestones(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(milestones)} milestones in project {project_id_or_key}:",
            milestones=milestones or [],
        )

    async def create_milestone(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "name"):
            return CommandResult.fail(
                "Please provide a project ID/key and name for the milestone"
            )

        milestone = await self.backlog.create_milestone(
            params["projectIdOrKey"],
            compact(
                name=params["name"],
                description=params.get("description"),
                startDate=params.get("startDate"),
                releaseDueDate=params.get("releaseDueDate"),
            ),
        )
        return CommandResult.ok(
            f'Successfully created milestone "{milestone.get("name", params["name"])}"',
            milestone=milestone,
        )

    async def update_milestone(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "versionId"):
            return CommandResult.fail(
                "Please specify a project ID/key and version ID to update"
            )

        milestone = await self.backlog.update_milestone(
            params["projectIdOrKey"],
            to_int(params, "versionId"),
            without(params, "projectIdOrKey", "versionId"),
        )
        return CommandResult.ok(
            f'Successfully updated milestone "{milestone.get("name")}"',
            milestone=milestone,
        )

    async def delete_milestone(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "versionId"):
            return CommandResult.fail(
                "Please specify a project ID/key and version ID to delete"
            )

        version_id = to_int(params, "versionId")
        await self.backlog.delete_milestone(params["projectIdOrKey"], version_id)
        return CommandResult.ok(f"Successfully deleted milestone with ID {version_id}")
