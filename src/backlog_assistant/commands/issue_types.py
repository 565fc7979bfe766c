"""Issue type commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing, to_int, without
from .models import Action, CommandResult, EntityType


class IssueTypeCommands(CommandHandler):
    """Handles ``issueTypes`` intents."""

    entity = EntityType.ISSUE_TYPES

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_issue_types,
            Action.CREATE: self.create_issue_type,
            Action.UPDATE: self.update_issue_type,
            Action.DELETE: self.delete_issue_type,
        }

    async def list_issue_types(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project_id_or_key = params["projectIdOrKey"]
        issue_types = await self.backlog.get_issue_types(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(issue_types)} issue types in project {project_id_or_key}:",
            issueTypes=issue_types or [],
        )

    async def create_issue_type(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "name", "color"):
            return CommandResult.fail(
                "Please provide a project ID/key, name, and color for the issue type"
            )

        issue_type = await self.backlog.create_issue_type(
            params["projectIdOrKey"], {"name": params["name"], "color": params["color"]}
        )
        return CommandResult.ok(
            f'Successfully created issue type "{issue_type.get("name", params["name"])}"',
            issueType=issue_type,
        )

    async def update_issue_type(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "issueTypeId"):
            return CommandResult.fail(
                "Please specify a project ID/key and issue type ID"
            )

        issue_type = await self.backlog.update_issue_type(
            params["projectIdOrKey"],
            to_int(params, "issueTypeId"),
            without(params, "projectIdOrKey", "issueTypeId"),
        )
        return CommandResult.ok(
            f'Successfully updated issue type to "{issue_type.get("name")}"',
            issueType=issue_type,
        )

    async def delete_issue_type(self, params: dict[str, Any]) -> CommandResult:
        """Delete an issue type; its issues move to ``substituteIssueTypeId``."""
        if is_missing(params, "projectIdOrKey", "issueTypeId", "substituteIssueTypeId"):
            return CommandResult.fail(
                "Please specify a project ID/key, issue type ID to delete, "
                "and substitute issue type ID"
            )

        issue_type_id = to_int(params, "issueTypeId")
        await self.backlog.delete_issue_type(
            params["projectIdOrKey"],
            issue_type_id,
            to_int(params, "substituteIssueTypeId"),
        )
        return CommandResult.ok(
            f"Successfully deleted issue type with ID {issue_type_id}"
        )
