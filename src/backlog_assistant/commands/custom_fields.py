"""Custom field commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing, to_int, without
from .models import Action, CommandResult, EntityType


class CustomFieldCommands(CommandHandler):
    """Handles ``customFields`` intents."""

    entity = EntityType.CUSTOM_FIELDS

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_custom_fields,
            Action.CREATE: self.create_custom_field,
            Action.UPDATE: self.update_custom_field,
            Action.DELETE: self.delete_custom_field,
        }

    async def list_custom_fields(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project_id_or_key = params["projectIdOrKey"]
        custom_fields = await self.backlog.get_custom_fields(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(custom_fields)} custom fields in project {project_id_or_key}:",
            customFields=custom_fields or [],
        )

    async def create_custom_field(self, params: dict[str, Any]) -> CommandResult:
        """Create a custom field; extra params (description, required, items...) pass through."""
        if is_missing(params, "projectIdOrKey", "typeId", "name"):
            return CommandResult.fail(
                "Please provide a project ID/key, type ID, and name for the custom field"
            )

        custom_field = await self.backlog.create_custom_field(
            params["projectIdOrKey"],
            {
                **without(params, "projectIdOrKey"),
                "typeId": to_int(params, "typeId"),
                "name": params["name"],
            },
        )
        return CommandResult.ok(
            f'Successfully created custom field "{custom_field.get("name", params["name"])}"',
            customField=custom_field,
        )

    async def update_custom_field(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "customFieldId"):
            return CommandResult.fail(
                "Please specify a project ID/key and custom field ID"
            )

        custom_field = await self.backlog.update_custom_field(
            params["projectIdOrKey"],
            to_int(params, "customFieldId"),
            without(params, "projectIdOrKey", "customFieldId"),
        )
        return CommandResult.ok(
            f'Successfully updated custom field "{custom_field.get("name")}"',
            customField=custom_field,
        )

    async def delete_custom_field(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "customFieldId"):
            return CommandResult.fail(
                "Please specify a project ID/key and custom field ID to delete"
            )

        custom_field_id = to_int(params, "customFieldId")
        await self.backlog.delete_custom_field(params["projectIdOrKey"], custom_field_id)
        return CommandResult.ok(
            f"Successfully deleted custom field with ID {custom_field_id}"
        )
