"""Category commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing, to_int
from .models import Action, CommandResult, EntityType


class CategoryCommands(CommandHandler):
    """Handles ``categories`` intents."""

    entity = EntityType.CATEGORIES

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_categories,
            Action.CREATE: self.create_category,
            Action.UPDATE: self.update_category,
            Action.DELETE: self.delete_category,
        }

    async def list_categories(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project_id_or_key = params["projectIdOrKey"]
        categories = await self.backlog.get_categories(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(categories)} categories in project {project_id_or_key}:",
            categories=categories or [],
        )

    async def create_category(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "name"):
            return CommandResult.fail(
                "Please provide a project ID/key and name for the category"
            )

        category = await self.backlog.create_category(
            params["projectIdOrKey"], params["name"]
        )
        return CommandResult.ok(
            f'Successfully created category "{category.get("name", params["name"])}"',
            category=category,
        )

    async def update_category(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "categoryId", "name"):
            return CommandResult.fail(
                "Please specify a project ID/key, category ID, and new name"
            )

        category = await self.backlog.update_category(
            params["projectIdOrKey"], to_int(params, "categoryId"), params["name"]
        )
        return CommandResult.ok(
            f'Successfully updated category to "{category.get("name", params["name"])}"',
            category=category,
        )

    async def delete_category(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey", "categoryId"):
            return CommandResult.fail(
                "Please specify a project ID/key and category ID to delete"
            )

        category_id = to_int(params, "categoryId")
        await self.backlog.delete_category(params["projectIdOrKey"], category_id)
        return CommandResult.ok(f"Successfully deleted category with ID {category_id}")
