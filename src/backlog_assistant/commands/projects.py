"""Project commands."""

from typing import Any

from .base import ActionHandler, CommandHandler, count, is_missing, without
from .models import Action, CommandResult, EntityType


class ProjectCommands(CommandHandler):
    """Handles ``projects`` intents."""

    entity = EntityType.PROJECTS

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_projects,
            Action.GET: self.get_project,
            Action.CREATE: self.create_project,
            Action.UPDATE: self.update_project,
            Action.DELETE: self.delete_project,
        }

    async def list_projects(self, params: dict[str, Any]) -> CommandResult:
        projects = await self.backlog.get_projects()
        return CommandResult.ok(
            f"I found {count(projects)} projects:", projects=projects or []
        )

    async def get_project(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project = await self.backlog.get_project(params["projectIdOrKey"])
        return CommandResult.ok(
            f"Here's information about project {project.get('name')}:",
            project=project,
        )

    async def create_project(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "name", "key"):
            return CommandResult.fail("Please provide a name and key for the project")

        project = await self.backlog.create_project(params)
        return CommandResult.ok(
            f'Successfully created project "{project.get("name", params["name"])}" '
            f'with key {project.get("projectKey", params["key"])}',
            project=project,
        )

    async def update_project(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project = await self.backlog.update_project(
            params["projectIdOrKey"], without(params, "projectIdOrKey")
        )
        return CommandResult.ok(
            f'Successfully updated project "{project.get("name")}"', project=project
        )

    async def delete_project(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key to delete")

        await self.backlog.delete_project(params["projectIdOrKey"])
        return CommandResult.ok(
            f"Successfully deleted project {params['projectIdOrKey']}"
        )
