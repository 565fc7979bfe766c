"""Wiki page commands."""

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


class WikiCommands(CommandHandler):
    """Handles ``wikis`` intents."""

    entity = EntityType.WIKIS

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_wikis,
            Action.GET: self.get_wiki,
            Action.CREATE: self.create_wiki,
            Action.UPDATE: self.update_wiki,
            Action.DELETE: self.delete_wiki,
            Action.TAGS: self.list_tags,
        }

    async def list_wikis(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")

        project_id_or_key = params["projectIdOrKey"]
        wikis = await self.backlog.get_wikis(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(wikis)} wikis in project {project_id_or_key}:",
            wikis=wikis or [],
        )

    async def get_wiki(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "wikiId"):
            return CommandResult.fail("Please specify a wiki ID")

        wiki = await self.backlog.get_wiki(to_int(params, "wikiId"))
        return CommandResult.ok(
            f"Here's information about wiki {wiki.get('name')}:", wiki=wiki
        )

    async def create_wiki(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectId", "name", "content"):
            return CommandResult.fail(
                "Please provide projectId, name, and content for the wiki"
            )

        wiki = await self.backlog.create_wiki(
            compact(
                projectId=to_int(params, "projectId"),
                name=params["name"],
                content=params["content"],
                mailNotify=params.get("mailNotify"),
            )
        )
        return CommandResult.ok(
            f'Successfully created wiki "{wiki.get("name", params["name"])}"', wiki=wiki
        )

    async def update_wiki(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "wikiId"):
            return CommandResult.fail("Please specify a wiki ID to update")

        wiki = await self.backlog.update_wiki(
            to_int(params, "wikiId"), without(params, "wikiId")
        )
        return CommandResult.ok(
            f'Successfully updated wiki "{wiki.get("name")}"', wiki=wiki
        )

    async def delete_wiki(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "wikiId"):
            return CommandResult.fail("Please specify a wiki ID to delete")

        await self.backlog.delete_wiki(to_int(params, "wikiId"))
        return CommandResult.ok(f"Successfully deleted wiki {params['wikiId']}")

    async def list_tags(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail(
                "Please specify a project ID or key to get wiki tags"
            )

        project_id_or_key = params["projectIdOrKey"]
        tags = await self.backlog.get_wiki_tags(project_id_or_key)
        return CommandResult.ok(
            f"I found {count(tags)} wiki tags in project {project_id_or_key}:",
            tags=tags or [],
        )
