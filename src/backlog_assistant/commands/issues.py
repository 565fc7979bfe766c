"""Issue commands, including the compound create and project-scoped list."""

import logging
from typing import Any

from ..backlog.constants import PRIORITY_NORMAL
from .base import ActionHandler, CommandHandler, count, is_missing, without
from .models import Action, CommandResult, EntityType

logger = logging.getLogger("backlog-assistant.commands")

DEFAULT_PRIORITY_ID = PRIORITY_NORMAL


class IssueCommands(CommandHandler):
    """Handles ``issues`` intents."""

    entity = EntityType.ISSUES

    def actions(self) -> dict[Action, ActionHandler]:
        return {
            Action.LIST: self.list_issues,
            Action.GET: self.get_issue,
            Action.CREATE: self.create_issue,
            Action.UPDATE: self.update_issue,
            Action.DELETE: self.delete_issue,
            Action.COMMENTS: self.list_comments,
            Action.ADD_COMMENT: self.add_comment,
        }

    async def list_issues(self, params: dict[str, Any]) -> CommandResult:
        """List issues, scoped to one project when ``projectIdOrKey`` is given.

        The issue list endpoint filters on numeric project ids, so a key is
        first resolved through the project lookup.
        """
        if is_missing(params, "projectIdOrKey"):
            issues = await self.backlog.get_issues()
            return CommandResult.ok(
                f"I found {count(issues)} issues across all projects:",
                issues=issues or [],
            )

        project = await self.backlog.get_project(params["projectIdOrKey"])
        issues = await self.backlog.get_issues(project_ids=[project["id"]])
        return CommandResult.ok(
            f"I found {count(issues)} issues in project {project.get('name')}:",
            issues=issues or [],
            projectName=project.get("name"),
        )

    async def get_issue(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "issueIdOrKey"):
            return CommandResult.fail("Please specify an issue ID or key")

        issue_id_or_key = params["issueIdOrKey"]
        issue = await self.backlog.get_issue(issue_id_or_key)
        return CommandResult.ok(
            f"Here's information about issue {issue.get('issueKey', issue_id_or_key)}:",
            issue=issue,
        )

    async def create_issue(self, params: dict[str, Any]) -> CommandResult:
        """Create an issue in three dependent steps.

        1. Resolve the project to its numeric id.
        2. Fetch the project's issue types; the first one is used.
        3. Create the issue with the default (Normal) priority.
        """
        if is_missing(params, "projectIdOrKey"):
            return CommandResult.fail("Please specify a project ID or key")
        if is_missing(params, "summary"):
            return CommandResult.fail("Please provide a summary for the issue")

        project_id_or_key = params["projectIdOrKey"]
        project = await self.backlog.get_project(project_id_or_key)

        issue_types = await self.backlog.get_issue_types(project_id_or_key)
        if not issue_types:
            return CommandResult.fail("No issue types found for this project")

        issue_type_id = issue_types[0]["id"]
        logger.debug(
            f"Creating issue in project {project['id']} with issue type {issue_type_id}"
        )

        issue = await self.backlog.create_issue(
            {
                "projectId": project["id"],
                "summary": params["summary"],
                "description": params.get("description") or "",
                "issueTypeId": issue_type_id,
                "priorityId": DEFAULT_PRIORITY_ID,
            }
        )
        return CommandResult.ok(
            f'Successfully created issue "{issue.get("summary", params["summary"])}" '
            f"with key {issue.get('issueKey')}",
            issue=issue,
        )

    async def update_issue(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "issueIdOrKey"):
            return CommandResult.fail("Please specify an issue ID or key to update")

        issue = await self.backlog.update_issue(
            params["issueIdOrKey"], without(params, "issueIdOrKey")
        )
        return CommandResult.ok(
            f"Successfully updated issue {issue.get('issueKey', params['issueIdOrKey'])}",
            issue=issue,
        )

    async def delete_issue(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "issueIdOrKey"):
            return CommandResult.fail("Please specify an issue ID or key to delete")

        await self.backlog.delete_issue(params["issueIdOrKey"])
        return CommandResult.ok(f"Successfully deleted issue {params['issueIdOrKey']}")

    async def list_comments(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "issueIdOrKey"):
            return CommandResult.fail(
                "Please specify an issue ID or key to get comments"
            )

        issue_id_or_key = params["issueIdOrKey"]
        comments = await self.backlog.get_issue_comments(issue_id_or_key)
        return CommandResult.ok(
            f"I found {count(comments)} comments for issue {issue_id_or_key}:",
            comments=comments or [],
            issueIdOrKey=issue_id_or_key,
        )

    async def add_comment(self, params: dict[str, Any]) -> CommandResult:
        if is_missing(params, "issueIdOrKey"):
            return CommandResult.fail(
                "Please specify an issue ID or key to add a comment"
            )
        if is_missing(params, "content"):
            return CommandResult.fail("Please provide content for the comment")

        issue_id_or_key = params["issueIdOrKey"]
        comment = await self.backlog.add_issue_comment(
            issue_id_or_key, params["content"]
        )
        return CommandResult.ok(
            f"Successfully added comment to issue {issue_id_or_key}", comment=comment
        )
