"""Module for Backlog issue operations."""

from typing import Any

from .client import BacklogClient


class IssuesMixin(BacklogClient):
    """Mixin for Backlog issue operations."""

    async def get_issues(
        self, project_ids: list[int] | None = None, **params: Any
    ) -> list[dict[str, Any]]:
        """List issues, optionally restricted to some projects.

        Args:
            project_ids: Numeric project ids to filter on
            **params: Any other issue list filter supported by the API

        Returns:
            List of issues
        """
        query = dict(params)
        if project_ids:
            # Backlog expects array parameters with a trailing []
            query["projectId[]"] = list(project_ids)
        return await self.request("GET", "/issues", query)

    async def get_issue(self, issue_id_or_key: str | int) -> dict[str, Any]:
        """Get an issue by numeric id or issue key (e.g. 'TEST-1')."""
        return await self.request("GET", f"/issues/{issue_id_or_key}")

    async def create_issue(self, params: dict[str, Any]) -> dict[str, Any]:
        """Create an issue.

        Args:
            params: Issue fields; the API requires projectId, summary,
                issueTypeId and priorityId

        Returns:
            The created issue
        """
        return await self.request("POST", "/issues", params)

    async def update_issue(
        self, issue_id_or_key: str | int, params: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request("PATCH", f"/issues/{issue_id_or_key}", params)

    async def delete_issue(self, issue_id_or_key: str | int) -> dict[str, Any]:
        return await self.request("DELETE", f"/issues/{issue_id_or_key}")

    async def get_issue_comments(
        self, issue_id_or_key: str | int
    ) -> list[dict[str, Any]]:
        """Get the comments of an issue."""
        return await self.request("GET", f"/issues/{issue_id_or_key}/comments")

    async def add_issue_comment(
        self, issue_id_or_key: str | int, content: str
    ) -> dict[str, Any]:
        """Add a comment to an issue.

        Args:
            issue_id_or_key: The issue id or key
            content: Comment text

        Returns:
            The created comment
        """
        return await self.request(
            "POST", f"/issues/{issue_id_or_key}/comments", {"content": content}
        )
