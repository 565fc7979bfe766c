"""Module for Backlog issue type operations."""

from typing import Any

from .client import BacklogClient


class IssueTypesMixin(BacklogClient):
    """Mixin for Backlog issue type operations."""

    async def get_issue_types(
        self, project_id_or_key: str | int
    ) -> list[dict[str, Any]]:
        """List the issue types of a project, in display order."""
        return await self.request("GET", f"/projects/{project_id_or_key}/issueTypes")

    async def create_issue_type(
        self, project_id_or_key: str | int, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Create an issue type.

        Args:
            project_id_or_key: The project id or key
            params: Issue type fields; ``name`` and ``color`` are required

        Returns:
            The created issue type
        """
        return await self.request(
            "POST", f"/projects/{project_id_or_key}/issueTypes", params
        )

    async def update_issue_type(
        self, project_id_or_key: str | int, issue_type_id: int, params: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PUT", f"/projects/{project_id_or_key}/issueTypes/{issue_type_id}", params
        )

    async def delete_issue_type(
        self,
        project_id_or_key: str | int,
        issue_type_id: int,
        substitute_issue_type_id: int,
    ) -> dict[str, Any]:
        """Delete an issue type, moving its issues to a substitute type.

        Args:
            project_id_or_key: The project id or key
            issue_type_id: Issue type to delete
            substitute_issue_type_id: Issue type receiving the existing issues

        Returns:
            The deleted issue type
        """
        return await self.request(
            "DELETE",
            f"/projects/{project_id_or_key}/issueTypes/{issue_type_id}",
            {"substituteIssueTypeId": substitute_issue_type_id},
        )
