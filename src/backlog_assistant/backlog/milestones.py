"""Module for Backlog milestone (version) operations."""

from typing import Any

from .client import BacklogClient


class MilestonesMixin(BacklogClient):
    """Mixin for Backlog milestone operations.

    Backlog exposes milestones as project "versions".
    """

    async def get_milestones(
        self, project_id_or_key: str | int
    ) -> list[dict[str, Any]]:
        return await self.request("GET", f"/projects/{project_id_or_key}/versions")

    async def create_milestone(
        self, project_id_or_key: str | int, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a milestone.

        Args:
            project_id_or_key: The project id or key
            params: Milestone fields (name, description, startDate, releaseDueDate)

        Returns:
            The created milestone
        """
        return await self.request(
            "POST", f"/projects/{project_id_or_key}/versions", params
        )

    async def update_milestone(
        self, project_id_or_key: str | int, version_id: int, params: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request(
            "PUT", f"/projects/{project_id_or_key}/versions/{version_id}", params
        )

    async def delete_milestone(
        self, project_id_or_key: str | int, version_id: int
    ) -> dict[str, Any]:
        return await self.request(
            "DELETE", f"/projects/{project_id_or_key}/versions/{version_id}"
        )
