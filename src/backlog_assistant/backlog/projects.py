"""Module for Backlog project operations."""

from typing import Any

from .client import BacklogClient


class ProjectsMixin(BacklogClient):
    """Mixin for Backlog project operations."""

    async def get_projects(self) -> list[dict[str, Any]]:
        """Get all projects visible to the API key owner."""
        return await self.request("GET", "/projects")

    async def get_project(self, project_id_or_key: str | int) -> dict[str, Any]:
        """Get a project by numeric id or project key.

        Args:
            project_id_or_key: The project id (e.g. 7) or key (e.g. 'DEF')

        Returns:
            The project as returned by the API
        """
        return await self.request("GET", f"/projects/{project_id_or_key}")

    async def create_project(self, params: dict[str, Any]) -> dict[str, Any]:
        """Create a project.

        Args:
            params: Project fields; ``name`` and ``key`` are required by the API

        Returns:
            The created project
        """
        return await self.request("POST", "/projects", params)

    async def update_project(
        self, project_id_or_key: str | int, params: dict[str, Any]
    ) -> dict[str, Any]:
        return await self.request("PATCH", f"/projects/{project_id_or_key}", params)

    async def delete_project(self, project_id_or_key: str | int) -> dict[str, Any]:
        return await self.request("DELETE", f"/projects/{project_id_or_key}")
