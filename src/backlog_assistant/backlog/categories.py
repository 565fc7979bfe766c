"""Module for Backlog category operations."""

from typing import Any

from .client import BacklogClient


class CategoriesMixin(BacklogClient):
    """Mixin for Backlog category operations."""

    async def get_categories(
        self, project_id_or_key: str | int
    ) -> list[dict[str, Any]]:
        return await self.request("GET", f"/projects/{project_id_or_key}/categories")

    async def create_category(
        self, project_id_or_key: str | int, name: str
    ) -> dict[str, Any]:
        """Create a category named ``name`` in the project."""
        return await self.request(
            "POST", f"/projects/{project_id_or_key}/categories", {"name": name}
        )

    async def update_category(
        self, project_id_or_key: str | int, category_id: int, name: str
    ) -> dict[str, Any]:
        """Rename a category."""
        return await self.request(
            "PUT",
            f"/projects/{project_id_or_key}/categories/{category_id}",
            {"name": name},
        )

    async def delete_category(
        self, project_id_or_key: str | int, category_id: int
    ) -> dict[str, Any]:
        return await self.request(
            "DELETE", f"/projects/{project_id_or_key}/categories/{category_id}"
        )
