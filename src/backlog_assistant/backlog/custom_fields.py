"""Module for Backlog custom field operations."""

from typing import Any

from .client import BacklogClient


class CustomFieldsMixin(BacklogClient):
    """Mixin for Backlog custom field operations."""

    async def get_custom_fields(
        self, project_id_or_key: str | int
    ) -> list[dict[str, Any]]:
        return await self.request("GET", f"/projects/{project_id_or_key}/customFields")

    async def create_custom_field(
        self, project_id_or_key: str | int, params: dict[str, Any]
    ) -> dict[str, Any]:
        """Create a custom field.

        Args:
            project_id_or_key: The project id or key
            params: Field definition; ``typeId`` and ``name`` are required

        Returns:
            The created custom field
        """
        return await self.request(
            "POST", f"/projects/{project_id_or_key}/customFields", params
        )

    async def update_custom_field(
        self,
        project_id_or_key: str | int,
        custom_field_id: int,
        params: dict[str, Any],
    ) -> dict[str, Any]:
        return await self.request(
            "PATCH",
            f"/projects/{project_id_or_key}/customFields/{custom_field_id}",
            params,
        )

    async def delete_custom_field(
        self, project_id_or_key: str | int, custom_field_id: int
    ) -> dict[str, Any]:
        return await self.request(
            "DELETE", f"/projects/{project_id_or_key}/customFields/{custom_field_id}"
        )
