"""Module for Backlog space operations."""

from typing import Any

from .client import BacklogClient


class SpaceMixin(BacklogClient):
    """Mixin for Backlog space operations."""

    async def get_space(self) -> dict[str, Any]:
        """Get information about the space."""
        return await self.request("GET", "/space")

    async def get_space_activities(self, **params: Any) -> list[dict[str, Any]]:
        """Get recent activities in the space.

        Args:
            **params: Optional filters (activityTypeId, minId, maxId, count, order)
        """
        return await self.request("GET", "/space/activities", params)

    async def get_space_notification(self) -> dict[str, Any]:
        return await self.request("GET", "/space/notification")

    async def update_space_notification(self, content: str) -> dict[str, Any]:
        """Replace the space notification text."""
        return await self.request("PUT", "/space/notification", {"content": content})
