"""Module for Backlog user operations."""

from typing import Any

from .client import BacklogClient


class UsersMixin(BacklogClient):
    """Mixin for Backlog user operations."""

    async def get_users(self) -> list[dict[str, Any]]:
        return await self.request("GET", "/users")

    async def get_user(self, user_id: int) -> dict[str, Any]:
        """Get a user by numeric id."""
        return await self.request("GET", f"/users/{user_id}")

    async def get_user_activities(self, user_id: int) -> list[dict[str, Any]]:
        """Get the recent activities of a user."""
        return await self.request("GET", f"/users/{user_id}/activities")
