"""Module for Backlog wiki operations."""

from typing import Any

from .client import BacklogClient


class WikisMixin(BacklogClient):
    """Mixin for Backlog wiki page operations."""

    async def get_wikis(self, project_id_or_key: str | int) -> list[dict[str, Any]]:
        """List the wiki pages of a project."""
        return await self.request(
            "GET", "/wikis", {"projectIdOrKey": project_id_or_key}
        )

    async def get_wiki(self, wiki_id: int) -> dict[str, Any]:
        return await self.request("GET", f"/wikis/{wiki_id}")

    async def create_wiki(self, params: dict[str, Any]) -> dict[str, Any]:
        """Create a wiki page.

        Args:
            params: Page fields; the API requires projectId, name and content

        Returns:
            The created wiki page
        """
        return await self.request("POST", "/wikis", params)

    async def update_wiki(self, wiki_id: int, params: dict[str, Any]) -> dict[str, Any]:
        return await self.request("PATCH", f"/wikis/{wiki_id}", params)

    async def delete_wiki(self, wiki_id: int) -> dict[str, Any]:
        return await self.request("DELETE", f"/wikis/{wiki_id}")

    async def get_wiki_tags(self, project_id_or_key: str | int) -> list[dict[str, Any]]:
        """List the wiki tags used in a project."""
        return await self.request(
            "GET", "/wikis/tags", {"projectIdOrKey": project_id_or_key}
        )
