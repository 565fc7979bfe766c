"""Configuration module for Backlog API interactions."""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_RELAY_URL,
    ENV_BACKLOG_API_KEY,
    ENV_BACKLOG_BASE_URL,
    ENV_BACKLOG_RELAY_URL,
    ENV_BACKLOG_SPACE_ID,
)


@dataclass(frozen=True)
class BacklogConfig:
    """Backlog API configuration.

    The API key is sent as the ``apiKey`` query parameter on every request.
    ``base_url`` overrides the relay the client is bound to.
    """

    api_key: str  # Backlog personal API key
    space_id: str  # Space (workspace) identifier, e.g. "nulab-exam"
    base_url: str | None = None  # Optional relay/base URL override

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("Backlog configuration requires an API key")
        if not self.space_id:
            raise ValueError("Backlog configuration requires a space ID")
        if self.base_url:
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "BacklogConfig | None":
        """Create configuration from environment variables.

        Returns:
            BacklogConfig with values from environment variables, or None when
            the API key or space ID is missing.
        """
        api_key = os.getenv(ENV_BACKLOG_API_KEY)
        space_id = os.getenv(ENV_BACKLOG_SPACE_ID)
        if not (api_key and space_id):
            return None

        return cls(
            api_key=api_key,
            space_id=space_id,
            base_url=os.getenv(ENV_BACKLOG_BASE_URL) or None,
        )


def relay_url_from_env() -> str:
    """Relay URL the client is bound to when the configuration has no override."""
    return os.getenv(ENV_BACKLOG_RELAY_URL, DEFAULT_RELAY_URL).rstrip("/")
