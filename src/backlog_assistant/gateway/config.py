"""Configuration for the forwarding gateway."""

import os
from dataclasses import dataclass, field

from ..backlog.constants import (
    DEFAULT_TIMEOUT,
    ENV_BACKLOG_SPACE_ID,
    UPSTREAM_URL_TEMPLATES,
)
from ..utils.env import getenv_float, getenv_list, is_env_enabled, is_env_ssl_verify

DEFAULT_GATEWAY_PORT = 3001
DEFAULT_PATH_PREFIX = "/api"


def upstream_urls_for_space(space_id: str) -> list[str]:
    """Mirror base URLs for a space, in fallback order."""
    return [template.format(space_id=space_id) for template in UPSTREAM_URL_TEMPLATES]


@dataclass
class GatewayConfig:
    """Forwarding gateway configuration.

    Upstreams are tried in list order; the first one that answers wins.
    """

    upstream_urls: list[str]
    path_prefix: str = DEFAULT_PATH_PREFIX
    host: str = "127.0.0.1"
    port: int = DEFAULT_GATEWAY_PORT
    ssl_verify: bool = True
    timeout: float = DEFAULT_TIMEOUT
    failover_on_empty: bool = True  # Empty payloads count as a failed attempt
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self) -> None:
        if not self.upstream_urls:
            raise ValueError("Gateway requires at least one upstream URL")
        self.upstream_urls = [url.rstrip("/") for url in self.upstream_urls]
        self.path_prefix = "/" + self.path_prefix.strip("/")

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Create configuration from environment variables.

        Returns:
            GatewayConfig with values from environment variables

        Raises:
            ValueError: If neither GATEWAY_UPSTREAM_URLS nor BACKLOG_SPACE_ID is set
        """
        upstream_urls = getenv_list("GATEWAY_UPSTREAM_URLS")
        if not upstream_urls:
            space_id = os.getenv(ENV_BACKLOG_SPACE_ID)
            if not space_id:
                raise ValueError(
                    "GATEWAY_UPSTREAM_URLS or BACKLOG_SPACE_ID environment variable is required"
                )
            upstream_urls = upstream_urls_for_space(space_id)

        return cls(
            upstream_urls=upstream_urls,
            path_prefix=os.getenv("GATEWAY_PATH_PREFIX", DEFAULT_PATH_PREFIX),
            host=os.getenv("GATEWAY_HOST", "127.0.0.1"),
            port=int(os.getenv("GATEWAY_PORT", str(DEFAULT_GATEWAY_PORT))),
            ssl_verify=is_env_ssl_verify("GATEWAY_SSL_VERIFY"),
            timeout=getenv_float("GATEWAY_TIMEOUT", DEFAULT_TIMEOUT),
            failover_on_empty=is_env_enabled("GATEWAY_FAILOVER_ON_EMPTY"),
            cors_origins=getenv_list("GATEWAY_CORS_ORIGINS") or ["*"],
        )
