"""Base client module for Backlog API interactions."""

import logging
from typing import Any

import httpx

from ..exceptions import NotConfiguredError, UpstreamError
from ..logging_config import mask_sensitive
from .config import BacklogConfig
from .constants import DEFAULT_RELAY_URL, DEFAULT_TIMEOUT

logger = logging.getLogger("backlog-assistant.backlog")


def _error_detail(response: httpx.Response) -> tuple[Any, str]:
    """Parse an error response into (body, human readable detail)."""
    if not response.content:
        return None, response.reason_phrase or "empty response"

    try:
        body = response.json()
    except ValueError:
        return response.text, response.text

    # Backlog reports failures as {"errors": [{"message": ..., "code": ...}]}
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            message = errors[0].get("message")
            if message:
                return body, str(message)
    return body, response.text


class BacklogClient:
    """Base client for Backlog API interactions.

    The client owns its configuration; nothing is read from the environment
    here. Until :meth:`configure` is called every request raises
    :class:`NotConfiguredError`.
    """

    def __init__(
        self,
        config: BacklogConfig | None = None,
        relay_url: str = DEFAULT_RELAY_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the Backlog client.

        Args:
            config: Optional configuration; the client stays unconfigured without it
            relay_url: Relay the session is bound to unless the config overrides it
            timeout: Transport timeout in seconds
        """
        self.relay_url = relay_url.rstrip("/")
        self.timeout = timeout
        self.config: BacklogConfig | None = None
        self.session: httpx.AsyncClient | None = None

        if config is not None:
            self.config = config
            self.session = self._create_session(config)

    def _create_session(self, config: BacklogConfig) -> httpx.AsyncClient:
        """Create the HTTP session bound to the relay.

        Args:
            config: Configuration providing the API key and optional base URL

        Returns:
            Async HTTP session sending the API key on every request
        """
        base_url = config.base_url or self.relay_url
        logger.debug(
            f"Creating Backlog session for space {config.space_id} via {base_url} "
            f"(apiKey={mask_sensitive(config.api_key)})"
        )
        return httpx.AsyncClient(
            base_url=base_url,
            params={"apiKey": config.api_key},
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=self.timeout,
        )

    async def configure(self, config: BacklogConfig) -> None:
        """Store the configuration and rebuild the HTTP session.

        Configuring with a configuration equal to the current one keeps the
        existing session, or reopens it after :meth:`aclose`.
        """
        if self.session is not None and config == self.config:
            logger.debug("Backlog client already configured, keeping session")
            return

        previous = self.session
        self.config = config
        self.session = self._create_session(config)
        if previous is not None:
            await previous.aclose()

    def is_configured(self) -> bool:
        """Return True when a configuration is present."""
        return self.config is not None

    @property
    def api_key(self) -> str | None:
        return self.config.api_key if self.config else None

    @property
    def space_id(self) -> str | None:
        return self.config.space_id if self.config else None

    @property
    def base_url(self) -> str | None:
        return self.config.base_url if self.config else None

    async def clear_config(self) -> None:
        """Drop the configuration and close the session."""
        session = self.session
        self.config = None
        self.session = None
        if session is not None:
            await session.aclose()

    async def aclose(self) -> None:
        """Close the HTTP session, keeping the configuration.

        The next request opens a fresh session.
        """
        session = self.session
        self.session = None
        if session is not None:
            await session.aclose()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request to the Backlog API.

        For GET the params become the query string; for every other method
        they become the JSON body, omitted when empty.

        Args:
            method: HTTP method
            path: API path, e.g. ``/projects``
            params: Query parameters (GET) or body (other methods)

        Returns:
            Parsed JSON response, or None if the response has no content

        Raises:
            NotConfiguredError: If the client has no configuration
            UpstreamError: If the API answers with a non-2xx status or the transport fails
        """
        if self.config is None:
            raise NotConfiguredError()
        if self.session is None:
            self.session = self._create_session(self.config)

        method = method.upper()
        logger.debug(f"Sending {method} request to {path}")

        try:
            if method == "GET":
                response = await self.session.request(method, path, params=params or {})
            else:
                response = await self.session.request(
                    method, path, json=params if params else None
                )
        except httpx.RequestError as e:
            logger.error(f"Backlog API error ({method} {path}): {str(e)}")
            raise UpstreamError(f"Request error: {str(e)}") from e

        if not response.is_success:
            body, detail = _error_detail(response)
            logger.error(
                f"Backlog API error ({method} {path}): {response.status_code} {detail}"
            )
            raise UpstreamError(
                f"HTTP error {response.status_code}: {detail}",
                status_code=response.status_code,
                body=body,
            )

        if not response.content:
            return None
        return response.json()
