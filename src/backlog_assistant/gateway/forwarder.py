"""Upstream forwarding with ordered mirror fallback."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import httpx

from ..exceptions import GatewayBothFailedError
from .config import GatewayConfig

logger = logging.getLogger("backlog-assistant.gateway")

# Headers the upstream connection sets itself
_DROPPED_HEADERS = frozenset(
    {
        "host",
        "content-length",
        "connection",
        "keep-alive",
        "proxy-connection",
        "transfer-encoding",
        "upgrade",
        "te",
        "trailer",
    }
)


@dataclass
class ForwardAttempt:
    """Outcome of one failed try against an upstream mirror."""

    url: str
    status_code: int | None = None
    body: Any = None
    error: str | None = None


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _is_empty_payload(response: httpx.Response) -> bool:
    """True when the response carries no data: no bytes, or JSON null."""
    content = response.content.strip()
    return not content or content == b"null"


def forward_headers(headers: Mapping[str, str], upstream_url: str) -> dict[str, str]:
    """Copy request headers for an upstream, pointing Host at the upstream."""
    forwarded = {
        name: value
        for name, value in headers.items()
        if name.lower() not in _DROPPED_HEADERS
    }
    forwarded["host"] = urlsplit(upstream_url).netloc
    return forwarded


class UpstreamForwarder:
    """Forwards requests to an ordered list of upstream mirrors.

    Policy: try every mirror in order and stop on the first success. A
    mirror fails when the transport raises or answers with a non-2xx status.
    With ``failover_on_empty`` an empty payload also moves on to the next
    mirror; the last mirror's empty answer is returned as is.
    """

    def __init__(
        self, config: GatewayConfig, client: httpx.AsyncClient | None = None
    ) -> None:
        self.config = config
        self.client = client or httpx.AsyncClient(
            verify=config.ssl_verify, timeout=config.timeout
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _send(
        self,
        upstream_url: str,
        method: str,
        path: str,
        query: str,
        headers: Mapping[str, str],
        body: bytes,
    ) -> httpx.Response:
        url = f"{upstream_url}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{query}"
        return await self.client.request(
            method,
            url,
            headers=forward_headers(headers, upstream_url),
            content=body or None,
        )

    async def forward(
        self,
        method: str,
        path: str,
        query: str = "",
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
    ) -> httpx.Response:
        """Forward one request, falling back through the upstream mirrors.

        Args:
            method: HTTP method of the incoming request
            path: Path below the gateway prefix, forwarded verbatim
            query: Raw query string, forwarded verbatim
            headers: Incoming request headers
            body: Raw request body

        Returns:
            The first successful upstream response

        Raises:
            GatewayBothFailedError: If every upstream mirror failed
        """
        headers = headers or {}
        attempts: list[ForwardAttempt] = []

        upstream_urls = self.config.upstream_urls
        for index, upstream_url in enumerate(upstream_urls):
            is_last = index == len(upstream_urls) - 1
            try:
                response = await self._send(
                    upstream_url, method, path, query, headers, body
                )
            except httpx.HTTPError as e:
                logger.warning(f"Upstream {upstream_url} failed for {method} /{path}: {e}")
                attempts.append(ForwardAttempt(url=upstream_url, error=str(e)))
                continue

            if not response.is_success:
                logger.warning(
                    f"Upstream {upstream_url} answered {response.status_code} "
                    f"for {method} /{path}"
                )
                attempts.append(
                    ForwardAttempt(
                        url=upstream_url,
                        status_code=response.status_code,
                        body=_parse_body(response),
                    )
                )
                continue

            if (
                self.config.failover_on_empty
                and not is_last
                and _is_empty_payload(response)
            ):
                logger.warning(
                    f"Upstream {upstream_url} returned no payload for {method} /{path}"
                )
                attempts.append(
                    ForwardAttempt(
                        url=upstream_url,
                        status_code=response.status_code,
                        error="empty payload",
                    )
                )
                continue

            logger.debug(f"Forwarded {method} /{path} via {upstream_url}")
            return response

        raise GatewayBothFailedError(attempts)
