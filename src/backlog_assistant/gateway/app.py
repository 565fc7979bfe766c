"""Starlette application exposing the forwarding gateway."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from ..exceptions import GatewayBothFailedError
from .config import GatewayConfig
from .forwarder import UpstreamForwarder

logger = logging.getLogger("backlog-assistant.gateway")

FORWARDED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def _raw_suffix(request: Request, prefix: str) -> str:
    """Path below the prefix exactly as the client encoded it."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        # Some ASGI servers leave the query string on raw_path
        path = raw_path.decode("latin-1").split("?", 1)[0]
        start = prefix.rstrip("/") + "/"
        if path.startswith(start):
            return path[len(start) :]
    return request.path_params["path"]


async def forward_request(request: Request) -> Response:
    """Relay the request below the prefix to the first upstream mirror that answers."""
    forwarder: UpstreamForwarder = request.app.state.forwarder
    path = _raw_suffix(request, request.app.state.path_prefix)
    body = await request.body()

    try:
        upstream = await forwarder.forward(
            request.method,
            path,
            query=request.url.query,
            headers=request.headers,
            body=body,
        )
    except GatewayBothFailedError as e:
        logger.error(f"Gateway error for {request.method} /{path}: {e}")
        content = e.last_body if e.last_body is not None else {"error": "Server error"}
        return JSONResponse(content, status_code=e.last_status or 500)

    # Successful forwards always answer 200 with the upstream payload verbatim
    return Response(
        content=upstream.content,
        status_code=200,
        media_type=upstream.headers.get("content-type", "application/json"),
    )


def create_app(
    config: GatewayConfig, forwarder: UpstreamForwarder | None = None
) -> Starlette:
    """Build the gateway application.

    Args:
        config: Gateway configuration
        forwarder: Optional forwarder; one is created for the app lifespan otherwise

    Returns:
        Starlette application serving ``{prefix}/{path}`` and ``/healthz``
    """

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        owned = forwarder is None
        app.state.forwarder = forwarder or UpstreamForwarder(config)
        logger.info(
            f"Gateway forwarding {config.path_prefix} to {', '.join(config.upstream_urls)}"
        )
        try:
            yield
        finally:
            if owned:
                await app.state.forwarder.aclose()
            logger.info("Gateway shut down")

    app = Starlette(
        routes=[
            Route("/healthz", endpoint=health_check, methods=["GET"]),
            Route(
                f"{config.path_prefix}/{{path:path}}",
                endpoint=forward_request,
                methods=FORWARDED_METHODS,
            ),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=config.cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        ],
        lifespan=lifespan,
    )
    app.state.path_prefix = config.path_prefix
    # Available before the lifespan runs, e.g. under ASGITransport in tests
    if forwarder is not None:
        app.state.forwarder = forwarder
    return app


async def run_gateway(config: GatewayConfig) -> None:
    """Serve the gateway with uvicorn until interrupted."""
    import uvicorn

    server = uvicorn.Server(
        uvicorn.Config(create_app(config), host=config.host, port=config.port)
    )
    await server.serve()
