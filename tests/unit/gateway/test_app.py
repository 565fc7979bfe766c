"""Tests for the gateway Starlette application."""

import httpx
import pytest

from backlog_assistant.gateway import GatewayConfig, create_app
from tests.utils.mocks import refuse, respond


@pytest.fixture
def app(gateway_config, forwarder):
    return create_app(gateway_config, forwarder=forwarder)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.anyio
async def test_health_check_endpoint(client):
    """Test the health check endpoint returns 200 and correct JSON response."""
    response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_forward_success(client, mirrors):
    mirrors.on("demo.backlog.com", respond(200, json=[{"projectKey": "TEST"}]))

    response = await client.get("/api/projects", params={"apiKey": "secret"})

    assert response.status_code == 200
    assert response.json() == [{"projectKey": "TEST"}]
    upstream = mirrors.calls[0]
    assert str(upstream.url) == "https://demo.backlog.com/api/v2/projects?apiKey=secret"


@pytest.mark.anyio
async def test_forward_success_is_always_200(client, mirrors):
    """Created or accepted upstream answers are relayed with status 200."""
    mirrors.on("demo.backlog.com", respond(201, json={"issueKey": "TEST-9"}))

    response = await client.post(
        "/api/issues", params={"apiKey": "secret"}, json={"summary": "New"}
    )

    assert response.status_code == 200
    assert response.json() == {"issueKey": "TEST-9"}
    assert mirrors.calls[0].method == "POST"
    assert mirrors.calls[0].content == b'{"summary":"New"}'


@pytest.mark.anyio
async def test_forward_falls_back_to_secondary(client, mirrors):
    mirrors.on("demo.backlog.com", respond(503, text="unavailable"))
    mirrors.on("demo.backlog.jp", respond(200, json={"spaceKey": "demo"}))

    response = await client.get("/api/space")

    assert response.status_code == 200
    assert response.json() == {"spaceKey": "demo"}
    assert mirrors.hosts() == ["demo.backlog.com", "demo.backlog.jp"]


@pytest.mark.anyio
async def test_forward_nested_path(client, mirrors):
    mirrors.on("demo.backlog.com", respond(200, json=[]))

    response = await client.get("/api/projects/TEST/issueTypes")

    assert response.status_code == 200
    assert response.json() == []
    assert mirrors.calls[0].url.path == "/api/v2/projects/TEST/issueTypes"


@pytest.mark.anyio
async def test_all_mirrors_fail_returns_last_error(client, mirrors):
    """The last mirror's status and body are passed through."""
    body = {"errors": [{"message": "Authentication failure.", "code": 11}]}
    mirrors.on("demo.backlog.com", respond(500, text="oops"))
    mirrors.on("demo.backlog.jp", respond(401, json=body))

    response = await client.get("/api/projects")

    assert response.status_code == 401
    assert response.json() == body


@pytest.mark.anyio
async def test_all_mirrors_unreachable_returns_server_error(client, mirrors):
    mirrors.on("demo.backlog.com", refuse)
    mirrors.on("demo.backlog.jp", refuse)

    response = await client.get("/api/projects")

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


@pytest.mark.anyio
async def test_unknown_prefix_not_forwarded(client, mirrors):
    response = await client.get("/other/projects")

    assert response.status_code == 404
    assert mirrors.calls == []


@pytest.mark.anyio
async def test_custom_path_prefix(forwarder, mirrors):
    config = GatewayConfig(
        upstream_urls=["https://demo.backlog.com/api/v2"], path_prefix="backlog/"
    )
    mirrors.on("demo.backlog.com", respond(200, json={"ok": True}))
    app = create_app(config, forwarder=forwarder)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.get("/backlog/space")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.anyio
async def test_forward_keeps_encoded_path_suffix(client, mirrors):
    """Percent-encoded segments reach the mirror exactly as the client sent them."""
    mirrors.on("demo.backlog.com", respond(200, json={"name": "a/b#c"}))

    response = await client.get("/api/wikis/a%2Fb%23c", params={"apiKey": "secret"})

    assert response.status_code == 200
    upstream = mirrors.calls[0]
    assert upstream.url.raw_path == b"/api/v2/wikis/a%2Fb%23c?apiKey=secret"
