"""Tool route tests — REST facade over ToolDispatch.

Tests cover:
    - GET /health returns OK
    - GET /api/mcp/tools lists every tool with its input schema
    - POST /api/mcp/call maps DispatchResult to status code and envelope
    - Missing toolName and malformed bodies return 400 InvalidArgument
    - /api/docs/* shortcuts bind the fixed tool to the request body
"""

import pytest
from httpx import ASGITransport, AsyncClient

from docs_bridge.core.errors import CredentialError
from docs_bridge.main import app
from docs_bridge.services.tool_dispatch import ToolDispatch, get_tool_dispatch
from tests.services.fake_google import make_client, make_resolver


@pytest.fixture
def resolver():
    return make_resolver()


@pytest.fixture
async def client(resolver):
    google = make_client()
    dispatch = ToolDispatch(resolver, client_factory=lambda credentials: google)
    app.dependency_overrides[get_tool_dispatch] = lambda: dispatch
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "OK"


async def test_list_tools(client):
    response = await client.get("/api/mcp/tools")
    assert response.status_code == 200
    tools = response.json()["tools"]
    assert len(tools) == 10
    read = next(t for t in tools if t["name"] == "readGoogleDoc")
    assert "documentId" in read["inputSchema"]["properties"]


async def test_call_health_check(client):
    response = await client.post("/api/mcp/call", json={"toolName": "healthCheck"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": "OK"}


async def test_call_missing_tool_name(client):
    response = await client.post("/api/mcp/call", json={"arguments": {}})
    assert response.status_code == 400
    assert response.json()["errorKind"] == "InvalidArgument"


async def test_call_unknown_tool(client):
    response = await client.post("/api/mcp/call", json={"toolName": "nope"})
    assert response.status_code == 404
    assert response.json() == {
        "success": False, "errorKind": "NotFound", "message": "Tool 'nope' does not exist.",
    }


async def test_call_invalid_arguments(client):
    response = await client.post(
        "/api/mcp/call",
        json={"toolName": "readGoogleDoc", "arguments": {"documentId": ""}},
    )
    assert response.status_code == 400
    assert response.json()["errorKind"] == "InvalidArgument"


async def test_call_credential_error(client, resolver):
    resolver.resolve.side_effect = CredentialError("no token")
    response = await client.post(
        "/api/mcp/call",
        json={"toolName": "readGoogleDoc", "arguments": {"documentId": "doc-1"}},
    )
    assert response.status_code == 503
    assert response.json()["errorKind"] == "CredentialError"


async def test_malformed_body(client):
    response = await client.post(
        "/api/mcp/call", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["errorKind"] == "InvalidArgument"


async def test_docs_read_shortcut(client):
    response = await client.post(
        "/api/docs/read", json={"documentId": "doc-1", "format": "markdown"},
    )
    assert response.status_code == 200
    assert response.json()["data"] == "# **Hello**"


async def test_docs_recent_shortcut_without_body(client):
    response = await client.post("/api/docs/recent")
    assert response.status_code == 200
    assert response.json()["data"] == "No Google Documents modified in the last 30 days."


async def test_docs_search_requires_query(client):
    response = await client.post("/api/docs/search", json={})
    assert response.status_code == 400
