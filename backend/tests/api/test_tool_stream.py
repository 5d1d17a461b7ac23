"""Tool stream tests — SSE event ordering.

Tests cover:
    - Success: tool_started → tool_result → done(error=false)
    - Failure: tool_started → error → done(error=true)
    - Response is text/event-stream
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from docs_bridge.main import app
from docs_bridge.services.tool_dispatch import ToolDispatch, get_tool_dispatch
from tests.services.fake_google import make_client, make_resolver


def _events(body: str) -> list[dict]:
    return [
        json.loads(line.removeprefix("data: "))
        for line in body.splitlines()
        if line.startswith("data: ")
    ]


@pytest.fixture
async def client():
    google = make_client()
    dispatch = ToolDispatch(make_resolver(), client_factory=lambda credentials: google)
    app.dependency_overrides[get_tool_dispatch] = lambda: dispatch
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


async def test_stream_success(client):
    response = await client.post(
        "/api/mcp/stream",
        json={"toolName": "readGoogleDoc", "arguments": {"documentId": "doc-1"}},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    events = _events(response.text)
    assert [e["type"] for e in events] == ["tool_started", "tool_result", "done"]
    assert events[0]["data"]["toolName"] == "readGoogleDoc"
    assert events[1]["data"]["data"] == "Content (6 characters):\n---\nHello\n"
    assert events[2]["data"]["error"] is False


async def test_stream_failure(client):
    response = await client.post("/api/mcp/stream", json={"toolName": "nope"})
    events = _events(response.text)
    assert [e["type"] for e in events] == ["tool_started", "error", "done"]
    assert events[1]["data"]["errorKind"] == "NotFound"
    assert events[2]["data"]["error"] is True


async def test_stream_missing_tool_name(client):
    response = await client.post("/api/mcp/stream", json={})
    events = _events(response.text)
    assert events[1]["data"]["errorKind"] == "InvalidArgument"
