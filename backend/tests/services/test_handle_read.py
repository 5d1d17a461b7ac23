"""Read handler tests — rendering, truncation and Drive listings.

Tests cover:
    - Text format prefixes the character count and truncates the body
    - Markdown and JSON formats render the fetched snapshot
    - Empty documents return the sentinel
    - Recent listing orders by modifiedTime desc with the page size
    - Search listing uses an escaped query
    - healthCheck returns OK without a client
"""

import json
from unittest.mock import AsyncMock

from docs_bridge.core.render_text import EMPTY_DOCUMENT
from docs_bridge.schemas.tool_args import (
    HealthCheckArgs, ReadDocArgs, RecentDocsArgs, SearchDocsArgs,
)
from docs_bridge.services.handle_read import (
    get_recent_google_docs, health_check, read_google_doc, search_google_docs,
)

SNAPSHOT = {
    "documentId": "doc-1",
    "body": {"content": [
        {"sectionBreak": {}},
        {"paragraph": {
            "elements": [{"textRun": {"content": "Hello\n", "textStyle": {"bold": True}}}],
            "paragraphStyle": {"namedStyleType": "HEADING_1"},
        }},
    ]},
}


def _client(snapshot=SNAPSHOT, files=None):
    client = AsyncMock()
    client.get_document.return_value = snapshot
    client.list_files.return_value = files or []
    return client


async def test_read_text_format():
    result = await read_google_doc(_client(), ReadDocArgs(document_id="doc-1"))
    assert result == "Content (6 characters):\n---\nHello\n"


async def test_read_text_truncated():
    args = ReadDocArgs(document_id="doc-1", max_length=2)
    result = await read_google_doc(_client(), args)
    assert result == "Content (6 characters):\n---\nHe\n\n... [truncated 4 of 6 characters]"


async def test_read_markdown_format():
    args = ReadDocArgs(document_id="doc-1", format="markdown")
    assert await read_google_doc(_client(), args) == "# **Hello**"


async def test_read_json_format():
    args = ReadDocArgs(document_id="doc-1", format="json")
    result = await read_google_doc(_client(), args)
    assert json.loads(result) == SNAPSHOT


async def test_read_empty_document():
    client = _client(snapshot={"body": {"content": []}})
    result = await read_google_doc(client, ReadDocArgs(document_id="doc-1"))
    assert result == EMPTY_DOCUMENT


async def test_recent_docs_query_and_order():
    client = _client(files=[{"id": "a", "name": "Plan"}])
    result = await get_recent_google_docs(client, RecentDocsArgs(max_results=5, days_back=7))
    query, page_size = client.list_files.call_args.args
    assert "modifiedTime >= '" in query
    assert page_size == 5
    assert client.list_files.call_args.kwargs["order_by"] == "modifiedTime desc"
    assert result.startswith("Recently modified Google Document(s) (last 7 days):")
    assert "1. **Plan**" in result


async def test_recent_docs_empty():
    result = await get_recent_google_docs(_client(), RecentDocsArgs())
    assert result == "No Google Documents modified in the last 30 days."


async def test_search_escapes_query():
    client = _client(files=[{"id": "a", "name": "Bob's plan"}])
    result = await search_google_docs(client, SearchDocsArgs(search_query="Bob's"))
    query = client.list_files.call_args.args[0]
    assert "fullText contains 'Bob\\'s'" in query
    assert result.startswith('Search results for "Bob\'s":')


async def test_health_check():
    assert await health_check(None, HealthCheckArgs()) == "OK"
