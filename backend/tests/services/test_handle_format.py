"""Format handler tests — text and paragraph styling targets.

Tests cover:
    - Explicit ranges styled without fetching the document
    - textToFind resolved against the snapshot; missing text → NotFoundError
    - Paragraph targets expand to the containing paragraph
"""

from unittest.mock import AsyncMock

import pytest

from docs_bridge.core.errors import NotFoundError
from docs_bridge.schemas.tool_args import ApplyParagraphStyleArgs, ApplyTextStyleArgs
from docs_bridge.services.handle_format import apply_paragraph_style, apply_text_style

SNAPSHOT = {"body": {"content": [
    {"sectionBreak": {}, "startIndex": 0, "endIndex": 1},
    {
        "startIndex": 1, "endIndex": 13,
        "paragraph": {"elements": [
            {"startIndex": 1, "endIndex": 13, "textRun": {"content": "Hello world\n"}},
        ]},
    },
]}}


def _client():
    client = AsyncMock()
    client.get_document.return_value = SNAPSHOT
    return client


def _text_args(target, style=None):
    return ApplyTextStyleArgs.model_validate({
        "documentId": "d", "target": target, "style": style or {"bold": True},
    })


def _paragraph_args(target, style=None):
    return ApplyParagraphStyleArgs.model_validate({
        "documentId": "d", "target": target, "style": style or {"alignment": "CENTER"},
    })


async def test_text_style_by_range_skips_fetch():
    client = _client()
    result = await apply_text_style(client, _text_args({"startIndex": 2, "endIndex": 4}))
    client.get_document.assert_not_awaited()
    request = client.batch_update.call_args.args[1][0]["updateTextStyle"]
    assert request["range"] == {"startIndex": 2, "endIndex": 4}
    assert request["fields"] == "bold"
    assert result == "Successfully applied text style to range 2-4."


async def test_text_style_by_found_text():
    client = _client()
    await apply_text_style(client, _text_args({"textToFind": "world"}))
    request = client.batch_update.call_args.args[1][0]["updateTextStyle"]
    assert request["range"] == {"startIndex": 7, "endIndex": 12}


async def test_text_style_missing_text():
    client = _client()
    with pytest.raises(NotFoundError, match="Could not find instance 1"):
        await apply_text_style(client, _text_args({"textToFind": "absent"}))
    client.batch_update.assert_not_awaited()


async def test_paragraph_style_by_index():
    client = _client()
    result = await apply_paragraph_style(client, _paragraph_args({"indexWithinParagraph": 5}))
    request = client.batch_update.call_args.args[1][0]["updateParagraphStyle"]
    assert request["range"] == {"startIndex": 1, "endIndex": 13}
    assert request["paragraphStyle"] == {"alignment": "CENTER"}
    assert result == "Successfully applied paragraph style to range 1-13."


async def test_paragraph_style_by_text():
    client = _client()
    await apply_paragraph_style(client, _paragraph_args(
        {"textToFind": "world"}, {"namedStyleType": "HEADING_2"},
    ))
    request = client.batch_update.call_args.args[1][0]["updateParagraphStyle"]
    assert request["range"] == {"startIndex": 1, "endIndex": 13}
    assert request["fields"] == "namedStyleType"


async def test_paragraph_style_index_outside_document():
    client = _client()
    with pytest.raises(NotFoundError):
        await apply_paragraph_style(client, _paragraph_args({"indexWithinParagraph": 50}))
