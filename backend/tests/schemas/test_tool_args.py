"""Tool argument validation — camelCase wire names, ranges, cross-field rules.

Tests cover:
    - camelCase keys accepted and mapped to snake_case attributes
    - Unknown fields, wrong types and missing required fields rejected
    - Errors raised as InvalidArgumentError naming the offending field
    - Non-object payloads rejected; None treated as empty object
    - Targeting modes: exactly one of range / text / paragraph index
    - Style models require at least one option
"""

import pytest

from docs_bridge.core.domain_types import OutputFormat
from docs_bridge.core.errors import InvalidArgumentError
from docs_bridge.schemas.tool_args import (
    ApplyParagraphStyleArgs, ApplyTextStyleArgs, CreateDocumentArgs,
    DeleteRangeArgs, HealthCheckArgs, ReadDocArgs, RecentDocsArgs,
    SearchDocsArgs, parse_tool_args,
)


def test_read_args_camel_case_and_defaults():
    args = parse_tool_args(ReadDocArgs, {"documentId": "abc", "maxLength": 10})
    assert args.document_id == "abc"
    assert args.max_length == 10
    assert args.format is OutputFormat.TEXT


def test_read_args_markdown_format():
    args = parse_tool_args(ReadDocArgs, {"documentId": "abc", "format": "markdown"})
    assert args.format is OutputFormat.MARKDOWN


def test_missing_document_id_names_field():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ReadDocArgs, {})
    assert exc_info.value.field == "documentId"
    assert "documentId" in exc_info.value.message


def test_wrong_type_rejected():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ReadDocArgs, {"documentId": 123})
    assert exc_info.value.field == "documentId"


def test_unknown_field_rejected():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ReadDocArgs, {"documentId": "a", "colour": "red"})
    assert exc_info.value.field == "colour"


def test_max_length_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        parse_tool_args(ReadDocArgs, {"documentId": "a", "maxLength": 0})


def test_non_object_payload_rejected():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ReadDocArgs, ["documentId"])
    assert exc_info.value.field == "arguments"


def test_none_payload_is_empty_object():
    assert isinstance(parse_tool_args(HealthCheckArgs, None), HealthCheckArgs)
    recent = parse_tool_args(RecentDocsArgs, None)
    assert (recent.max_results, recent.days_back) == (10, 30)


def test_recent_bounds():
    with pytest.raises(InvalidArgumentError):
        parse_tool_args(RecentDocsArgs, {"maxResults": 51})
    with pytest.raises(InvalidArgumentError):
        parse_tool_args(RecentDocsArgs, {"daysBack": 0})


def test_search_query_stripped_and_required():
    assert parse_tool_args(SearchDocsArgs, {"searchQuery": "  plan "}).search_query == "plan"
    with pytest.raises(InvalidArgumentError):
        parse_tool_args(SearchDocsArgs, {"searchQuery": "   "})


def test_create_title_required():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(CreateDocumentArgs, {"title": " "})
    assert exc_info.value.field == "title"


def test_delete_range_order():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(DeleteRangeArgs, {"documentId": "a", "startIndex": 5, "endIndex": 5})
    assert exc_info.value.field == "endIndex"
    assert "endIndex must be greater than startIndex" in exc_info.value.message


def test_text_style_by_range():
    args = parse_tool_args(ApplyTextStyleArgs, {
        "documentId": "a",
        "target": {"startIndex": 1, "endIndex": 4},
        "style": {"bold": True},
    })
    assert args.target.modes() == ["range"]
    assert args.style.bold is True


def test_text_style_needs_exactly_one_target_mode():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ApplyTextStyleArgs, {
            "documentId": "a",
            "target": {"startIndex": 1, "endIndex": 4, "textToFind": "x"},
            "style": {"bold": True},
        })
    assert exc_info.value.field == "target"


def test_text_style_requires_a_style_option():
    with pytest.raises(InvalidArgumentError) as exc_info:
        parse_tool_args(ApplyTextStyleArgs, {
            "documentId": "a", "target": {"textToFind": "x"}, "style": {},
        })
    assert exc_info.value.field == "style"


def test_text_style_rejects_bad_color():
    with pytest.raises(InvalidArgumentError):
        parse_tool_args(ApplyTextStyleArgs, {
            "documentId": "a",
            "target": {"textToFind": "x"},
            "style": {"foregroundColor": "blue"},
        })


def test_paragraph_style_by_index():
    args = parse_tool_args(ApplyParagraphStyleArgs, {
        "documentId": "a",
        "target": {"indexWithinParagraph": 7},
        "style": {"alignment": "CENTER"},
    })
    assert args.target.modes() == ["index"]
