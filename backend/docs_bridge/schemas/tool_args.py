"""Tool Argument Schemas — one Pydantic model per tool, validated at dispatch.

Invariants:
    - Wire names are camelCase (documentId, maxLength); Python names snake_case
    - Unknown fields rejected (extra="forbid")
    - Cross-field rules (range order, one targeting mode, at least one style
      field) raise inside the nested model so the error names it
    - parse_tool_args() is the only place ValidationError turns into
      InvalidArgumentError

Design Decisions:
    - Pydantic over hand-written JSON-schema checks: same models produce the
      published JSON schema (model_json_schema) and the validation
"""

from typing import Any, ClassVar

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationError, ValidationInfo,
    field_validator, model_validator,
)
from pydantic.alias_generators import to_camel

from docs_bridge.core.domain_types import Alignment, NamedStyleType, OutputFormat
from docs_bridge.core.errors import InvalidArgumentError

_HEX_PATTERN = r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


class ToolArgs(BaseModel):
    """Base for all tool argument models."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )


class DocumentArgs(ToolArgs):
    document_id: str = Field(min_length=1, description="The ID of the Google Document.")


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("cannot be empty or whitespace")
    return value


# --- Read / search ------------------------------------------------------------

class ReadDocArgs(DocumentArgs):
    format: OutputFormat = Field(
        OutputFormat.TEXT,
        description="Output format: 'text', 'json' (raw API structure) or 'markdown'.",
    )
    max_length: int | None = Field(
        None, ge=1, description="Maximum character limit for the output.",
    )


class RecentDocsArgs(ToolArgs):
    max_results: int = Field(10, ge=1, le=50)
    days_back: int = Field(30, ge=1, le=365)


class SearchDocsArgs(ToolArgs):
    search_query: str = Field(min_length=1, description="Text to find in name or content.")
    max_results: int = Field(10, ge=1, le=50)

    @field_validator("search_query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        return _strip_required(v)


# --- Create / edit ------------------------------------------------------------

class CreateDocumentArgs(ToolArgs):
    title: str = Field(min_length=1, max_length=500)
    initial_content: str | None = Field(
        None, description="Optional text inserted into the new document.",
    )

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v)


class AppendTextArgs(DocumentArgs):
    text_to_append: str = Field(min_length=1)
    add_newline_if_needed: bool = True


class InsertTextArgs(DocumentArgs):
    text_to_insert: str = Field(min_length=1)
    index: int = Field(ge=1, description="1-based index to insert at.")


class DeleteRangeArgs(DocumentArgs):
    start_index: int = Field(ge=1)
    end_index: int = Field(ge=1)

    @field_validator("end_index")
    @classmethod
    def end_after_start(cls, v: int, info: ValidationInfo) -> int:
        start = info.data.get("start_index")
        if start is not None and v <= start:
            raise ValueError("endIndex must be greater than startIndex")
        return v


# --- Formatting ---------------------------------------------------------------

class TextTarget(ToolArgs):
    """Either an explicit [startIndex, endIndex) range or the nth match of text."""
    mode_hint: ClassVar[str] = "startIndex and endIndex, or textToFind"

    start_index: int | None = Field(None, ge=1)
    end_index: int | None = Field(None, ge=1)
    text_to_find: str | None = Field(None, min_length=1)
    match_instance: int = Field(1, ge=1)

    @model_validator(mode="after")
    def check_mode(self) -> "TextTarget":
        if (self.start_index is None) != (self.end_index is None):
            raise ValueError("startIndex and endIndex must be given together")
        if self.start_index is not None and self.end_index <= self.start_index:
            raise ValueError("endIndex must be greater than startIndex")
        if len(self.modes()) != 1:
            raise ValueError(f"provide exactly one of: {self.mode_hint}")
        return self

    def modes(self) -> list[str]:
        modes = []
        if self.start_index is not None:
            modes.append("range")
        if self.text_to_find is not None:
            modes.append("text")
        return modes


class ParagraphTarget(TextTarget):
    """TextTarget plus any index inside the paragraph to style."""
    mode_hint: ClassVar[str] = (
        "startIndex and endIndex, textToFind, or indexWithinParagraph"
    )

    index_within_paragraph: int | None = Field(None, ge=1)

    def modes(self) -> list[str]:
        modes = super().modes()
        if self.index_within_paragraph is not None:
            modes.append("index")
        return modes


class TextStyle(ToolArgs):
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    font_size: float | None = Field(None, gt=0, le=400, description="Points.")
    font_family: str | None = Field(None, min_length=1)
    foreground_color: str | None = Field(None, pattern=_HEX_PATTERN)
    background_color: str | None = Field(None, pattern=_HEX_PATTERN)
    link_url: str | None = Field(None, min_length=1)

    @model_validator(mode="after")
    def require_one(self) -> "TextStyle":
        if all(v is None for v in self.model_dump().values()):
            raise ValueError("at least one style option must be provided")
        return self


class ParagraphStyle(ToolArgs):
    alignment: Alignment | None = None
    named_style_type: NamedStyleType | None = None
    indent_start: float | None = Field(None, ge=0, description="Points.")
    indent_end: float | None = Field(None, ge=0, description="Points.")
    space_above: float | None = Field(None, ge=0, description="Points.")
    space_below: float | None = Field(None, ge=0, description="Points.")
    keep_with_next: bool | None = None

    @model_validator(mode="after")
    def require_one(self) -> "ParagraphStyle":
        if all(v is None for v in self.model_dump().values()):
            raise ValueError("at least one paragraph style option must be provided")
        return self


class ApplyTextStyleArgs(DocumentArgs):
    target: TextTarget
    style: TextStyle


class ApplyParagraphStyleArgs(DocumentArgs):
    target: ParagraphTarget
    style: ParagraphStyle


class HealthCheckArgs(ToolArgs):
    pass


# --- Validation boundary ------------------------------------------------------

def parse_tool_args(model: type[ToolArgs], payload: Any) -> ToolArgs:
    """Validate a raw argument bag. Raises InvalidArgumentError naming the field."""
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidArgumentError(
            "arguments must be a JSON object", field="arguments",
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise _to_invalid_argument(exc) from exc


def _to_invalid_argument(exc: ValidationError) -> InvalidArgumentError:
    errors = exc.errors()
    problems = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"])
        problems.append(
            f"{location}: {error['msg']}" if location else error["msg"],
        )
    first = ".".join(str(part) for part in errors[0]["loc"]) or None
    return InvalidArgumentError(
        f"Invalid arguments: {'; '.join(problems)}", field=first,
    )
