"""Domain Types — enums and aliases that replace bare strings across the codebase.

Invariants:
    - ToolName is the closed set of tools; wire names match the public API
    - ErrorKind is the closed error taxonomy; values are the wire strings
    - Snapshot is the raw Docs API document dict (read-only by convention)

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any


# ─── Value Types ─────────────────────────────────────────────────

Snapshot = dict[str, Any]   # documents.get response body
DriveFile = dict[str, Any]  # files.list item


# ─── Enums ───────────────────────────────────────────────────────

class ToolName(str, Enum):
    """Every tool exposed to callers. Adding one requires a handler in ToolDispatch."""
    READ_DOC = "readGoogleDoc"
    RECENT_DOCS = "getRecentGoogleDocs"
    SEARCH_DOCS = "searchGoogleDocs"
    CREATE_DOCUMENT = "createDocument"
    APPEND_TEXT = "appendToGoogleDoc"
    INSERT_TEXT = "insertText"
    DELETE_RANGE = "deleteRange"
    APPLY_TEXT_STYLE = "applyTextStyle"
    APPLY_PARAGRAPH_STYLE = "applyParagraphStyle"
    HEALTH_CHECK = "healthCheck"


class ErrorKind(str, Enum):
    """Closed failure taxonomy carried by every failed dispatch."""
    CREDENTIAL_ERROR = "CredentialError"
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    INTERNAL = "Internal"


class OutputFormat(str, Enum):
    """readGoogleDoc output formats."""
    TEXT = "text"
    JSON = "json"
    MARKDOWN = "markdown"


class CredentialSource(str, Enum):
    """Where the credential bundle came from."""
    MANAGED = "managed"  # injected secrets (GOOGLE_CREDENTIALS / GOOGLE_TOKEN)
    FILE = "file"        # local credentials.json / token.json


class Alignment(str, Enum):
    START = "START"
    CENTER = "CENTER"
    END = "END"
    JUSTIFIED = "JUSTIFIED"


class NamedStyleType(str, Enum):
    NORMAL_TEXT = "NORMAL_TEXT"
    TITLE = "TITLE"
    SUBTITLE = "SUBTITLE"
    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"
