"""Error Hierarchy — closed taxonomy of failure kinds for every tool call.

Invariants:
    - Every error has a kind (ErrorKind), message (str) and http_status (int)
    - ErrorKind is closed: CredentialError, InvalidArgument, NotFound,
      PermissionDenied, Internal
    - to_response() produces REST envelope; to_sse_event() produces SSE envelope
    - InvalidArgumentError carries the offending field name when known

Design Decisions:
    - Single hierarchy with DocsBridgeError base: FastAPI global handler and
      ToolDispatch both catch the base class
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from docs_bridge.core.domain_types import ErrorKind


@dataclass
class ErrorContext:
    """Context attached to an error for logs and envelopes."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    document_id: str | None = None
    debug_info: dict[str, Any] | None = None


class DocsBridgeError(Exception):
    """Base exception for all docs-bridge errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "errorKind": self.kind.value,
            "message": self.message,
            "timestamp": self.context.timestamp.isoformat(),
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "errorKind": self.kind.value,
                "message": self.message,
                "tool_name": self.context.tool_name,
            },
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(DocsBridgeError):
    """Tool arguments failed schema validation or don't fit the document."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message, ErrorKind.INVALID_ARGUMENT, context, 400)
        self.field = field


class NotFoundError(DocsBridgeError):
    """Unknown tool or missing remote resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.NOT_FOUND, context, 404)


class PermissionDeniedError(DocsBridgeError):
    """Remote API refused access to the resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.PERMISSION_DENIED, context, 403)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class CredentialError(DocsBridgeError):
    """Credential resolution or token refresh is impossible."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.CREDENTIAL_ERROR, context, 503)


class UpstreamError(DocsBridgeError):
    """Remote API call failed for any other reason (5xx, 4xx, network)."""
    def __init__(
        self, message: str, status: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(message, ErrorKind.INTERNAL, context, 500)
        self.status = status


class InternalError(DocsBridgeError):
    """Anything else raised while running a tool."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, ErrorKind.INTERNAL, context, 500)
