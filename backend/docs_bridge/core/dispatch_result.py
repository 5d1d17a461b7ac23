"""Dispatch Result — discriminated union returned by every tool dispatch.

Invariants:
    - Exactly one arm: DispatchSuccess(data) or DispatchFailure(kind, message)
    - DispatchFailure.kind is always an ErrorKind member
    - to_payload() is the wire shape shared by REST and SSE facades
"""

from dataclasses import dataclass
from typing import Any, Union

from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.core.errors import DocsBridgeError

# HTTP status per error kind, used by the REST facade
_HTTP_STATUS = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
    ErrorKind.CREDENTIAL_ERROR: 503,
}


@dataclass(frozen=True)
class DispatchSuccess:
    data: Any
    success: bool = True

    @property
    def http_status(self) -> int:
        return 200

    def to_payload(self) -> dict:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class DispatchFailure:
    kind: ErrorKind
    message: str
    success: bool = False

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.kind]

    def to_payload(self) -> dict:
        return {
            "success": False,
            "errorKind": self.kind.value,
            "message": self.message,
        }

    @classmethod
    def from_error(cls, error: DocsBridgeError) -> "DispatchFailure":
        return cls(kind=error.kind, message=error.message)


DispatchResult = Union[DispatchSuccess, DispatchFailure]
