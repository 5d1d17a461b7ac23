"""Error Handlers — global exception handlers for the docs-bridge API.

Invariants:
    - DocsBridgeError → {success, errorKind, message, timestamp} with its http_status
    - RequestValidationError → 400 InvalidArgument naming the offending fields
    - Exception (catch-all) → 500 Internal, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (DocsBridgeError), validation (Pydantic), catch-all (Exception)
    - Same envelope as DispatchFailure.to_payload(): callers parse one shape
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.core.errors import DocsBridgeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register docs-bridge domain/infrastructure error handler."""

    @app.exception_handler(DocsBridgeError)
    async def docs_bridge_error_handler(request: Request, exc: DocsBridgeError):
        """Handle all docs-bridge domain/infrastructure errors."""
        logger.error(
            f"DocsBridgeError: {exc.message}",
            extra={"error_kind": exc.kind.value, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "errorKind": ErrorKind.INTERNAL.value,
                "message": "An unexpected error occurred",
                "timestamp": _now(),
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    summary = "; ".join(f"{d['field']}: {d['message']}" for d in details)
    return {
        "success": False,
        "errorKind": ErrorKind.INVALID_ARGUMENT.value,
        "message": f"Invalid request data: {summary}" if summary else "Invalid request data",
        "timestamp": _now(),
        "details": details,
    }


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()
