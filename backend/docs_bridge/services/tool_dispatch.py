"""Tool Dispatch — the single invocation seam shared by every transport.

Invariants:
    - dispatch() never raises: every outcome is a DispatchResult
    - Unknown tools → NotFound; bad arguments → InvalidArgument naming the field
    - Arguments validated before credentials are touched
    - resolve() called exactly once per dispatch, and only for tools that need
      the network; a CredentialError aborts before the handler runs
    - Handler results returned verbatim in DispatchSuccess.data
    - No retries; every call logged with outcome and duration

Design Decisions:
    - Client rebuilt only when the resolver hands back a different handle
    - Catch-all maps unexpected exceptions to Internal with the original
      message; traceback goes to the log, not the caller
"""

import asyncio
import logging
from collections.abc import Callable
from functools import lru_cache
from time import perf_counter
from typing import Any

from docs_bridge.core.dispatch_result import (
    DispatchFailure, DispatchResult, DispatchSuccess,
)
from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.core.errors import DocsBridgeError
from docs_bridge.core.tool_descriptor import ToolDescriptor
from docs_bridge.infrastructure.credentials import (
    CredentialHandle, CredentialResolver, get_credential_resolver,
)
from docs_bridge.infrastructure.google_docs_client import GoogleDocsClient
from docs_bridge.schemas.tool_args import parse_tool_args
from docs_bridge.services.tools_registry import ToolRegistry, build_registry

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name → descriptor → handler with uniform error shaping."""

    def __init__(
        self,
        resolver: CredentialResolver,
        registry: ToolRegistry | None = None,
        client_factory: Callable[[Any], Any] = GoogleDocsClient,
    ):
        self._resolver = resolver
        self._registry = registry or build_registry()
        self._client_factory = client_factory
        self._client_cache: tuple[CredentialHandle, Any] | None = None

    def list_tools(self) -> list[ToolDescriptor]:
        return self._registry.descriptors()

    async def dispatch(self, tool_name: str, arguments: Any) -> DispatchResult:
        """Validate, resolve credentials, run the handler, shape the result."""
        started = perf_counter()
        descriptor = self._registry.get(tool_name)
        if descriptor is None:
            result = DispatchFailure(
                ErrorKind.NOT_FOUND, f"Tool '{tool_name}' does not exist.",
            )
            self._log_tool_call(tool_name, result, started)
            return result

        try:
            args = parse_tool_args(descriptor.args_model, arguments)
            client = await self._get_client() if descriptor.requires_client else None
            result = DispatchSuccess(await descriptor.handler(client, args))
        except DocsBridgeError as exc:
            result = DispatchFailure.from_error(exc)
        except Exception as exc:
            logger.error(
                "Unexpected error in tool '%s': %s", tool_name, exc,
                exc_info=True, extra={"tool_name": tool_name},
            )
            result = DispatchFailure(
                ErrorKind.INTERNAL, str(exc) or type(exc).__name__,
            )
        self._log_tool_call(tool_name, result, started)
        return result

    async def _get_client(self) -> Any:
        handle = await asyncio.to_thread(self._resolver.resolve)
        cached = self._client_cache
        if cached is not None and cached[0] is handle:
            return cached[1]
        client = self._client_factory(handle.credentials)
        self._client_cache = (handle, client)
        return client

    def _log_tool_call(
        self, tool_name: str, result: DispatchResult, started: float,
    ) -> None:
        duration_ms = round((perf_counter() - started) * 1000, 1)
        if result.success:
            logger.info(
                "Tool call succeeded",
                extra={"tool_name": tool_name, "duration_ms": duration_ms},
            )
            return
        logger.warning(
            "Tool call failed: %s", result.message,
            extra={
                "tool_name": tool_name,
                "error_kind": result.kind.value,
                "duration_ms": duration_ms,
            },
        )


@lru_cache
def get_tool_dispatch() -> ToolDispatch:
    """Process-wide dispatcher (FastAPI dependency; override in tests)."""
    return ToolDispatch(get_credential_resolver())
