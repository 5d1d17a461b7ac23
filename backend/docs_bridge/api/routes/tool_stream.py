"""Tool Stream — Server-Sent Events facade over ToolDispatch.

Invariants:
    - Event order: tool_started → (tool_result | error) → done
    - Exactly one tool_result or error event per stream
    - Client disconnect ends the generator quietly; the dispatch itself is not cancelled

Design Decisions:
    - StreamingResponse for SSE: event_generator yields formatted SSE lines
    - SSE headers prevent proxy/browser buffering of streamed events
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from docs_bridge.core.dispatch_result import DispatchFailure, DispatchResult
from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.schemas.tool_call import ToolCallRequest
from docs_bridge.services.tool_dispatch import ToolDispatch, get_tool_dispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/mcp", tags=["stream"])

_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def _sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


def _result_event(tool_name: str | None, result: DispatchResult) -> dict:
    if result.success:
        return {"type": "tool_result", "data": {"toolName": tool_name, **result.to_payload()}}
    return {"type": "error", "data": {"toolName": tool_name, **result.to_payload()}}


@router.post("/stream")
async def stream_tool_call(
    body: ToolCallRequest, dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Run one tool call and stream its lifecycle as SSE events."""

    async def event_generator():
        try:
            yield _sse_line({"type": "tool_started", "data": {"toolName": body.tool_name}})
            if not body.tool_name:
                result = DispatchFailure(ErrorKind.INVALID_ARGUMENT, "toolName is required")
            else:
                result = await dispatch.dispatch(body.tool_name, body.arguments)
            yield _sse_line(_result_event(body.tool_name, result))
            yield _sse_line({"type": "done", "data": {"error": not result.success}})
        except asyncio.CancelledError:
            logger.info(
                "Client disconnected from tool stream",
                extra={"tool_name": body.tool_name},
            )
            return

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )
