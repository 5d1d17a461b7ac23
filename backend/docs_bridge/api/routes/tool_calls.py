"""Tool Call Routes — request/response HTTP facade over ToolDispatch.

Invariants:
    - Routes never contain tool logic: parse body → dispatch → serialize
    - Response body is DispatchResult.to_payload(); status code from the error kind
    - Missing toolName → 400 InvalidArgument without dispatching
    - /api/docs/* shortcuts bind a fixed tool to the request body

Design Decisions:
    - ToolDispatch injected via Depends(get_tool_dispatch): tests override it
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from docs_bridge.core.dispatch_result import DispatchFailure, DispatchResult
from docs_bridge.core.domain_types import ErrorKind, ToolName
from docs_bridge.schemas.tool_call import ToolCallRequest, ToolListResponse
from docs_bridge.services.tool_dispatch import ToolDispatch, get_tool_dispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["tools"])


def _respond(result: DispatchResult) -> JSONResponse:
    return JSONResponse(status_code=result.http_status, content=result.to_payload())


@router.get("/mcp/tools", response_model=ToolListResponse, response_model_by_alias=True)
async def list_tools(dispatch: ToolDispatch = Depends(get_tool_dispatch)):
    """List available tools with their argument schemas."""
    return {"success": True, "tools": [d.to_info() for d in dispatch.list_tools()]}


@router.post("/mcp/call")
async def call_tool(
    body: ToolCallRequest, dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Generic tool call: {"toolName": ..., "arguments": {...}}."""
    if not body.tool_name:
        return _respond(DispatchFailure(
            ErrorKind.INVALID_ARGUMENT, "toolName is required",
        ))
    logger.info("Calling tool", extra={"tool_name": body.tool_name})
    return _respond(await dispatch.dispatch(body.tool_name, body.arguments))


@router.post("/docs/recent")
async def recent_docs(
    arguments: Any = Body(None), dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    return _respond(await dispatch.dispatch(ToolName.RECENT_DOCS.value, arguments))


@router.post("/docs/read")
async def read_doc(
    arguments: Any = Body(None), dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    return _respond(await dispatch.dispatch(ToolName.READ_DOC.value, arguments))


@router.post("/docs/search")
async def search_docs(
    arguments: Any = Body(None), dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    return _respond(await dispatch.dispatch(ToolName.SEARCH_DOCS.value, arguments))
