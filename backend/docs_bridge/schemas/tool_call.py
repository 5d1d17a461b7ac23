"""Tool Call Schemas — request/response bodies for the HTTP and SSE facades.

Invariants:
    - toolName optional at the schema level: a missing name becomes an
      InvalidArgument dispatch result, not a FastAPI 422/400 envelope
    - arguments accepted as any JSON value; shape checks belong to ToolDispatch
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolCallRequest(BaseModel):
    """Generic tool invocation: {"toolName": ..., "arguments": {...}}."""
    model_config = ConfigDict(populate_by_name=True)

    tool_name: str | None = Field(None, alias="toolName")
    arguments: Any = None


class ToolInfo(BaseModel):
    """Published description of one tool."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")


class ToolListResponse(BaseModel):
    success: bool = True
    tools: list[ToolInfo]
