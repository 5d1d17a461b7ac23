"""Tool Descriptor — immutable registration record for one tool.

Invariants:
    - Frozen: never mutated after registration
    - handler(client, args) is awaited; client is None when requires_client is False
    - input_schema() is derived from args_model, never written by hand
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from docs_bridge.core.domain_types import ToolName

Handler = Callable[[Any, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    name: ToolName
    description: str
    args_model: type  # pydantic model (schemas.tool_args.ToolArgs subclass)
    handler: Handler
    requires_client: bool = True

    def input_schema(self) -> dict[str, Any]:
        return self.args_model.model_json_schema(by_alias=True)

    def to_info(self) -> dict[str, Any]:
        return {
            "name": self.name.value,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
