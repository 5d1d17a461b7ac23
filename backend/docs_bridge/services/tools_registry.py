"""Tools Registry — unique, complete mapping from ToolName to ToolDescriptor.

Invariants:
    - register() rejects a name that is already registered
    - check_complete() rejects a registry missing any ToolName member
    - get() never raises: unknown or malformed names return None
    - Descriptors listed in registration order

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
"""

from docs_bridge.core.domain_types import ToolName
from docs_bridge.core.tool_descriptor import ToolDescriptor
from docs_bridge.services.define_read_tools import TOOLS_READ
from docs_bridge.services.define_write_tools import TOOLS_FORMAT, TOOLS_WRITE


class ToolRegistry:
    """Stores tool descriptors keyed by ToolName."""

    def __init__(self) -> None:
        self._tools: dict[ToolName, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            raise ValueError(f"Tool already registered: {descriptor.name.value}")
        self._tools[descriptor.name] = descriptor

    def check_complete(self) -> None:
        missing = [name.value for name in ToolName if name not in self._tools]
        if missing:
            raise ValueError(f"Tools without a handler: {', '.join(missing)}")

    def get(self, name: object) -> ToolDescriptor | None:
        try:
            return self._tools.get(ToolName(name))
        except ValueError:
            return None

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._tools.values())


ALL_TOOLS: list[ToolDescriptor] = [
    *TOOLS_READ,     # 4 tools (incl healthCheck)
    *TOOLS_WRITE,    # 4 tools
    *TOOLS_FORMAT,   # 2 tools
]


def build_registry(tools: list[ToolDescriptor] | None = None) -> ToolRegistry:
    """Register every descriptor and verify the ToolName set is covered."""
    registry = ToolRegistry()
    for descriptor in ALL_TOOLS if tools is None else tools:
        registry.register(descriptor)
    registry.check_complete()
    return registry
