"""Read Tool Definitions — descriptors for read, listing, search and health tools.

Invariants:
    - Descriptions are what callers see in GET /api/mcp/tools
    - healthCheck is the only tool with requires_client=False
"""

from docs_bridge.core.domain_types import ToolName
from docs_bridge.core.tool_descriptor import ToolDescriptor
from docs_bridge.schemas.tool_args import (
    HealthCheckArgs, ReadDocArgs, RecentDocsArgs, SearchDocsArgs,
)
from docs_bridge.services import handle_read

TOOLS_READ = [
    ToolDescriptor(
        name=ToolName.READ_DOC,
        description=(
            "Reads the content of a specific Google Document as plain text, "
            "Markdown or the raw JSON structure."
        ),
        args_model=ReadDocArgs,
        handler=handle_read.read_google_doc,
    ),
    ToolDescriptor(
        name=ToolName.RECENT_DOCS,
        description="Gets the most recently modified Google Documents.",
        args_model=RecentDocsArgs,
        handler=handle_read.get_recent_google_docs,
    ),
    ToolDescriptor(
        name=ToolName.SEARCH_DOCS,
        description="Searches for Google Documents by name or content.",
        args_model=SearchDocsArgs,
        handler=handle_read.search_google_docs,
    ),
    ToolDescriptor(
        name=ToolName.HEALTH_CHECK,
        description="Returns OK when the service is up.",
        args_model=HealthCheckArgs,
        handler=handle_read.health_check,
        requires_client=False,
    ),
]
