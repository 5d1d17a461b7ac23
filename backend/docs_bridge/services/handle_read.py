"""Read Handlers — readGoogleDoc, getRecentGoogleDocs, searchGoogleDocs, healthCheck.

Invariants:
    - readGoogleDoc fetches the full snapshot once, renders, then truncates
    - Truncation is the last step (render first, cut second)
    - Listings never exceed args.max_results entries (Drive pageSize)
    - healthCheck needs no client
"""

import json
import logging
from datetime import datetime, timezone

from docs_bridge.core.domain_types import OutputFormat
from docs_bridge.core.format_file_list import (
    build_recent_query, build_search_query, format_file_list,
)
from docs_bridge.core.render_markdown import render_markdown
from docs_bridge.core.render_text import EMPTY_DOCUMENT, render_text
from docs_bridge.core.truncate_output import truncate_output
from docs_bridge.infrastructure.google_docs_client import GoogleDocsClient
from docs_bridge.schemas.tool_args import (
    HealthCheckArgs, ReadDocArgs, RecentDocsArgs, SearchDocsArgs,
)

logger = logging.getLogger(__name__)


async def read_google_doc(client: GoogleDocsClient, args: ReadDocArgs) -> str:
    """Render a document as text, Markdown or raw JSON."""
    snapshot = await client.get_document(args.document_id)
    logger.info(
        "Fetched document (format=%s)", args.format.value,
        extra={"document_id": args.document_id},
    )

    if args.format == OutputFormat.JSON:
        rendered = json.dumps(snapshot, indent=2, ensure_ascii=False)
        return truncate_output(rendered, args.max_length)
    if args.format == OutputFormat.MARKDOWN:
        return truncate_output(render_markdown(snapshot), args.max_length)

    text = render_text(snapshot)
    if text == EMPTY_DOCUMENT:
        return text
    return (
        f"Content ({len(text)} characters):\n---\n"
        f"{truncate_output(text, args.max_length)}"
    )


async def get_recent_google_docs(
    client: GoogleDocsClient, args: RecentDocsArgs,
) -> str:
    query = build_recent_query(args.days_back, datetime.now(timezone.utc))
    files = await client.list_files(
        query, args.max_results, order_by="modifiedTime desc",
    )
    return format_file_list(
        f"Recently modified Google Document(s) (last {args.days_back} days):",
        files,
        f"No Google Documents modified in the last {args.days_back} days.",
    )


async def search_google_docs(
    client: GoogleDocsClient, args: SearchDocsArgs,
) -> str:
    files = await client.list_files(
        build_search_query(args.search_query), args.max_results,
    )
    return format_file_list(
        f'Search results for "{args.search_query}":',
        files,
        f'No Google Documents found for "{args.search_query}".',
    )


async def health_check(client: None, args: HealthCheckArgs) -> str:
    return "OK"
