"""Drive Listings — query builders and result formatting for file search tools.

Invariants:
    - Only Google Docs (DOCUMENT_MIME_TYPE), never trashed files
    - User text inside a query is escaped (backslash, single quote)
    - Formatted listings are numbered from 1 in the order Drive returned them
    - Pure: caller passes `now`, no clock reads here
"""

from datetime import datetime, timedelta, timezone

from docs_bridge.core.domain_types import DriveFile

DOCUMENT_MIME_TYPE = "application/vnd.google-apps.document"
FILE_FIELDS = "files(id,name,modifiedTime,owners,webViewLink)"
_BASE_QUERY = f"mimeType='{DOCUMENT_MIME_TYPE}' and trashed=false"


def escape_query_value(value: str) -> str:
    """Escape a string for use inside a single-quoted Drive query literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_recent_query(days_back: int, now: datetime) -> str:
    cutoff = (now - timedelta(days=days_back)).astimezone(timezone.utc)
    stamp = cutoff.strftime("%Y-%m-%dT%H:%M:%SZ")
    return f"{_BASE_QUERY} and modifiedTime >= '{stamp}'"


def build_search_query(search_query: str) -> str:
    term = escape_query_value(search_query)
    return (
        f"{_BASE_QUERY} and "
        f"(name contains '{term}' or fullText contains '{term}')"
    )


def format_modified_time(value: str | None) -> str:
    """RFC 3339 Drive timestamp → 'YYYY-MM-DD HH:MM UTC' ('Unknown' if absent)."""
    if not value:
        return "Unknown"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def format_file_entry(position: int, file: DriveFile) -> str:
    owners = file.get("owners") or []
    owner = owners[0].get("displayName", "Unknown") if owners else "Unknown"
    return (
        f"{position}. **{file.get('name', 'Untitled')}**\n"
        f"   ID: {file.get('id')}\n"
        f"   Last Modified: {format_modified_time(file.get('modifiedTime'))} by {owner}\n"
        f"   Link: {file.get('webViewLink', '')}"
    )


def format_file_list(header: str, files: list[DriveFile], empty_message: str) -> str:
    """Numbered listing under a header, or empty_message if there are no files."""
    if not files:
        return empty_message
    entries = "\n\n".join(
        format_file_entry(i, f) for i, f in enumerate(files, start=1)
    )
    return f"{header}\n\n{entries}"
