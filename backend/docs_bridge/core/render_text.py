"""Plain-Text Rendering — flattens a Docs snapshot into its text content.

Invariants:
    - Pure: same snapshot → same string, no IO
    - Block elements visited in document order, runs concatenated in run order
    - Table rows emitted one per line, cells separated by tabs
    - Nested tables recurse until the document's own depth runs out
    - Blank output → EMPTY_DOCUMENT sentinel (never "")
"""

from docs_bridge.core.domain_types import Snapshot

EMPTY_DOCUMENT = "Document appears to be empty."


def body_content(snapshot: Snapshot) -> list[dict]:
    """Top-level structural elements of the document body."""
    return (snapshot.get("body") or {}).get("content") or []


def element_text(element: dict) -> str:
    """Raw text of one paragraph element (textRun or richLink)."""
    if "textRun" in element:
        return element["textRun"].get("content", "")
    if "richLink" in element:
        props = element["richLink"].get("richLinkProperties") or {}
        return props.get("title") or props.get("uri", "")
    return ""


def paragraph_text(paragraph: dict) -> str:
    return "".join(element_text(e) for e in paragraph.get("elements") or [])


def collect_text(content: list[dict]) -> str:
    """All text under a content list, tables included, in document order."""
    parts: list[str] = []
    for element in content:
        if "paragraph" in element:
            parts.append(paragraph_text(element["paragraph"]))
        elif "table" in element:
            for row in element["table"].get("tableRows") or []:
                for cell in row.get("tableCells") or []:
                    parts.append(collect_text(cell.get("content") or []))
                    parts.append(" ")
        elif "tableOfContents" in element:
            parts.append(collect_text(element["tableOfContents"].get("content") or []))
    return "".join(parts)


def flatten_cell(cell: dict) -> str:
    """Single-line cell text: newlines and runs of whitespace become one space."""
    return " ".join(collect_text(cell.get("content") or []).split())


def render_text(snapshot: Snapshot) -> str:
    """Render the document body as plain text."""
    text = _render_content(body_content(snapshot))
    if not text.strip():
        return EMPTY_DOCUMENT
    return text


def _render_content(content: list[dict]) -> str:
    parts: list[str] = []
    for element in content:
        if "paragraph" in element:
            parts.append(paragraph_text(element["paragraph"]))
        elif "table" in element:
            parts.append(_render_table(element["table"]))
        elif "tableOfContents" in element:
            parts.append(_render_content(element["tableOfContents"].get("content") or []))
    return "".join(parts)


def _render_table(table: dict) -> str:
    lines = [
        "\t".join(flatten_cell(cell) for cell in row.get("tableCells") or [])
        for row in table.get("tableRows") or []
    ]
    return "".join(f"{line}\n" for line in lines)
