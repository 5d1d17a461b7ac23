"""Text Location — maps text and positions in a snapshot to Docs API index ranges.

Invariants:
    - Docs indexes are 1-based; ranges are half-open [start, end)
    - Table cells are searched recursively, in document order
    - Lookups return None when nothing matches (caller decides the error)
    - A match never spans an index gap between runs (inline object, footnote
      reference, page break, table cell boundary)
"""

from collections.abc import Iterator

from docs_bridge.core.domain_types import Snapshot
from docs_bridge.core.render_text import body_content

# Stands in for index positions that hold no text run; never matches
_GAP = "\ufffc"


def document_end_index(snapshot: Snapshot) -> int:
    """Index for appending: just before the body's final newline."""
    content = body_content(snapshot)
    if not content:
        return 1
    return max(content[-1].get("endIndex", 1) - 1, 1)


def iter_paragraphs(content: list[dict]) -> Iterator[dict]:
    """Structural elements holding a paragraph, descending into tables."""
    for element in content:
        if "paragraph" in element:
            yield element
        elif "table" in element:
            for row in element["table"].get("tableRows") or []:
                for cell in row.get("tableCells") or []:
                    yield from iter_paragraphs(cell.get("content") or [])
        elif "tableOfContents" in element:
            yield from iter_paragraphs(
                element["tableOfContents"].get("content") or [],
            )


def find_text_range(
    snapshot: Snapshot, text: str, instance: int = 1,
) -> tuple[int, int] | None:
    """Index range of the nth (1-based) occurrence of text, or None."""
    if not text or instance < 1 or _GAP in text:
        return None

    # (offset in joined text, doc startIndex, run text)
    segments: list[tuple[int, int, str]] = []
    offset = 0
    next_index: int | None = None
    for paragraph in iter_paragraphs(body_content(snapshot)):
        for element in paragraph["paragraph"].get("elements") or []:
            run = element.get("textRun")
            if run is None or "startIndex" not in element:
                continue
            content = run.get("content", "")
            if not content:
                continue
            start = element["startIndex"]
            if next_index is not None and start != next_index:
                # inline objects, footnote refs, rules and cell boundaries
                segments.append((offset, next_index, _GAP))
                offset += 1
            segments.append((offset, start, content))
            offset += len(content)
            next_index = element.get("endIndex", start + len(content))
    joined = "".join(segment[2] for segment in segments)

    position = -1
    for _ in range(instance):
        position = joined.find(text, position + 1)
        if position == -1:
            return None
    start = _doc_index(segments, position)
    end = _doc_index(segments, position + len(text) - 1) + 1
    return start, end


def find_paragraph_range(snapshot: Snapshot, index: int) -> tuple[int, int] | None:
    """Range of the paragraph containing index, or None."""
    for element in iter_paragraphs(body_content(snapshot)):
        start, end = element.get("startIndex"), element.get("endIndex")
        if start is None or end is None:
            continue
        if start <= index < end:
            return start, end
    return None


def _doc_index(segments: list[tuple[int, int, str]], position: int) -> int:
    for offset, doc_start, content in reversed(segments):
        if offset <= position:
            return doc_start + (position - offset)
    raise ValueError(f"position {position} outside document text")
