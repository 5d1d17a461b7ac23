"""Markdown Rendering — converts a Docs snapshot into Markdown.

Invariants:
    - Pure: same snapshot → same string, no IO
    - Headings: HEADING_n → '#' * n (clamped to 6), TITLE → 1, SUBTITLE → 2
    - Bulleted paragraphs → '- ' items, indented two spaces per nesting level
    - Inline markers compose in fixed order: emphasis, underline, strike, link
    - bold+italic → '***x***' (never '**' and '*' separately)
    - Tables: first physical row is always the header; exactly one separator
      line follows it, whatever the cell contents are
    - Empty body or blank output → EMPTY_DOCUMENT sentinel

Design Decisions:
    - Header row is a fixed policy: the Docs model has no header-row flag
    - Leading section breaks skipped: every Docs body opens with one
    - Run whitespace kept outside markers: '**Hello\\n**' is not valid Markdown
"""

from docs_bridge.core.domain_types import Snapshot
from docs_bridge.core.render_text import (
    EMPTY_DOCUMENT, body_content, element_text, flatten_cell,
)

_MAX_HEADING_LEVEL = 6
_SECTION_BREAK = "\n---\n\n"


def render_markdown(snapshot: Snapshot) -> str:
    """Render the document body as Markdown."""
    content = body_content(snapshot)
    if not content:
        return EMPTY_DOCUMENT
    markdown = _render_content(content).strip()
    return markdown or EMPTY_DOCUMENT


def heading_level(named_style: str | None) -> int:
    """Markdown heading level for a named paragraph style, 0 if not a heading."""
    if named_style == "TITLE":
        return 1
    if named_style == "SUBTITLE":
        return 2
    if not named_style or not named_style.startswith("HEADING_"):
        return 0
    try:
        level = int(named_style.removeprefix("HEADING_"))
    except ValueError:
        return 0
    return min(level, _MAX_HEADING_LEVEL) if level > 0 else 0


def render_text_run(text_run: dict) -> str:
    """Apply inline Markdown markers for one run's text style."""
    content = text_run.get("content", "")
    style = text_run.get("textStyle") or {}
    core = content.strip()
    if not core or not style:
        return content
    leading = content[: len(content) - len(content.lstrip())]
    trailing = content[len(content.rstrip()):]

    text = core
    if style.get("bold") and style.get("italic"):
        text = f"***{text}***"
    elif style.get("bold"):
        text = f"**{text}**"
    elif style.get("italic"):
        text = f"*{text}*"

    link = style.get("link")
    if style.get("underline") and not link:
        text = f"<u>{text}</u>"
    if style.get("strikethrough"):
        text = f"~~{text}~~"
    if link and link.get("url"):
        text = f"[{text}]({link['url']})"
    return f"{leading}{text}{trailing}"


def _render_content(content: list[dict]) -> str:
    parts: list[str] = []
    has_content = False
    in_list = False
    for element in content:
        if "paragraph" in element:
            paragraph = element["paragraph"]
            rendered = _render_paragraph(paragraph)
            is_item = _is_list_item(paragraph, rendered)
            if in_list and not is_item:
                parts.append("\n")
            in_list = is_item
            parts.append(rendered)
            has_content = has_content or bool(rendered.strip())
            continue
        if in_list:
            parts.append("\n")
            in_list = False
        if "table" in element:
            parts.append(_render_table(element["table"]))
            has_content = True
        elif "tableOfContents" in element:
            toc = _render_content(element["tableOfContents"].get("content") or [])
            parts.append(toc)
            has_content = has_content or bool(toc.strip())
        elif "sectionBreak" in element and has_content:
            parts.append(_SECTION_BREAK)
    return "".join(parts)


def _is_list_item(paragraph: dict, rendered: str) -> bool:
    return "bullet" in paragraph and rendered.lstrip().startswith("- ")


def _render_paragraph(paragraph: dict) -> str:
    text = "".join(
        _render_element(e) for e in paragraph.get("elements") or []
    ).strip()
    if not text:
        return "\n"

    style = paragraph.get("paragraphStyle") or {}
    level = heading_level(style.get("namedStyleType"))
    if level:
        return f"{'#' * level} {text}\n\n"
    if "bullet" in paragraph:
        indent = "  " * (paragraph["bullet"].get("nestingLevel") or 0)
        return f"{indent}- {text}\n"
    return f"{text}\n\n"


def _render_element(element: dict) -> str:
    if "textRun" in element:
        return render_text_run(element["textRun"])
    if "richLink" in element:
        uri = (element["richLink"].get("richLinkProperties") or {}).get("uri")
        title = element_text(element)
        return f"[{title}]({uri})" if uri else title
    return ""


def _render_table(table: dict) -> str:
    rows = table.get("tableRows") or []
    if not rows:
        return ""
    lines: list[str] = []
    for position, row in enumerate(rows):
        cells = [
            flatten_cell(cell).replace("|", "\\|")
            for cell in row.get("tableCells") or []
        ]
        lines.append("|" + "".join(f" {cell} |" for cell in cells))
        if position == 0:
            lines.append("|" + " --- |" * max(len(cells), 1))
    return "\n" + "\n".join(lines) + "\n\n"
