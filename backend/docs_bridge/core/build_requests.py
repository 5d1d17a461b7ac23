"""batchUpdate Request Builders — pure constructors for Docs API mutation requests.

Invariants:
    - Every style request carries a `fields` mask listing exactly the fields set
    - Style builders return None when no style field was supplied
    - Dimensions are in points (unit "PT"); colors are rgbColor in 0.0–1.0
"""

import re
from typing import Any

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex_color(value: str) -> dict[str, float]:
    """'#RGB' or '#RRGGBB' → Docs rgbColor dict. Raises ValueError if malformed."""
    match = _HEX_COLOR.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return {"red": red, "green": green, "blue": blue}


def _dimension(points: float) -> dict[str, Any]:
    return {"magnitude": points, "unit": "PT"}


def _range(start_index: int, end_index: int) -> dict[str, int]:
    return {"startIndex": start_index, "endIndex": end_index}


def build_insert_text_request(index: int, text: str) -> dict:
    return {"insertText": {"location": {"index": index}, "text": text}}


def build_delete_range_request(start_index: int, end_index: int) -> dict:
    return {"deleteContentRange": {"range": _range(start_index, end_index)}}


def build_text_style_request(
    start_index: int,
    end_index: int,
    *,
    bold: bool | None = None,
    italic: bool | None = None,
    underline: bool | None = None,
    strikethrough: bool | None = None,
    font_size: float | None = None,
    font_family: str | None = None,
    foreground_color: str | None = None,
    background_color: str | None = None,
    link_url: str | None = None,
) -> dict | None:
    """updateTextStyle request for the given range, or None if nothing to set."""
    style: dict[str, Any] = {}
    flags = {
        "bold": bold, "italic": italic,
        "underline": underline, "strikethrough": strikethrough,
    }
    for name, value in flags.items():
        if value is not None:
            style[name] = value
    if font_size is not None:
        style["fontSize"] = _dimension(font_size)
    if font_family is not None:
        style["weightedFontFamily"] = {"fontFamily": font_family}
    if foreground_color is not None:
        style["foregroundColor"] = {
            "color": {"rgbColor": parse_hex_color(foreground_color)},
        }
    if background_color is not None:
        style["backgroundColor"] = {
            "color": {"rgbColor": parse_hex_color(background_color)},
        }
    if link_url is not None:
        style["link"] = {"url": link_url}
    if not style:
        return None
    return {
        "updateTextStyle": {
            "range": _range(start_index, end_index),
            "textStyle": style,
            "fields": ",".join(style),
        },
    }


def build_paragraph_style_request(
    start_index: int,
    end_index: int,
    *,
    alignment: str | None = None,
    named_style_type: str | None = None,
    indent_start: float | None = None,
    indent_end: float | None = None,
    space_above: float | None = None,
    space_below: float | None = None,
    keep_with_next: bool | None = None,
) -> dict | None:
    """updateParagraphStyle request for the given range, or None if nothing to set."""
    style: dict[str, Any] = {}
    if alignment is not None:
        style["alignment"] = alignment
    if named_style_type is not None:
        style["namedStyleType"] = named_style_type
    dimensions = {
        "indentStart": indent_start, "indentEnd": indent_end,
        "spaceAbove": space_above, "spaceBelow": space_below,
    }
    for name, points in dimensions.items():
        if points is not None:
            style[name] = _dimension(points)
    if keep_with_next is not None:
        style["keepWithNext"] = keep_with_next
    if not style:
        return None
    return {
        "updateParagraphStyle": {
            "range": _range(start_index, end_index),
            "paragraphStyle": style,
            "fields": ",".join(style),
        },
    }
