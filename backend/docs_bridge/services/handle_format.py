"""Format Handlers — applyTextStyle, applyParagraphStyle.

Invariants:
    - Target resolved to an index range before any mutation
    - textToFind targets fetch the snapshot once; a missing match → NotFoundError
    - Paragraph targets by text or index expand to the containing paragraph
    - Exactly one updateTextStyle / updateParagraphStyle request per call
"""

from docs_bridge.core.build_requests import (
    build_paragraph_style_request, build_text_style_request,
)
from docs_bridge.core.errors import InvalidArgumentError, NotFoundError
from docs_bridge.core.locate_text import find_paragraph_range, find_text_range
from docs_bridge.infrastructure.google_docs_client import GoogleDocsClient
from docs_bridge.schemas.tool_args import (
    ApplyParagraphStyleArgs, ApplyTextStyleArgs, TextTarget,
)


async def apply_text_style(
    client: GoogleDocsClient, args: ApplyTextStyleArgs,
) -> str:
    start, end = await _resolve_text_range(client, args.document_id, args.target)
    style = args.style
    request = build_text_style_request(
        start, end,
        bold=style.bold,
        italic=style.italic,
        underline=style.underline,
        strikethrough=style.strikethrough,
        font_size=style.font_size,
        font_family=style.font_family,
        foreground_color=style.foreground_color,
        background_color=style.background_color,
        link_url=style.link_url,
    )
    if request is None:
        raise InvalidArgumentError("no style options given", field="style")
    await client.batch_update(args.document_id, [request])
    return f"Successfully applied text style to range {start}-{end}."


async def apply_paragraph_style(
    client: GoogleDocsClient, args: ApplyParagraphStyleArgs,
) -> str:
    target = args.target
    if target.start_index is not None:
        start, end = target.start_index, target.end_index
    else:
        snapshot = await client.get_document(args.document_id)
        if target.text_to_find is not None:
            found = find_text_range(
                snapshot, target.text_to_find, target.match_instance,
            )
            if found is None:
                raise _text_not_found(args.document_id, target)
            index = found[0]
        else:
            index = target.index_within_paragraph
        paragraph = find_paragraph_range(snapshot, index)
        if paragraph is None:
            raise NotFoundError(
                f"No paragraph contains index {index} in document {args.document_id}",
            )
        start, end = paragraph

    style = args.style
    request = build_paragraph_style_request(
        start, end,
        alignment=style.alignment.value if style.alignment else None,
        named_style_type=(
            style.named_style_type.value if style.named_style_type else None
        ),
        indent_start=style.indent_start,
        indent_end=style.indent_end,
        space_above=style.space_above,
        space_below=style.space_below,
        keep_with_next=style.keep_with_next,
    )
    if request is None:
        raise InvalidArgumentError("no paragraph style options given", field="style")
    await client.batch_update(args.document_id, [request])
    return f"Successfully applied paragraph style to range {start}-{end}."


async def _resolve_text_range(
    client: GoogleDocsClient, document_id: str, target: TextTarget,
) -> tuple[int, int]:
    if target.start_index is not None:
        return target.start_index, target.end_index
    snapshot = await client.get_document(document_id)
    found = find_text_range(snapshot, target.text_to_find, target.match_instance)
    if found is None:
        raise _text_not_found(document_id, target)
    return found


def _text_not_found(document_id: str, target: TextTarget) -> NotFoundError:
    return NotFoundError(
        f"Could not find instance {target.match_instance} of text "
        f"\"{target.text_to_find}\" in document {document_id}",
    )
