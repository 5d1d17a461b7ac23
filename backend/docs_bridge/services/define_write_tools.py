"""Write Tool Definitions — descriptors for create, edit and formatting tools.

Invariants:
    - Every tool here mutates a document through one batchUpdate
      (createDocument: one create plus an optional batchUpdate)
"""

from docs_bridge.core.domain_types import ToolName
from docs_bridge.core.tool_descriptor import ToolDescriptor
from docs_bridge.schemas.tool_args import (
    AppendTextArgs, ApplyParagraphStyleArgs, ApplyTextStyleArgs,
    CreateDocumentArgs, DeleteRangeArgs, InsertTextArgs,
)
from docs_bridge.services import handle_format, handle_write

TOOLS_WRITE = [
    ToolDescriptor(
        name=ToolName.CREATE_DOCUMENT,
        description="Creates a new Google Document, optionally with initial content.",
        args_model=CreateDocumentArgs,
        handler=handle_write.create_document,
    ),
    ToolDescriptor(
        name=ToolName.APPEND_TEXT,
        description="Appends text to the very end of a Google Document.",
        args_model=AppendTextArgs,
        handler=handle_write.append_to_google_doc,
    ),
    ToolDescriptor(
        name=ToolName.INSERT_TEXT,
        description="Inserts text at a specific 1-based index in a Google Document.",
        args_model=InsertTextArgs,
        handler=handle_write.insert_text,
    ),
    ToolDescriptor(
        name=ToolName.DELETE_RANGE,
        description="Deletes content between startIndex (inclusive) and endIndex (exclusive).",
        args_model=DeleteRangeArgs,
        handler=handle_write.delete_range,
    ),
]

TOOLS_FORMAT = [
    ToolDescriptor(
        name=ToolName.APPLY_TEXT_STYLE,
        description=(
            "Applies character formatting (bold, italic, colors, font, link) "
            "to a range or to the nth occurrence of some text."
        ),
        args_model=ApplyTextStyleArgs,
        handler=handle_format.apply_text_style,
    ),
    ToolDescriptor(
        name=ToolName.APPLY_PARAGRAPH_STYLE,
        description=(
            "Applies paragraph formatting (alignment, heading style, indents, "
            "spacing) to the paragraphs of a range, text match or index."
        ),
        args_model=ApplyParagraphStyleArgs,
        handler=handle_format.apply_paragraph_style,
    ),
]
