"""Write Handlers — createDocument, appendToGoogleDoc, insertText, deleteRange.

Invariants:
    - Each mutation is a single batchUpdate call
    - appendToGoogleDoc inserts before the body's final newline, prefixing a
      newline when the document already holds text and add_newline_if_needed
    - createDocument inserts initial_content at index 1 of the new document
"""

import logging

from docs_bridge.core.build_requests import (
    build_delete_range_request, build_insert_text_request,
)
from docs_bridge.core.locate_text import document_end_index
from docs_bridge.infrastructure.google_docs_client import GoogleDocsClient
from docs_bridge.schemas.tool_args import (
    AppendTextArgs, CreateDocumentArgs, DeleteRangeArgs, InsertTextArgs,
)

logger = logging.getLogger(__name__)

DOCUMENT_URL = "https://docs.google.com/document/d/{document_id}/edit"


async def create_document(
    client: GoogleDocsClient, args: CreateDocumentArgs,
) -> str:
    created = await client.create_document(args.title)
    document_id = created["documentId"]
    if args.initial_content:
        await client.batch_update(
            document_id, [build_insert_text_request(1, args.initial_content)],
        )
    logger.info("Created document", extra={"document_id": document_id})
    return (
        f'Created document: "{created.get("title", args.title)}"\n'
        f"Document ID: {document_id}\n"
        f"View: {DOCUMENT_URL.format(document_id=document_id)}"
    )


async def append_to_google_doc(
    client: GoogleDocsClient, args: AppendTextArgs,
) -> str:
    snapshot = await client.get_document(
        args.document_id, fields="body(content(endIndex))",
    )
    index = document_end_index(snapshot)
    text = args.text_to_append
    if args.add_newline_if_needed and index > 1:
        text = "\n" + text
    await client.batch_update(
        args.document_id, [build_insert_text_request(index, text)],
    )
    return (
        f"Successfully appended {len(args.text_to_append)} characters "
        f"to document {args.document_id}."
    )


async def insert_text(client: GoogleDocsClient, args: InsertTextArgs) -> str:
    await client.batch_update(
        args.document_id,
        [build_insert_text_request(args.index, args.text_to_insert)],
    )
    return f"Successfully inserted text at index {args.index}."


async def delete_range(client: GoogleDocsClient, args: DeleteRangeArgs) -> str:
    await client.batch_update(
        args.document_id,
        [build_delete_range_request(args.start_index, args.end_index)],
    )
    return (
        f"Successfully deleted content in range "
        f"{args.start_index}-{args.end_index}."
    )
