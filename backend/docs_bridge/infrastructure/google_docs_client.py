"""Google Docs Client — async wrapper over googleapiclient with error mapping.

Invariants:
    - Every call runs in a worker thread (asyncio.to_thread); the event loop never blocks
    - Every call gets its own httplib2.Http wrapped in AuthorizedHttp
      (httplib2 is not thread-safe; google-auth refreshes the token in place)
    - HTTP 404 → NotFoundError, 403 → PermissionDeniedError, 401 → CredentialError
    - RefreshError → CredentialError; any other HTTP or network failure → UpstreamError
    - No retries: one failed call surfaces as one error

Design Decisions:
    - Wrapper over raw services: handlers never see HttpError
    - Static discovery documents (bundled with google-api-python-client): build() needs no network
"""

import asyncio
import logging
from typing import Any

import httplib2
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from docs_bridge.core.errors import (
    CredentialError, DocsBridgeError, NotFoundError, PermissionDeniedError,
    UpstreamError,
)
from docs_bridge.core.format_file_list import FILE_FIELDS

logger = logging.getLogger(__name__)


def map_http_error(exc: HttpError, resource: str) -> DocsBridgeError:
    """Map a googleapiclient HttpError onto the error taxonomy."""
    status = int(exc.resp.status)
    reason = getattr(exc, "reason", None) or str(exc)
    if status == 404:
        return NotFoundError(f"{resource} not found")
    if status == 403:
        return PermissionDeniedError(f"Permission denied for {resource}: {reason}")
    if status == 401:
        return CredentialError(f"Google rejected the credentials: {reason}")
    return UpstreamError(f"Google API error ({status}) for {resource}: {reason}", status)


class GoogleDocsClient:
    """Docs v1 + Drive v3 operations used by the tool handlers."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials
        self._docs = build("docs", "v1", credentials=credentials, cache_discovery=False)
        self._drive = build("drive", "v3", credentials=credentials, cache_discovery=False)

    async def get_document(self, document_id: str, fields: str | None = None) -> dict:
        """Fetch a structural snapshot of the document."""
        params: dict[str, Any] = {"documentId": document_id}
        if fields:
            params["fields"] = fields
        return await self._execute(
            self._docs.documents().get(**params), f"Document '{document_id}'",
        )

    async def create_document(self, title: str) -> dict:
        return await self._execute(
            self._docs.documents().create(body={"title": title}),
            f"Document '{title}'",
        )

    async def batch_update(self, document_id: str, requests: list[dict]) -> dict:
        return await self._execute(
            self._docs.documents().batchUpdate(
                documentId=document_id, body={"requests": requests},
            ),
            f"Document '{document_id}'",
        )

    async def list_files(
        self, query: str, page_size: int, order_by: str | None = None,
    ) -> list[dict]:
        """Drive files.list restricted to FILE_FIELDS."""
        params: dict[str, Any] = {
            "q": query, "pageSize": page_size, "fields": FILE_FIELDS,
        }
        if order_by:
            params["orderBy"] = order_by
        response = await self._execute(
            self._drive.files().list(**params), "Drive file listing",
        )
        return response.get("files", [])

    async def _execute(self, request, resource: str) -> dict:
        try:
            return await asyncio.to_thread(self._run, request)
        except HttpError as exc:
            raise map_http_error(exc, resource) from exc
        except RefreshError as exc:
            raise CredentialError(f"Token refresh failed: {exc}") from exc
        except (httplib2.HttpLib2Error, OSError) as exc:
            logger.warning("Google API unreachable for %s: %s", resource, exc)
            raise UpstreamError(f"Google API unreachable: {exc}") from exc

    def _run(self, request) -> dict:
        http = AuthorizedHttp(self._credentials, http=httplib2.Http())
        return request.execute(http=http)
