"""Google Docs client tests — HTTP error mapping and call wrapping.

Tests cover:
    - 404 → NotFound, 403 → PermissionDenied, 401 → CredentialError,
      other statuses → Internal (UpstreamError)
    - RefreshError surfaced as CredentialError
    - Network failures surfaced as UpstreamError
    - list_files unwraps the files array
"""

import httplib2
import pytest
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.errors import HttpError

from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.core.errors import (
    CredentialError, NotFoundError, PermissionDeniedError, UpstreamError,
)
from docs_bridge.infrastructure.google_docs_client import (
    GoogleDocsClient, map_http_error,
)


def _http_error(status: int) -> HttpError:
    content = b'{"error": {"message": "upstream says no"}}'
    return HttpError(httplib2.Response({"status": status}), content)


@pytest.mark.parametrize("status,error_type,kind", [
    (404, NotFoundError, ErrorKind.NOT_FOUND),
    (403, PermissionDeniedError, ErrorKind.PERMISSION_DENIED),
    (401, CredentialError, ErrorKind.CREDENTIAL_ERROR),
    (500, UpstreamError, ErrorKind.INTERNAL),
    (429, UpstreamError, ErrorKind.INTERNAL),
])
def test_map_http_error(status, error_type, kind):
    error = map_http_error(_http_error(status), "Document 'abc'")
    assert isinstance(error, error_type)
    assert error.kind is kind


def test_not_found_message_names_resource():
    assert map_http_error(_http_error(404), "Document 'abc'").message == "Document 'abc' not found"


@pytest.fixture
def client():
    return GoogleDocsClient(Credentials(token="test-token"))


def _raising(exc):
    def run(request):
        raise exc
    return run


async def test_get_document_maps_http_error(client):
    client._run = _raising(_http_error(404))
    with pytest.raises(NotFoundError):
        await client.get_document("missing-doc")


async def test_refresh_error_maps_to_credential_error(client):
    client._run = _raising(RefreshError("invalid_grant"))
    with pytest.raises(CredentialError):
        await client.get_document("doc")


async def test_network_error_maps_to_upstream_error(client):
    client._run = _raising(OSError("connection reset"))
    with pytest.raises(UpstreamError):
        await client.batch_update("doc", [])


async def test_list_files_unwraps_files(client):
    client._run = lambda request: {"files": [{"id": "a"}]}
    assert await client.list_files("q", 5, order_by="modifiedTime desc") == [{"id": "a"}]


async def test_list_files_missing_key_is_empty(client):
    client._run = lambda request: {}
    assert await client.list_files("q", 5) == []
