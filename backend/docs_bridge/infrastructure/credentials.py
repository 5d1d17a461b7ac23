"""Credential Resolver — builds an auto-refreshing Google OAuth handle once per process.

Invariants:
    - Managed source (GOOGLE_CREDENTIALS + GOOGLE_TOKEN) wins when present;
      its parse failure is fatal, never a fallback to files
    - Only one managed value present → CredentialError naming the missing one
    - File source: credentials.json + token.json; missing/unparseable → CredentialError
    - A handle is never partially built: config and token both parse or nothing is cached
    - resolve() caches the first successful handle; failures cache nothing (next call retries)
    - Token persistence and interactive auth only under the file source
    - Token introspection failure is logged, not raised (refresh happens on next API call)

Design Decisions:
    - google.oauth2.credentials.Credentials as the handle: refresh_token + token_uri
      let google-auth refresh in place on expiry or 401
    - threading.Lock around construction: resolve() runs in worker threads
      (asyncio.to_thread) so first concurrent calls build once
"""

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any

import httpx
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from docs_bridge.config import Settings, get_settings
from docs_bridge.core.domain_types import CredentialSource
from docs_bridge.core.errors import CredentialError

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"
DEFAULT_SCOPES = [
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/drive",
]


@dataclass(frozen=True)
class ClientConfig:
    """App registration: the `installed` or `web` block of credentials.json."""
    client_id: str
    client_secret: str
    redirect_uri: str
    client_type: str
    raw: dict[str, Any]


@dataclass(frozen=True)
class StoredToken:
    access_token: str | None
    refresh_token: str | None
    expiry: datetime | None  # naive UTC, as google-auth expects
    scopes: list[str] | None


@dataclass
class CredentialHandle:
    """Resolved authorization: google-auth credentials plus where they came from."""
    credentials: Credentials
    source: CredentialSource
    redirect_uri: str


# ─── Parsing ─────────────────────────────────────────────────────

def _load_json(raw: str, origin: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CredentialError(f"{origin} is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise CredentialError(f"{origin} must contain a JSON object")
    return data


def parse_client_config(raw: str, origin: str) -> ClientConfig:
    """Parse an app-registration config; requires client_id and client_secret."""
    data = _load_json(raw, origin)
    client_type = "installed" if "installed" in data else "web"
    key = data.get(client_type)
    if not isinstance(key, dict):
        raise CredentialError(
            f"{origin} has no 'installed' or 'web' client secrets",
        )
    client_id, client_secret = key.get("client_id"), key.get("client_secret")
    if not client_id or not client_secret:
        raise CredentialError(f"{origin} lacks client_id/client_secret")
    redirect_uris = key.get("redirect_uris") or []
    return ClientConfig(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uris[0] if redirect_uris else OOB_REDIRECT_URI,
        client_type=client_type,
        raw=data,
    )


def parse_token(raw: str, origin: str) -> StoredToken:
    """Parse a stored OAuth token (googleapis Node or google-auth Python shape)."""
    data = _load_json(raw, origin)
    access_token = data.get("access_token") or data.get("token")
    refresh_token = data.get("refresh_token")
    if not access_token and not refresh_token:
        raise CredentialError(
            f"{origin} holds neither an access_token nor a refresh_token",
        )
    scopes = data.get("scopes") or data.get("scope")
    if isinstance(scopes, str):
        scopes = scopes.split()
    return StoredToken(
        access_token=access_token,
        refresh_token=refresh_token,
        expiry=_parse_expiry(data, origin),
        scopes=scopes or None,
    )


def _parse_expiry(data: dict[str, Any], origin: str) -> datetime | None:
    try:
        if data.get("expiry"):
            parsed = datetime.fromisoformat(str(data["expiry"]).replace("Z", "+00:00"))
        elif data.get("expiry_date"):
            parsed = datetime.fromtimestamp(
                float(data["expiry_date"]) / 1000, tz=timezone.utc,
            )
        else:
            return None
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        raise CredentialError(f"{origin} has an unparseable expiry: {exc}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialError(f"Could not read {path}: {exc.strerror or exc}") from exc


# ─── Resolver ────────────────────────────────────────────────────

class CredentialResolver:
    """Resolves, caches and (file source only) persists Google OAuth credentials."""

    def __init__(
        self,
        *,
        managed_credentials: str | None = None,
        managed_token: str | None = None,
        credentials_path: str | Path = "credentials.json",
        token_path: str | Path = "token.json",
        scopes: list[str] | None = None,
        tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo",
        validate_token: bool = True,
    ):
        self._managed_credentials = managed_credentials or None
        self._managed_token = managed_token or None
        self._credentials_path = Path(credentials_path)
        self._token_path = Path(token_path)
        self._scopes = scopes or DEFAULT_SCOPES
        self._tokeninfo_url = tokeninfo_url
        self._validate_token = validate_token
        self._handle: CredentialHandle | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialResolver":
        return cls(
            managed_credentials=settings.google_credentials,
            managed_token=settings.google_token,
            credentials_path=settings.google_credentials_path,
            token_path=settings.google_token_path,
            scopes=settings.google_scopes,
            tokeninfo_url=settings.tokeninfo_url,
            validate_token=settings.validate_token,
        )

    @property
    def is_managed(self) -> bool:
        """True when any injected secret is present (managed environment)."""
        return self._managed_credentials is not None or self._managed_token is not None

    def resolve(self) -> CredentialHandle:
        """Return the cached handle, building it on first successful call."""
        if self._handle is not None:
            return self._handle
        with self._lock:
            if self._handle is None:
                self._handle = self._build_handle()
            return self._handle

    def authorize_interactively(self) -> CredentialHandle:
        """Run the browser consent flow and persist the token (file source only)."""
        if self.is_managed:
            raise CredentialError("no interactive auth in managed environment")
        config = parse_client_config(
            _read_file(self._credentials_path), str(self._credentials_path),
        )
        try:
            flow = InstalledAppFlow.from_client_config(config.raw, scopes=self._scopes)
            credentials = flow.run_local_server(
                port=0, access_type="offline", prompt="consent",
            )
        except Exception as exc:
            raise CredentialError(f"Interactive authorization failed: {exc}") from exc
        if not credentials.refresh_token:
            logger.warning("No refresh token received; the token will expire")
        self.persist_token(credentials)
        handle = CredentialHandle(credentials, CredentialSource.FILE, config.redirect_uri)
        with self._lock:
            self._handle = handle
        return handle

    def persist_token(self, credentials: Credentials) -> bool:
        """Write the token file. Skipped (returns False) under the managed source."""
        if self.is_managed:
            logger.info(
                "Managed environment, token not persisted",
                extra={"credential_source": CredentialSource.MANAGED.value},
            )
            return False
        self._token_path.write_text(credentials.to_json(), encoding="utf-8")
        logger.info("Token stored to %s", self._token_path)
        return True

    def _build_handle(self) -> CredentialHandle:
        source, config, token = self._load_bundle()
        credentials = Credentials(
            token=token.access_token,
            refresh_token=token.refresh_token,
            token_uri=GOOGLE_TOKEN_URI,
            client_id=config.client_id,
            client_secret=config.client_secret,
            scopes=token.scopes,
            expiry=token.expiry,
        )
        handle = CredentialHandle(credentials, source, config.redirect_uri)
        if self._validate_token:
            self._introspect(handle)
        logger.info(
            "Google credentials resolved",
            extra={"credential_source": source.value},
        )
        return handle

    def _load_bundle(self) -> tuple[CredentialSource, ClientConfig, StoredToken]:
        if self.is_managed:
            if self._managed_credentials is None:
                raise CredentialError("GOOGLE_TOKEN is set but GOOGLE_CREDENTIALS is missing")
            if self._managed_token is None:
                raise CredentialError("GOOGLE_CREDENTIALS is set but GOOGLE_TOKEN is missing")
            return (
                CredentialSource.MANAGED,
                parse_client_config(self._managed_credentials, "GOOGLE_CREDENTIALS"),
                parse_token(self._managed_token, "GOOGLE_TOKEN"),
            )
        config_raw = _read_file(self._credentials_path)
        token_raw = _read_file(self._token_path)
        return (
            CredentialSource.FILE,
            parse_client_config(config_raw, str(self._credentials_path)),
            parse_token(token_raw, str(self._token_path)),
        )

    def _introspect(self, handle: CredentialHandle) -> None:
        token = handle.credentials.token
        if not token:
            logger.info("No stored access token; first API call will refresh it")
            return
        try:
            response = httpx.get(
                self._tokeninfo_url, params={"access_token": token}, timeout=10.0,
            )
            response.raise_for_status()
            logger.info("Access token validated")
        except httpx.HTTPError as exc:
            logger.warning(
                "Token introspection failed, refreshing on next call: %s", exc,
                extra={"credential_source": handle.source.value},
            )


@lru_cache
def get_credential_resolver() -> CredentialResolver:
    """Process-wide resolver (FastAPI dependency; override in tests)."""
    return CredentialResolver.from_settings(get_settings())
