"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from environment variables or local files (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - google_credentials / google_token set ⇒ managed environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box for local development
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Managed credentials (injected secrets, JSON blobs)
    google_credentials: str | None = None
    google_token: str | None = None

    # File credentials (local development)
    google_credentials_path: str = "credentials.json"
    google_token_path: str = "token.json"

    google_scopes: list[str] = [
        "https://www.googleapis.com/auth/documents",
        "https://www.googleapis.com/auth/drive",
    ]
    tokeninfo_url: str = "https://oauth2.googleapis.com/tokeninfo"
    validate_token: bool = True  # tokeninfo check each time a handle is built
    warm_credentials_on_startup: bool = True

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
