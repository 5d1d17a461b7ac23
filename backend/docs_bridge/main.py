"""docs-bridge API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DocsBridgeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Credentials warmed on startup; a failure is logged, never fatal
      (each tool call retries resolution and reports CredentialError)

Design Decisions:
    - Lifespan over @app.on_event: startup and shutdown in one place
    - Error handlers extracted to api/error_handlers.py to keep main.py down to app wiring
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docs_bridge.api.error_handlers import register_error_handlers
from docs_bridge.api.routes import health, tool_calls, tool_stream
from docs_bridge.config import get_settings
from docs_bridge.core.domain_types import ErrorKind
from docs_bridge.core.errors import CredentialError
from docs_bridge.infrastructure.credentials import get_credential_resolver
from docs_bridge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.warm_credentials_on_startup:
        await _warm_credentials()
    logger.info("docs-bridge API started")
    yield
    logger.info("docs-bridge API shutting down")


async def _warm_credentials() -> None:
    try:
        await asyncio.to_thread(get_credential_resolver().resolve)
    except CredentialError as exc:
        logger.error(
            f"Credentials unavailable at startup: {exc.message}",
            extra={"error_kind": exc.kind.value},
        )
    except Exception as exc:
        logger.error(
            f"Unexpected error warming credentials: {exc}",
            exc_info=True, extra={"error_kind": ErrorKind.INTERNAL.value},
        )


app = FastAPI(
    title="docs-bridge API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(tool_calls.router)
app.include_router(tool_stream.router)

register_error_handlers(app)
