"""Interactive Authorization — one-shot consent flow for local development.

Invariants:
    - Runs only under the file source; a managed environment refuses with CredentialError
    - On success the token file is written and the process exits 0; failures exit 1

Design Decisions:
    - Console script (docs-bridge-authorize) instead of an HTTP route: the consent
      flow needs a browser on the operator's machine
"""

import logging
import sys

from docs_bridge.config import get_settings
from docs_bridge.core.errors import CredentialError
from docs_bridge.infrastructure.credentials import CredentialResolver
from docs_bridge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    resolver = CredentialResolver.from_settings(settings)
    try:
        handle = resolver.authorize_interactively()
    except CredentialError as exc:
        logger.error(f"Authorization failed: {exc.message}")
        return 1
    logger.info(
        "Authorization complete",
        extra={"credential_source": handle.source.value},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
