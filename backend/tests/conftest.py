"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up real Google secrets from the environment
os.environ.pop("GOOGLE_CREDENTIALS", None)
os.environ.pop("GOOGLE_TOKEN", None)
os.environ.setdefault("VALIDATE_TOKEN", "false")
os.environ.setdefault("WARM_CREDENTIALS_ON_STARTUP", "false")
