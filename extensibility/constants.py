"""Global constants for the extensibility SDK."""

import os

# OAuth authorization endpoint of the host application
OAUTH_AUTHORIZE_URL = os.getenv(
    "EXTENSIBILITY_OAUTH_AUTHORIZE_URL", "https://accounts.com/oauth/authorize"
)

# Manifest file looked up by the management CLI when no path is given
MANIFEST_FILE = os.getenv("EXTENSIBILITY_MANIFEST_FILE", "manifest.json")

# Log level used by the management CLI
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# English entry is mandatory in every localized store string
DEFAULT_LANGUAGE = "en"
