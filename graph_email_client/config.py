"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Microsoft Graph (app-only, client credentials)
AZURE_TENANT_ID = os.getenv("AZURE_TENANT_ID", "")
AZURE_CLIENT_ID = os.getenv("AZURE_CLIENT_ID", "")
AZURE_CLIENT_SECRET = os.getenv("AZURE_CLIENT_SECRET", "")

# Mailbox to operate on; app-only tokens cannot use /me, so set this for daemon use
GRAPH_USER_ID = os.getenv("GRAPH_USER_ID", "")

GRAPH_SCOPE = "https://graph.microsoft.com/.default"
AUTHORITY_HOST = os.getenv("AZURE_AUTHORITY_HOST", "https://login.microsoftonline.com").rstrip("/")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"
_log_file = os.getenv("LOG_FILE", "").strip()
LOG_FILE = Path(_log_file).expanduser() if _log_file else None
