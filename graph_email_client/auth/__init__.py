"""App-only (client credentials) authentication for Graph API access."""

from graph_email_client.auth.client_credentials import (
    GRAPH_DEFAULT_SCOPE,
    MSALClientCredential,
)

__all__ = [
    "GRAPH_DEFAULT_SCOPE",
    "MSALClientCredential",
]
