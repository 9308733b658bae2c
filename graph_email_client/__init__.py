"""Async Microsoft Graph mail client with app-only (client credentials) auth."""

from graph_email_client.auth import GRAPH_DEFAULT_SCOPE, MSALClientCredential
from graph_email_client.errors import InvalidArgument, MailClientError, RemoteServiceError
from graph_email_client.mail_provider import (
    EmailAddress,
    EmailClient,
    ItemBody,
    MailClient,
    MailFolder,
    MailMessage,
    MailResult,
    Recipient,
)

__version__ = "0.1.0"

__all__ = [
    "EmailAddress",
    "EmailClient",
    "GRAPH_DEFAULT_SCOPE",
    "InvalidArgument",
    "ItemBody",
    "MSALClientCredential",
    "MailClient",
    "MailClientError",
    "MailFolder",
    "MailMessage",
    "MailResult",
    "Recipient",
    "RemoteServiceError",
]
