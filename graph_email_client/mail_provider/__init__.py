"""Mail provider: Graph mail client facade and its models."""

from graph_email_client.mail_provider.graph_models import (
    EmailAddress,
    ItemBody,
    MailFolder,
    MailMessage,
    Recipient,
)
from graph_email_client.mail_provider.graph_client import JUNK_FOLDER_NAME, MailClient
from graph_email_client.mail_provider.protocol import EmailClient
from graph_email_client.mail_provider.result import MailResult

__all__ = [
    "EmailAddress",
    "EmailClient",
    "ItemBody",
    "JUNK_FOLDER_NAME",
    "MailClient",
    "MailFolder",
    "MailMessage",
    "MailResult",
    "Recipient",
]
