"""Mail client protocol (Graph-style mailbox operations)."""

from typing import Protocol, runtime_checkable

from graph_email_client.mail_provider.graph_models import MailFolder, MailMessage
from graph_email_client.mail_provider.result import MailResult


@runtime_checkable
class EmailClient(Protocol):
    """Abstract interface for the mailbox operations the facade exposes.

    Every method raises InvalidArgument for missing input and reports remote
    failures through the returned MailResult.
    """

    async def send_email(
        self, subject: str, body: str, recipients: list[str], *, save_to_sent_items: bool = True
    ) -> MailResult[None]:
        """Send a new plain-text message to recipients."""
        ...

    async def read_emails(self, top: int = 10) -> MailResult[list[MailMessage]]:
        """First page of messages, at most top, in the service's default order."""
        ...

    async def move_email(self, message_id: str, destination_folder_id: str) -> MailResult[MailMessage]:
        """Move a message to another folder."""
        ...

    async def mark_email_read(self, message_id: str, is_read: bool = True) -> MailResult[None]:
        """Set or clear a message's read flag."""
        ...

    async def delete_email(self, message_id: str) -> MailResult[None]:
        """Delete a message."""
        ...

    async def list_folders(self) -> MailResult[list[MailFolder]]:
        """First page of mail folders."""
        ...

    async def create_folder(self, name: str) -> MailResult[MailFolder]:
        """Create a top-level mail folder."""
        ...

    async def find_folder(self, display_name: str) -> MailResult[MailFolder | None]:
        """First folder whose display name matches exactly, or None."""
        ...

    async def move_email_to_junk(self, message_id: str) -> MailResult[bool]:
        """Move a message to "Junk Email"; value is False when that folder does not exist."""
        ...

    async def reply_to_email(self, message_id: str, reply_body: str) -> MailResult[None]:
        """Reply to a message's sender with a plain-text body."""
        ...

    async def forward_email(
        self, message_id: str, forward_body: str, recipients: list[str]
    ) -> MailResult[None]:
        """Forward a message with a plain-text comment."""
        ...
