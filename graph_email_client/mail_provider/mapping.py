"""Map Graph SDK models to our pydantic models, and build outbound SDK payloads."""

from msgraph.generated.models.body_type import BodyType
from msgraph.generated.models.email_address import EmailAddress as GraphSDKEmailAddress
from msgraph.generated.models.item_body import ItemBody as GraphSDKItemBody
from msgraph.generated.models.mail_folder import MailFolder as GraphSDKMailFolder
from msgraph.generated.models.message import Message as GraphSDKMessage
from msgraph.generated.models.recipient import Recipient as GraphSDKRecipient

from graph_email_client.errors import InvalidArgument
from graph_email_client.mail_provider.graph_models import (
    EmailAddress,
    ItemBody,
    MailFolder,
    MailMessage,
    Recipient,
)


def require_text(value: str | None, field: str) -> str:
    """Return value unchanged, or raise InvalidArgument if it is None or blank."""
    if value is None or not str(value).strip():
        raise InvalidArgument(f"{field} cannot be null or empty.")
    return value


def require_recipients(recipients: list[str] | None, field: str = "recipients") -> list[str]:
    """Return the stripped addresses; at least one is required and none may be blank."""
    if not recipients:
        raise InvalidArgument(f"{field} cannot be null or empty.")
    if isinstance(recipients, str):
        raise InvalidArgument(f"{field} must be a list of addresses, not a string.")
    addresses = []
    for address in recipients:
        if address is None or not str(address).strip():
            raise InvalidArgument(f"{field} cannot contain an empty address.")
        addresses.append(str(address).strip())
    return addresses


def odata_quote(value: str) -> str:
    """Quote a string literal for an OData $filter expression."""
    return "'" + value.replace("'", "''") + "'"


def _convert_sdk_recipient(r: GraphSDKRecipient | None) -> Recipient | None:
    if r is None or r.email_address is None:
        return None
    return Recipient(
        emailAddress=EmailAddress(
            address=r.email_address.address or "",
            name=r.email_address.name,
        )
    )


def _convert_sdk_recipients(recipients: list[GraphSDKRecipient] | None) -> list[Recipient]:
    converted = (_convert_sdk_recipient(r) for r in (recipients or []))
    return [r for r in converted if r is not None]


def sdk_message_to_mail_message(msg: GraphSDKMessage) -> MailMessage:
    """Convert SDK message to our MailMessage model."""
    body = ItemBody()
    if msg.body:
        body = ItemBody(
            contentType="html" if msg.body.content_type == BodyType.Html else "text",
            content=msg.body.content or "",
        )
    received = msg.received_date_time
    return MailMessage(
        id=msg.id or "",
        conversationId=msg.conversation_id,
        parentFolderId=msg.parent_folder_id,
        receivedDateTime=received.isoformat() if received else None,
        subject=msg.subject or "",
        body=body,
        bodyPreview=msg.body_preview,
        from_=_convert_sdk_recipient(msg.from_),
        toRecipients=_convert_sdk_recipients(msg.to_recipients),
        ccRecipients=_convert_sdk_recipients(msg.cc_recipients),
        isRead=bool(msg.is_read),
        isDraft=bool(msg.is_draft),
    )


def sdk_folder_to_mail_folder(folder: GraphSDKMailFolder) -> MailFolder:
    """Convert SDK mailFolder to our MailFolder model."""
    return MailFolder(
        id=folder.id or "",
        displayName=folder.display_name or "",
        parentFolderId=folder.parent_folder_id,
        childFolderCount=folder.child_folder_count or 0,
        unreadItemCount=folder.unread_item_count or 0,
        totalItemCount=folder.total_item_count or 0,
    )


def build_recipients(addresses: list[str]) -> list[GraphSDKRecipient]:
    return [
        GraphSDKRecipient(email_address=GraphSDKEmailAddress(address=address))
        for address in addresses
    ]


def build_text_body(content: str) -> GraphSDKItemBody:
    """Plain-text itemBody; the client never sends HTML."""
    return GraphSDKItemBody(content_type=BodyType.Text, content=content)


def build_outgoing_message(subject: str, body: str, recipients: list[str]) -> GraphSDKMessage:
    """Message payload for sendMail."""
    return GraphSDKMessage(
        subject=subject,
        body=build_text_body(body),
        to_recipients=build_recipients(recipients),
    )
