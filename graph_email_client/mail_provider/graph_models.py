"""Pydantic models for Microsoft Graph message and mailFolder resources (subset we expose)."""

from typing import Optional

from pydantic import BaseModel, Field


class EmailAddress(BaseModel):
    """Graph emailAddress."""

    address: str
    name: Optional[str] = None


class Recipient(BaseModel):
    """Graph recipient (from, toRecipients, etc.)."""

    emailAddress: EmailAddress


class ItemBody(BaseModel):
    """Graph itemBody (message body)."""

    contentType: str = "text"  # "text" | "html"
    content: str = ""


class MailMessage(BaseModel):
    """Microsoft Graph message resource (subset)."""

    id: str
    conversationId: Optional[str] = None
    parentFolderId: Optional[str] = None
    receivedDateTime: Optional[str] = None  # ISO 8601
    subject: str = ""
    body: ItemBody = ItemBody()
    bodyPreview: Optional[str] = None
    from_: Optional[Recipient] = Field(None, alias="from")
    toRecipients: list[Recipient] = []
    ccRecipients: list[Recipient] = []
    isRead: bool = False
    isDraft: bool = False

    class Config:
        populate_by_name = True
        extra = "allow"


class MailFolder(BaseModel):
    """Microsoft Graph mailFolder resource (subset)."""

    id: str
    displayName: str = ""
    parentFolderId: Optional[str] = None
    childFolderCount: int = 0
    unreadItemCount: int = 0
    totalItemCount: int = 0

    class Config:
        populate_by_name = True
        extra = "allow"
