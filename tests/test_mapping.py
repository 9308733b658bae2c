"""Tests for SDK <-> model mapping and input validation helpers."""

import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from msgraph.generated.models.body_type import BodyType
from msgraph.generated.models.email_address import EmailAddress as GraphSDKEmailAddress
from msgraph.generated.models.item_body import ItemBody as GraphSDKItemBody
from msgraph.generated.models.mail_folder import MailFolder as GraphSDKMailFolder
from msgraph.generated.models.message import Message as GraphSDKMessage
from msgraph.generated.models.recipient import Recipient as GraphSDKRecipient

from graph_email_client.errors import InvalidArgument
from graph_email_client.mail_provider.mapping import (
    build_outgoing_message,
    odata_quote,
    require_recipients,
    require_text,
    sdk_folder_to_mail_folder,
    sdk_message_to_mail_message,
)


def _recipient(address: str, name: str | None = None) -> GraphSDKRecipient:
    return GraphSDKRecipient(email_address=GraphSDKEmailAddress(address=address, name=name))


class TestSdkConversion(unittest.TestCase):
    def test_message_fields(self):
        received = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        sdk = GraphSDKMessage(
            id="msg-1",
            conversation_id="conv-1",
            parent_folder_id="inbox",
            subject="Quarterly report",
            body=GraphSDKItemBody(content_type=BodyType.Html, content="<p>Hi</p>"),
            body_preview="Hi",
            from_=_recipient("alice@contoso.com", "Alice"),
            to_recipients=[_recipient("bob@contoso.com"), GraphSDKRecipient()],
            is_read=True,
            received_date_time=received,
        )
        msg = sdk_message_to_mail_message(sdk)
        self.assertEqual(msg.id, "msg-1")
        self.assertEqual(msg.conversationId, "conv-1")
        self.assertEqual(msg.parentFolderId, "inbox")
        self.assertEqual(msg.body.contentType, "html")
        self.assertEqual(msg.body.content, "<p>Hi</p>")
        self.assertEqual(msg.from_.emailAddress.name, "Alice")
        self.assertEqual([r.emailAddress.address for r in msg.toRecipients], ["bob@contoso.com"])
        self.assertTrue(msg.isRead)
        self.assertFalse(msg.isDraft)
        self.assertEqual(msg.receivedDateTime, received.isoformat())
        self.assertEqual(msg.model_dump(by_alias=True)["from"]["emailAddress"]["address"], "alice@contoso.com")

    def test_sparse_message_defaults(self):
        msg = sdk_message_to_mail_message(GraphSDKMessage(id="msg-2"))
        self.assertEqual(msg.subject, "")
        self.assertEqual(msg.body.contentType, "text")
        self.assertIsNone(msg.from_)
        self.assertFalse(msg.isRead)

    def test_folder_fields(self):
        folder = sdk_folder_to_mail_folder(
            GraphSDKMailFolder(id="f1", display_name="Junk Email", unread_item_count=3)
        )
        self.assertEqual(folder.id, "f1")
        self.assertEqual(folder.displayName, "Junk Email")
        self.assertEqual(folder.unreadItemCount, 3)
        self.assertEqual(folder.totalItemCount, 0)


class TestPayloads(unittest.TestCase):
    def test_outgoing_message_is_plain_text(self):
        message = build_outgoing_message("Subject", "Body", ["a@contoso.com"])
        self.assertEqual(message.subject, "Subject")
        self.assertEqual(message.body.content_type, BodyType.Text)
        self.assertEqual(message.to_recipients[0].email_address.address, "a@contoso.com")

    def test_odata_quote_doubles_single_quotes(self):
        self.assertEqual(odata_quote("Junk Email"), "'Junk Email'")
        self.assertEqual(odata_quote("O'Brien"), "'O''Brien'")


class TestValidation(unittest.TestCase):
    def test_require_text(self):
        self.assertEqual(require_text("x", "subject"), "x")
        for value in (None, "", "  \n"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgument):
                    require_text(value, "subject")

    def test_require_recipients_strips_addresses(self):
        self.assertEqual(require_recipients([" a@contoso.com "]), ["a@contoso.com"])

    def test_require_recipients_rejects_bad_input(self):
        for value in (None, [], [""], "a@contoso.com"):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgument):
                    require_recipients(value)

    def test_invalid_argument_is_value_error(self):
        with self.assertRaises(ValueError):
            require_text("", "body")


if __name__ == "__main__":
    unittest.main()
