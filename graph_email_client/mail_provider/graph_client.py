"""Microsoft Graph mail client facade (async, app-only auth)."""

from typing import Any, Awaitable, Callable, Optional

from kiota_abstractions.base_request_configuration import RequestConfiguration
from msgraph import GraphServiceClient
from msgraph.generated.models.message import Message as GraphSDKMessage
from msgraph.generated.models.mail_folder import MailFolder as GraphSDKMailFolder
from msgraph.generated.users.item.mail_folders.mail_folders_request_builder import (
    MailFoldersRequestBuilder,
)
from msgraph.generated.users.item.messages.item.create_reply.create_reply_post_request_body import (
    CreateReplyPostRequestBody,
)
from msgraph.generated.users.item.messages.item.forward.forward_post_request_body import (
    ForwardPostRequestBody,
)
from msgraph.generated.users.item.messages.item.move.move_post_request_body import (
    MovePostRequestBody,
)
from msgraph.generated.users.item.messages.messages_request_builder import (
    MessagesRequestBuilder,
)
from msgraph.generated.users.item.send_mail.send_mail_post_request_body import (
    SendMailPostRequestBody,
)

from graph_email_client import config
from graph_email_client.auth.client_credentials import GRAPH_DEFAULT_SCOPE, MSALClientCredential
from graph_email_client.errors import REMOTE_EXCEPTIONS, InvalidArgument, RemoteServiceError
from graph_email_client.mail_provider.graph_models import MailFolder, MailMessage
from graph_email_client.mail_provider.mapping import (
    build_outgoing_message,
    build_recipients,
    build_text_body,
    odata_quote,
    require_recipients,
    require_text,
    sdk_folder_to_mail_folder,
    sdk_message_to_mail_message,
)
from graph_email_client.mail_provider.result import MailResult
from graph_email_client.utils.logger import BoundLogger, get_logger

JUNK_FOLDER_NAME = "Junk Email"
# Graph rejects $top above 1000 for message collections
MAX_TOP = 1000


class MailClient:
    """Microsoft Graph mail client using app-only (client credentials) auth.

    The credential is exchanged for a bearer token before each request (MSAL caches
    it in memory until near expiry). Calls target /me by default, or /users/{user_id}
    when user_id is given; app-only tokens need the latter.

    Every operation validates its input synchronously (raising InvalidArgument) and
    reports remote failures as MailResult.error after logging them.
    """

    def __init__(
        self,
        client_id: str,
        tenant_id: str,
        client_secret: str,
        logger: Optional[BoundLogger],
        *,
        user_id: Optional[str] = None,
        credential: Optional[MSALClientCredential] = None,
        graph_client: Optional[GraphServiceClient] = None,
    ):
        if logger is None:
            raise InvalidArgument("logger cannot be None.")
        self._logger = logger
        if credential is None or graph_client is None:
            require_text(client_id, "client_id")
            require_text(tenant_id, "tenant_id")
            require_text(client_secret, "client_secret")
        self._credential = credential or MSALClientCredential(
            tenant_id=tenant_id,
            client_id=client_id,
            client_secret=client_secret,
        )
        self._client = graph_client or GraphServiceClient(
            credentials=self._credential,
            scopes=[GRAPH_DEFAULT_SCOPE],
        )
        self._user_id = (user_id or "").strip() or None
        self._logger.info(
            "mail_client.init",
            tenant_id=(tenant_id or "")[:8],
            mailbox=self._user_id or "me",
        )

    @classmethod
    def from_env(cls, logger: Optional[BoundLogger] = None, **overrides: Any) -> "MailClient":
        """Build a client from AZURE_CLIENT_ID / AZURE_TENANT_ID / AZURE_CLIENT_SECRET / GRAPH_USER_ID."""
        settings = {
            "client_id": config.AZURE_CLIENT_ID,
            "tenant_id": config.AZURE_TENANT_ID,
            "client_secret": config.AZURE_CLIENT_SECRET,
            "user_id": config.GRAPH_USER_ID or None,
        }
        settings.update(overrides)
        env_names = {
            "client_id": "AZURE_CLIENT_ID",
            "tenant_id": "AZURE_TENANT_ID",
            "client_secret": "AZURE_CLIENT_SECRET",
        }
        missing = [env for key, env in env_names.items() if not settings.get(key)]
        if missing:
            raise InvalidArgument(f"Missing environment variables: {', '.join(missing)}")
        return cls(
            logger=logger or get_logger("graph_email_client.client"),
            **settings,
        )

    @property
    def credential(self) -> MSALClientCredential:
        """The authenticator the transport asks for a bearer token before each request."""
        return self._credential

    @property
    def _mailbox(self):
        """Request builder for the target mailbox (/me or /users/{id})."""
        if self._user_id:
            return self._client.users.by_user_id(self._user_id)
        return self._client.me

    async def _execute(
        self,
        operation: str,
        request: Callable[[], Awaitable[Any]],
        **context: Any,
    ) -> MailResult:
        """Await request, logging the outcome; remote failures become MailResult.error."""
        try:
            value = await request()
        except REMOTE_EXCEPTIONS as e:
            error = RemoteServiceError.from_exception(operation, e)
            self._logger.error(
                f"mail_client.{operation}.error",
                error=error.message,
                error_type=type(e).__name__,
                status_code=error.status_code,
                error_code=error.code,
                **context,
            )
            return MailResult.failure(error)
        return MailResult.success(value)

    async def send_email(
        self,
        subject: str,
        body: str,
        recipients: list[str],
        *,
        save_to_sent_items: bool = True,
    ) -> MailResult[None]:
        """Send a plain-text message. Raises InvalidArgument if subject, body or recipients are empty."""
        require_text(subject, "subject")
        require_text(body, "body")
        addresses = require_recipients(recipients)
        request_body = SendMailPostRequestBody(
            message=build_outgoing_message(subject, body, addresses),
            save_to_sent_items=save_to_sent_items,
        )

        async def _send():
            await self._mailbox.send_mail.post(request_body)

        result = await self._execute("send_email", _send, recipient_count=len(addresses))
        if result.ok:
            self._logger.info("mail_client.send_email.sent", recipient_count=len(addresses))
        return result

    async def read_emails(self, top: int = 10) -> MailResult[list[MailMessage]]:
        """Return the first page of messages (at most top), in the service's default order."""
        if isinstance(top, bool) or not isinstance(top, int) or not 1 <= top <= MAX_TOP:
            raise InvalidArgument(f"top must be an integer between 1 and {MAX_TOP}.")
        query_params = MessagesRequestBuilder.MessagesRequestBuilderGetQueryParameters(top=top)
        request_config = RequestConfiguration(query_parameters=query_params)

        async def _read():
            response = await self._mailbox.messages.get(request_configuration=request_config)
            return [sdk_message_to_mail_message(m) for m in (response.value or [])] if response else []

        result = await self._execute("read_emails", _read, top=top)
        if result.ok:
            self._logger.info("mail_client.read_emails.retrieved", top=top, count=len(result.value))
        return result

    async def move_email(self, message_id: str, destination_folder_id: str) -> MailResult[MailMessage]:
        require_text(message_id, "message_id")
        require_text(destination_folder_id, "destination_folder_id")
        request_body = MovePostRequestBody(destination_id=destination_folder_id)

        async def _move():
            moved = await self._mailbox.messages.by_message_id(message_id).move.post(request_body)
            return sdk_message_to_mail_message(moved) if moved else None

        result = await self._execute(
            "move_email",
            _move,
            message_id=message_id,
            destination_folder_id=destination_folder_id,
        )
        if result.ok:
            self._logger.info(
                "mail_client.move_email.moved",
                message_id=message_id,
                destination_folder_id=destination_folder_id,
            )
        return result

    async def mark_email_read(self, message_id: str, is_read: bool = True) -> MailResult[None]:
        """PATCH only the isRead flag of a message."""
        require_text(message_id, "message_id")
        patch = GraphSDKMessage(is_read=bool(is_read))

        async def _patch():
            await self._mailbox.messages.by_message_id(message_id).patch(patch)

        result = await self._execute("mark_email_read", _patch, message_id=message_id, is_read=is_read)
        if result.ok:
            self._logger.info(
                "mail_client.mark_email_read.updated",
                message_id=message_id,
                status="read" if is_read else "unread",
            )
        return result

    async def delete_email(self, message_id: str) -> MailResult[None]:
        require_text(message_id, "message_id")

        async def _delete():
            await self._mailbox.messages.by_message_id(message_id).delete()

        result = await self._execute("delete_email", _delete, message_id=message_id)
        if result.ok:
            self._logger.info("mail_client.delete_email.deleted", message_id=message_id)
        return result

    async def list_folders(self) -> MailResult[list[MailFolder]]:
        async def _list():
            response = await self._mailbox.mail_folders.get()
            return [sdk_folder_to_mail_folder(f) for f in (response.value or [])] if response else []

        result = await self._execute("list_folders", _list)
        if result.ok:
            self._logger.info("mail_client.list_folders.retrieved", count=len(result.value))
        return result

    async def create_folder(self, name: str) -> MailResult[MailFolder]:
        require_text(name, "name")
        folder = GraphSDKMailFolder(display_name=name)

        async def _create():
            created = await self._mailbox.mail_folders.post(folder)
            return sdk_folder_to_mail_folder(created) if created else None

        result = await self._execute("create_folder", _create, folder_name=name)
        if result.ok:
            self._logger.info(
                "mail_client.create_folder.created",
                folder_name=name,
                folder_id=result.value.id if result.value else None,
            )
        return result

    async def find_folder(self, display_name: str) -> MailResult[Optional[MailFolder]]:
        """Server-side $filter on displayName; returns the first match or None."""
        require_text(display_name, "display_name")
        query_params = MailFoldersRequestBuilder.MailFoldersRequestBuilderGetQueryParameters(
            filter=f"displayName eq {odata_quote(display_name)}",
        )
        request_config = RequestConfiguration(query_parameters=query_params)

        async def _find():
            response = await self._mailbox.mail_folders.get(request_configuration=request_config)
            folders = (response.value or []) if response else []
            return sdk_folder_to_mail_folder(folders[0]) if folders else None

        return await self._execute("find_folder", _find, folder_name=display_name)

    async def move_email_to_junk(self, message_id: str) -> MailResult[bool]:
        """Move a message to the "Junk Email" folder. Value is False if that folder is missing."""
        require_text(message_id, "message_id")
        lookup = await self.find_folder(JUNK_FOLDER_NAME)
        if not lookup.ok:
            return MailResult.failure(lookup.error)
        junk_folder = lookup.value
        if junk_folder is None or not junk_folder.id:
            self._logger.warning("mail_client.move_email_to_junk.folder_not_found", message_id=message_id)
            return MailResult.success(False)

        moved = await self.move_email(message_id, junk_folder.id)
        if not moved.ok:
            return MailResult.failure(moved.error)
        self._logger.info("mail_client.move_email_to_junk.moved", message_id=message_id)
        return MailResult.success(True)

    async def reply_to_email(self, message_id: str, reply_body: str) -> MailResult[None]:
        """Create a reply draft with a plain-text body, then send it."""
        require_text(message_id, "message_id")
        require_text(reply_body, "reply_body")
        request_body = CreateReplyPostRequestBody(
            message=GraphSDKMessage(body=build_text_body(reply_body)),
        )

        async def _reply():
            draft = await self._mailbox.messages.by_message_id(message_id).create_reply.post(request_body)
            if draft is None or not draft.id:
                raise RemoteServiceError("reply_to_email", "createReply returned no draft id")
            await self._mailbox.messages.by_message_id(draft.id).send.post()

        result = await self._execute("reply_to_email", _reply, message_id=message_id)
        if result.ok:
            self._logger.info("mail_client.reply_to_email.sent", message_id=message_id)
        return result

    async def forward_email(
        self,
        message_id: str,
        forward_body: str,
        recipients: list[str],
    ) -> MailResult[None]:
        require_text(message_id, "message_id")
        require_text(forward_body, "forward_body")
        addresses = require_recipients(recipients)
        request_body = ForwardPostRequestBody(
            message=GraphSDKMessage(body=build_text_body(forward_body)),
            to_recipients=build_recipients(addresses),
        )

        async def _forward():
            await self._mailbox.messages.by_message_id(message_id).forward.post(request_body)

        result = await self._execute(
            "forward_email",
            _forward,
            message_id=message_id,
            recipient_count=len(addresses),
        )
        if result.ok:
            self._logger.info(
                "mail_client.forward_email.sent",
                message_id=message_id,
                recipient_count=len(addresses),
            )
        return result
