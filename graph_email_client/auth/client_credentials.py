"""MSAL client-credentials TokenCredential. Tokens are cached in memory by MSAL and refreshed on expiry."""

import time
from typing import Any, Callable, Optional

import msal
import requests
from azure.core.credentials import AccessToken, TokenCredential
from azure.core.exceptions import ClientAuthenticationError

from graph_email_client.config import AUTHORITY_HOST, GRAPH_SCOPE

GRAPH_DEFAULT_SCOPE = GRAPH_SCOPE

AppFactory = Callable[[], msal.ConfidentialClientApplication]


class MSALClientCredential(TokenCredential):
    """
    TokenCredential that exchanges an app registration's client secret for a bearer token.

    The GraphServiceClient auth provider calls get_token() before every request; MSAL
    answers from its in-memory cache until the token is close to expiry.
    The MSAL app is built on first use, so constructing the credential does no I/O.
    """

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        authority_host: str = AUTHORITY_HOST,
        app_factory: Optional[AppFactory] = None,
    ):
        self._tenant_id = tenant_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._authority = f"{authority_host.rstrip('/')}/{tenant_id}"
        self._app_factory = app_factory or self._build_app
        self._app: Optional[msal.ConfidentialClientApplication] = None

    def _build_app(self) -> msal.ConfidentialClientApplication:
        return msal.ConfidentialClientApplication(
            client_id=self._client_id,
            client_credential=self._client_secret,
            authority=self._authority,
        )

    def _get_app(self) -> msal.ConfidentialClientApplication:
        if self._app is None:
            self._app = self._app_factory()
        return self._app

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        scopes_list = list(scopes) if scopes else [GRAPH_DEFAULT_SCOPE]
        try:
            result = self._get_app().acquire_token_for_client(scopes=scopes_list)
        except (ValueError, requests.RequestException) as e:
            # MSAL raises ValueError for a malformed authority or unknown tenant
            raise ClientAuthenticationError(message=f"Token request failed: {e}") from e
        if not result or "access_token" not in result:
            result = result or {}
            raise ClientAuthenticationError(
                message=result.get(
                    "error_description",
                    result.get("error", "Client credentials token request failed"),
                )
            )
        expires_on = int(time.time()) + int(result.get("expires_in", 0))
        return AccessToken(token=result["access_token"], expires_on=expires_on)

    def acquire_token(self) -> AccessToken:
        """Return a bearer token for the Graph default scope."""
        return self.get_token(GRAPH_DEFAULT_SCOPE)
