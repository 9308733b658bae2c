"""Error types raised or returned by the mail client."""

from typing import Optional

import httpx
from azure.core.exceptions import AzureError
from kiota_abstractions.api_error import APIError


class MailClientError(Exception):
    """Base class for all mail client errors."""


class InvalidArgument(MailClientError, ValueError):
    """A required input was missing or empty. Raised before any network call."""


class RemoteServiceError(MailClientError):
    """The Graph call (or the token request backing it) reported a failure."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message
        self.status_code = status_code
        self.code = code
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"RemoteServiceError(operation={self.operation!r}, status_code={self.status_code!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )

    @classmethod
    def from_exception(cls, operation: str, exc: BaseException) -> "RemoteServiceError":
        """Build from an SDK, transport or credential exception, keeping status and Graph error code."""
        if isinstance(exc, RemoteServiceError):
            return exc
        status_code = None
        code = None
        message = None

        if isinstance(exc, APIError):
            status_code = exc.response_status_code
            # ODataError carries the service's error body in .error (MainError)
            main_error = getattr(exc, "error", None)
            if main_error is not None:
                code = getattr(main_error, "code", None)
                message = getattr(main_error, "message", None)
            message = message or exc.message
        elif isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
        elif isinstance(exc, AzureError):
            status_code = getattr(exc, "status_code", None)
            message = exc.message
            code = getattr(exc, "error_code", None)

        if not message:
            message = str(exc).strip() or type(exc).__name__
        return cls(operation, message, status_code=status_code, code=code, cause=exc)


# Exceptions that mean "the remote side failed" rather than a programming error
REMOTE_EXCEPTIONS = (RemoteServiceError, APIError, httpx.HTTPError, AzureError)
