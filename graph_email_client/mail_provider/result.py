"""Uniform result contract for mail client operations."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from graph_email_client.errors import RemoteServiceError

T = TypeVar("T")


class MailResult(BaseModel, Generic[T]):
    """Outcome of one operation: a value on success, a RemoteServiceError on failure.

    Remote failures are reported here instead of being raised, so every operation
    fails the same way. Call unwrap() to turn a failure back into an exception.
    """

    value: Optional[T] = None
    error: Optional[RemoteServiceError] = None

    class Config:
        arbitrary_types_allowed = True

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the carried RemoteServiceError."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Optional[T] = None) -> "MailResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RemoteServiceError) -> "MailResult[T]":
        return cls(error=error)
