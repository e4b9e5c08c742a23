"""
Module: errors.py
Description: Error types raised by the user event sink connector.

Errors fall into two disjoint kinds so callers can tell whether
retrying the same event could ever help:

- InvalidInputError: malformed event or bad configuration. Permanent,
  raised immediately and never retried.
- DeliveryFailedError: the remote endpoint could not be reached or
  answered with a non-2xx status on every allowed attempt.

Author: User Event Sink Team
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Recoverability class of a connector failure."""

    INVALID_INPUT = "invalid_input"
    DELIVERY_FAILED = "delivery_failed"


class EventSinkError(Exception):
    """Base class for all connector errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(EventSinkError, ValueError):
    """Raised for malformed events and invalid connector parameters."""

    kind = ErrorKind.INVALID_INPUT


class DeliveryFailedError(EventSinkError):
    """
    Raised when an event could not be delivered.

    Attributes:
        status_code: HTTP status of the last attempt, if a response arrived
        body: Response body of the last attempt, if a response arrived
        attempts: Number of attempts made before giving up
    """

    kind = ErrorKind.DELIVERY_FAILED

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        attempts: int = 1
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.attempts = attempts

    @classmethod
    def from_response(cls, status_code: int, body: str) -> "DeliveryFailedError":
        """Build the error for a non-2xx HTTP response."""
        return cls(
            f"Request failed: status code: {status_code}, reason phrase: {body}",
            status_code=status_code,
            body=body
        )

    @classmethod
    def from_exception(cls, error: BaseException) -> "DeliveryFailedError":
        """Build the error for a transport failure; chain it with ``from error``."""
        detail = str(error) or type(error).__name__
        return cls(f"Failed to send request: {detail}")
