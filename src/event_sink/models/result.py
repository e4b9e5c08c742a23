"""
Module: result.py
Description: Result model for non-raising event delivery.

SendResult carries the outcome of a single send as data so callers can
branch on recoverability (ErrorKind) instead of catching exceptions.

Dependencies: pydantic, typing
Author: User Event Sink Team
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from event_sink.errors import DeliveryFailedError, ErrorKind, EventSinkError


class SendResult(BaseModel):
    """
    Outcome of a send attempt.

    Attributes:
        ok: True when the endpoint accepted the event
        body: Response body on success
        error_kind: Recoverability class on failure
        error_message: Human-readable failure description
        status_code: HTTP status of the last attempt, if a response arrived
        attempts: Number of HTTP attempts made (0 for invalid input)
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Whether the event was delivered")
    body: Optional[str] = Field(default=None, description="Response body on success")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Failure kind")
    error_message: Optional[str] = Field(default=None, description="Failure description")
    status_code: Optional[int] = Field(default=None, description="Last HTTP status code")
    attempts: int = Field(default=0, ge=0, description="HTTP attempts made")

    @classmethod
    def success(cls, body: str, attempts: int = 1) -> "SendResult":
        return cls(ok=True, body=body, attempts=attempts)

    @classmethod
    def failure(cls, error: EventSinkError) -> "SendResult":
        if isinstance(error, DeliveryFailedError):
            return cls(
                ok=False,
                error_kind=error.kind,
                error_message=error.message,
                status_code=error.status_code,
                attempts=error.attempts
            )
        return cls(ok=False, error_kind=error.kind, error_message=error.message)

    @property
    def retryable(self) -> bool:
        """True if the same event could succeed on a later send."""
        return self.error_kind is ErrorKind.DELIVERY_FAILED
