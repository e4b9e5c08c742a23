"""
Module: delivery/retry.py
Description: Retry policy for user event delivery.

Builds a tenacity AsyncRetrying with exponential backoff: 100ms before the
second attempt, doubling before every attempt after that. Only
DeliveryFailedError is retried; anything else propagates on first raise.
"""

from typing import Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from event_sink.errors import DeliveryFailedError
from event_sink.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_RETRIES = 3
INITIAL_BACKOFF_SECONDS = 0.1


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception()
    logger.warning(
        "User event delivery failed, retrying",
        attempt=retry_state.attempt_number,
        wait_seconds=retry_state.next_action.sleep,
        status_code=getattr(error, "status_code", None),
        error=str(error)
    )


def build_delivery_retrying(
    max_attempts: int = DEFAULT_MAX_RETRIES,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None
) -> AsyncRetrying:
    """
    Create the retry controller for a single send call.

    A fresh controller is needed per call: tenacity keeps attempt state on
    the controller instance.

    Args:
        max_attempts: Total attempts allowed, including the first
        sleep: Optional coroutine function used for backoff waits

    Returns:
        Configured AsyncRetrying instance
    """
    options = dict(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=INITIAL_BACKOFF_SECONDS),
        retry=retry_if_exception_type(DeliveryFailedError),
        before_sleep=_log_retry,
        reraise=True
    )
    if sleep is not None:
        options["sleep"] = sleep
    return AsyncRetrying(**options)


def total_backoff_seconds(max_attempts: int) -> float:
    """Total wait before the final failure when every attempt fails."""
    return INITIAL_BACKOFF_SECONDS * (2 ** (max_attempts - 1) - 1)
