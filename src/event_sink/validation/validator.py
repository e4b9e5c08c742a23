"""
Module: validator.py
Description: Validation of raw user events before delivery.

Checks the fields common to every event, then dispatches to the typed
variant for the declared event type. Every failure is an
InvalidInputError: malformed input is never retried.

Key Components:
- EventValidator: Common field checks plus per-type dispatch
- serialize_event(): JSON rendering of an event for error messages

Dependencies: pydantic, json, math
Author: User Event Sink Team
"""

import json
import math
from typing import Any, Dict, Mapping, Optional, get_args

from pydantic import TypeAdapter, ValidationError

from event_sink.errors import InvalidInputError
from event_sink.models.event import EVENT_VARIANTS, EventType, UserEvent
from event_sink.utils.logger import get_logger

logger = get_logger(__name__)


def serialize_event(event: Any) -> str:
    """Render an event as JSON for diagnostics, falling back to str() for odd values."""
    return json.dumps(event, default=str)


class EventValidator:
    """
    Validates raw user event mappings.

    The event type to variant dispatch is built once at construction and
    covers every EventType member exactly once.
    """

    def __init__(self):
        self._check_coverage()
        self._adapter = TypeAdapter(UserEvent)

    @staticmethod
    def _check_coverage() -> None:
        covered: Dict[str, str] = {}
        for variant in EVENT_VARIANTS:
            for event_type in get_args(variant.model_fields["event_type"].annotation):
                if event_type in covered:
                    raise RuntimeError(
                        f"Event type {event_type} handled by both "
                        f"{covered[event_type]} and {variant.__name__}"
                    )
                covered[event_type] = variant.__name__

        missing = [member.value for member in EventType if member.value not in covered]
        if missing:
            raise RuntimeError(f"No event model for event types: {', '.join(missing)}")

    def validate(self, event: Optional[Mapping[str, Any]]) -> None:
        """
        Validate a raw event.

        Args:
            event: Raw event mapping

        Raises:
            InvalidInputError: If a common or type-specific field is invalid
        """
        self.parse(event)

    def parse(self, event: Optional[Mapping[str, Any]]):
        """
        Validate a raw event and return its typed variant.

        Args:
            event: Raw event mapping

        Returns:
            The HomeEvent, ItemEvent, SearchEvent, PageViewEvent or
            PurchaseEvent matching the event's type

        Raises:
            InvalidInputError: If a common or type-specific field is invalid
        """
        self._check_common(event)

        event_type = event.get("event_type")
        if not event_type:
            raise InvalidInputError("The event_type field is missing")

        if not EventType.has_value(event_type):
            raise InvalidInputError(f"Unknown event type: {event_type}")

        try:
            return self._adapter.validate_python(dict(event))
        except ValidationError as e:
            message = self._first_error_message(e)
            logger.debug(
                "User event failed type validation",
                event_type=event_type,
                error=message
            )
            raise InvalidInputError(f"{message}: {serialize_event(event)}") from e

    def _check_common(self, event: Optional[Mapping[str, Any]]) -> None:
        if event is None:
            raise InvalidInputError("Data parameter cannot be null")
        if not isinstance(event, Mapping):
            raise InvalidInputError(
                f"Data parameter must be a mapping, got {type(event).__name__}"
            )

        timestamp = event.get("timestamp")
        if timestamp is None or timestamp == "":
            raise InvalidInputError(
                f"The timestamp field must be present: {serialize_event(event)}"
            )

        if not _is_numeric(timestamp):
            raise InvalidInputError(
                "The timestamp field must be a Unix timestamp in milliseconds: "
                f"{serialize_event(event)}"
            )

    @staticmethod
    def _first_error_message(error: ValidationError) -> str:
        details = error.errors()[0]
        cause = details.get("ctx", {}).get("error")
        if isinstance(cause, ValueError):
            return str(cause)
        return details["msg"]


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False

    text = str(value).strip()
    # float() accepts digit separators, a JSON number never has them
    if "_" in text:
        return False
    try:
        return math.isfinite(float(text))
    except (ValueError, OverflowError):
        return False
