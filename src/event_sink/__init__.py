"""
Package: event_sink
Description: Client-side connector for user event ingestion.

Validates user interaction events, strips null fields and delivers them
to the ingestion API with retries on transient failures.
"""

from event_sink.delivery.connector import UserEventSinkConnector
from event_sink.errors import DeliveryFailedError, ErrorKind, EventSinkError, InvalidInputError
from event_sink.models.event import EventType
from event_sink.models.result import SendResult
from event_sink.utils.sanitizer import prune
from event_sink.validation.validator import EventValidator

__version__ = "0.1.0"

__all__ = [
    "UserEventSinkConnector",
    "EventValidator",
    "EventType",
    "SendResult",
    "prune",
    "ErrorKind",
    "EventSinkError",
    "InvalidInputError",
    "DeliveryFailedError",
]
