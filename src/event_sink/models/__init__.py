"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models used by the connector:
- EventType: Closed set of supported event kinds
- UserEvent: Tagged union of typed event variants
- SendResult: Outcome of a non-raising send

All models are exported here for convenient importing.
"""

from .event import (
    EventType,
    HomeEvent,
    ItemEvent,
    PageViewEvent,
    PurchaseEvent,
    SearchEvent,
    UserEvent,
)
from .result import SendResult

__all__ = [
    "EventType",
    "HomeEvent",
    "ItemEvent",
    "PageViewEvent",
    "PurchaseEvent",
    "SearchEvent",
    "UserEvent",
    "SendResult",
]
