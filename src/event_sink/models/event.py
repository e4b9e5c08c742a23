"""
Module: event.py
Description: User event data models for the user event sink connector.

Defines the closed set of supported event types and one typed model per
event family. The families form a tagged union keyed on ``event_type`` so a
raw JSON mapping can be dispatched to the model that knows its required
fields.

Key Components:
- EventType: Enum of supported event kinds
- HomeEvent, ItemEvent, SearchEvent, PageViewEvent, PurchaseEvent: Variants
- UserEvent: Discriminated union over all variants
- Validation: Pydantic v2 model validators per variant

Dependencies: pydantic, typing
Author: User Event Sink Team
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EventType(str, Enum):
    """Supported user event kinds."""

    HOME = "HOME"
    LAND = "LAND"
    ITEM_PAGE_VIEW = "ITEM_PAGE_VIEW"
    ADD_TO_CART = "ADD_TO_CART"
    ADD_TO_WISHLIST = "ADD_TO_WISHLIST"
    SEARCH = "SEARCH"
    PAGE_VIEW = "PAGE_VIEW"
    PURCHASE = "PURCHASE"

    @classmethod
    def has_value(cls, value: Any) -> bool:
        """Return True if value names a supported event type."""
        return isinstance(value, str) and value in cls._value2member_map_


def _is_non_empty_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


class BaseUserEvent(BaseModel):
    """
    Fields shared by every user event.

    Type-specific fields are declared on the variants. Anything else the
    caller sends is kept as an extra field and forwarded untouched.

    Attributes:
        timestamp: Unix timestamp in milliseconds (number or numeric string)
        event_type: Supported event kind
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    timestamp: Union[int, float, str] = Field(
        ...,
        description="Unix timestamp in milliseconds"
    )


class HomeEvent(BaseUserEvent):
    """Home or landing page view. No additional required fields."""

    event_type: Literal["HOME", "LAND"]


class ItemEvent(BaseUserEvent):
    """Item page view, add to cart or add to wishlist."""

    event_type: Literal["ITEM_PAGE_VIEW", "ADD_TO_CART", "ADD_TO_WISHLIST"]
    items: Optional[Any] = Field(default=None, description="Items involved in the event")

    @model_validator(mode="after")
    def check_items(self) -> "ItemEvent":
        if not _is_non_empty_sequence(self.items):
            raise ValueError("The items field must be a non-empty array")
        return self


class SearchEvent(BaseUserEvent):
    """Search results view."""

    event_type: Literal["SEARCH"]
    search_query: Optional[Any] = Field(default=None, description="User search query")

    @model_validator(mode="after")
    def check_search_query(self) -> "SearchEvent":
        if not self.search_query:
            raise ValueError("The search_query field must be present and non-empty")
        return self


class PageViewEvent(BaseUserEvent):
    """Generic page view identified by page_id."""

    event_type: Literal["PAGE_VIEW"]
    page_id: Optional[Any] = Field(default=None, description="Viewed page identifier")

    @model_validator(mode="after")
    def check_page_id(self) -> "PageViewEvent":
        if not self.page_id:
            raise ValueError("The page_id field must be present and non-empty")
        return self


class PurchaseEvent(BaseUserEvent):
    """Completed purchase."""

    event_type: Literal["PURCHASE"]
    items: Optional[Any] = Field(default=None, description="Purchased items")

    @model_validator(mode="after")
    def check_items(self) -> "PurchaseEvent":
        if not _is_non_empty_sequence(self.items):
            raise ValueError("The items field must be a non-empty array for PURCHASE event")
        return self


UserEvent = Annotated[
    Union[HomeEvent, ItemEvent, SearchEvent, PageViewEvent, PurchaseEvent],
    Field(discriminator="event_type")
]

EVENT_VARIANTS = (HomeEvent, ItemEvent, SearchEvent, PageViewEvent, PurchaseEvent)
