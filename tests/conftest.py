"""
Module: conftest.py
Description: Shared pytest fixtures for user event sink tests.

Provides sample events for every supported event type, a connector
wired to a recording sleep so backoff waits are observable without
slowing the suite down, and isolated settings.
"""

import pytest

from event_sink.config.settings import ConnectorSettings
from event_sink.delivery.connector import UserEventSinkConnector

PLATFORM_ID = "TEST_PLATFORM"
API_HOSTNAME = "https://api.example.com"
API_KEY = "test-api-key-123"
EVENT_URL = f"{API_HOSTNAME}/rmp/event/v1/platforms/{PLATFORM_ID}/userevents"


class RecordingSleep:
    """Async sleep replacement that records requested waits."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def event_url():
    """Provide the ingestion URL the test connector posts to."""
    return EVENT_URL


@pytest.fixture
def recording_sleep():
    """Provide a sleep stand-in that records backoff waits."""
    return RecordingSleep()


@pytest.fixture
def connector(recording_sleep):
    """
    Provide a connector for the test platform.

    Uses the recording sleep so retry tests run instantly.
    """
    return UserEventSinkConnector(
        PLATFORM_ID,
        API_HOSTNAME,
        API_KEY,
        sleep=recording_sleep
    )


@pytest.fixture
def test_settings():
    """
    Provide connector settings without reading the environment or .env.
    """
    return ConnectorSettings(
        _env_file=None,
        platform_id=PLATFORM_ID,
        api_hostname=API_HOSTNAME,
        api_key=API_KEY,
        log_level="DEBUG"
    )


@pytest.fixture
def home_event():
    """Provide a HOME event as sent by site instrumentation."""
    return {
        "id": "ajs-next-1729973784295-1f893e86-ce88-430c-9822-5d37ef1c4a22",
        "timestamp": "1617870506121",
        "channel_type": "SITE",
        "user_id": "ecd14bdae1469f963df2726f88a2eab5bdd53953",
        "session_id": "",
        "name": "Dashboard Viewed",
        "event_type": "HOME"
    }


@pytest.fixture
def item_page_view_event():
    """Provide an ITEM_PAGE_VIEW event."""
    return {
        "id": "ajs-next-1729986778105-2e18cab3-8fd4-473f-8953-d5899fac8c03",
        "timestamp": "1617870506121",
        "channel_type": "SITE",
        "user_id": "f5414d1f1c08947254bd257b661aa90b15e092f6",
        "event_type": "ITEM_PAGE_VIEW",
        "items": [{"id": "2199832"}]
    }


@pytest.fixture
def search_event():
    """Provide a SEARCH event."""
    return {
        "id": "ajs-next-1729981795685-5b1deab4-39d7-4bfa-af3b-3e183f68c0ae",
        "timestamp": "1617870506121",
        "channel_type": "SITE",
        "user_id": "1a0a1ee31dab3661f80a7b621816d53630ff0360",
        "event_type": "SEARCH",
        "search_query": "colorado vape"
    }


@pytest.fixture
def page_view_event():
    """Provide a PAGE_VIEW event."""
    return {
        "id": "ajs-next-1729981991771-ef5e378e-6e6f-41d9-add1-6984bc2dda77",
        "timestamp": "1617870506121",
        "channel_type": "SITE",
        "user_id": "02db0a1ed22424abc404362bf98c704cb22474ef",
        "name": "Shop Brands Viewed",
        "event_type": "PAGE_VIEW",
        "page_id": "SHOP_BRANDS"
    }


@pytest.fixture
def purchase_event():
    """Provide a PURCHASE event with nested price data and null fields."""
    return {
        "id": "88ec57bb-bd54-4391-b296-c7de36c45728",
        "timestamp": 1617870506121,
        "channel_type": "SITE",
        "user_id": "a9d220010dc9d8f0b998fa45e5f538d4176958da",
        "session_id": None,
        "items": [{
            "id": "2031646",
            "price": {"amount": 50, "currency": "USD"},
            "quantity": 25,
            "seller_id": None
        }],
        "revenue": {"amount": 1250, "currency": "USD"},
        "event_type": "PURCHASE",
        "shipping_charge": {"amount": 0, "currency": "USD"}
    }
