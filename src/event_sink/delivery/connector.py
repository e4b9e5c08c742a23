"""
Module: connector.py
Description: Delivery of user events to the user event ingestion API.

Implements the validate -> prune -> POST pipeline with retries on
transient failures. Malformed input fails on the first call with no
network traffic; non-2xx responses and transport errors are retried
with exponential backoff until the attempt limit is reached.

Key Components:
- UserEventSinkConnector: Connector bound to one platform and endpoint
- send(): Deliver an event, raising on failure
- try_send(): Deliver an event, returning a SendResult

Dependencies: httpx, tenacity, structlog
Author: User Event Sink Team
"""

import json
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

import httpx

from event_sink.delivery.retry import DEFAULT_MAX_RETRIES, build_delivery_retrying
from event_sink.errors import DeliveryFailedError, EventSinkError, InvalidInputError
from event_sink.models.result import SendResult
from event_sink.utils.logger import configure_logging, get_logger
from event_sink.utils.sanitizer import prune
from event_sink.validation.validator import EventValidator

logger = get_logger(__name__)

EVENT_PATH_TEMPLATE = "/rmp/event/v1/platforms/{platform_id}/userevents"
API_KEY_HEADER = "x-api-key"


def _normalize_hostname(hostname: str) -> str:
    if not hostname.lower().startswith(("http://", "https://")):
        hostname = f"https://{hostname}"
    return hostname.rstrip("/")


class UserEventSinkConnector:
    """
    Client for sending user events to one platform's ingestion endpoint.

    Identity and retry configuration are fixed after construction (apart
    from the max_retries setter) and safe to share between concurrent
    send() calls. Each call keeps its own retry state.

    Example:
        >>> connector = UserEventSinkConnector("PLATFORM_1", "api.example.com", "api-key-123")
        >>> body = await connector.send({
        ...     "event_type": "PURCHASE",
        ...     "timestamp": "1617870506121",
        ...     "items": [{"id": "456", "price": {"amount": 99.99, "currency": "USD"}}]
        ... })
    """

    def __init__(
        self,
        platform_id: str,
        event_api_hostname: str,
        event_api_key: str,
        max_retries: int = DEFAULT_MAX_RETRIES,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None
    ):
        """
        Initialize the connector.

        Args:
            platform_id: Platform identifier used in the endpoint path
            event_api_hostname: Ingestion API host, with or without scheme
            event_api_key: API key sent in the x-api-key header
            max_retries: Total attempts per send, at least 1
            timeout_seconds: HTTP timeout per attempt
            transport: Optional httpx transport, e.g. httpx.MockTransport
            sleep: Optional coroutine function used for backoff waits

        Raises:
            InvalidInputError: If any parameter is missing or invalid
        """
        self.platform_id = self._validate_parameter("platform_id", platform_id)
        self.event_api_hostname = _normalize_hostname(
            self._validate_parameter("event_api_hostname", event_api_hostname)
        )
        self._event_api_key = self._validate_parameter("event_api_key", event_api_key)
        self.max_retries = max_retries

        if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, (int, float)) \
                or timeout_seconds <= 0:
            raise InvalidInputError("timeout_seconds must be a positive number")
        self.timeout = httpx.Timeout(timeout_seconds)

        self._transport = transport
        self._sleep = sleep
        self._validator = EventValidator()

        logger.info(
            "User event sink connector initialized",
            platform_id=self.platform_id,
            url=self.url,
            max_retries=self._max_retries,
            timeout_seconds=timeout_seconds
        )

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "UserEventSinkConnector":
        """
        Build a connector from ConnectorSettings and apply its log level.

        Args:
            settings: Loaded ConnectorSettings
            **kwargs: Extra constructor arguments (transport, sleep)
        """
        configure_logging(settings.log_level)
        return cls(
            settings.platform_id,
            settings.api_hostname,
            settings.api_key.get_secret_value(),
            max_retries=settings.max_retries,
            timeout_seconds=settings.request_timeout,
            **kwargs
        )

    @staticmethod
    def _validate_parameter(param_name: str, value: Any) -> str:
        if not value or not isinstance(value, str) or not value.strip():
            raise InvalidInputError(f"{param_name} cannot be null or empty")
        return value.strip()

    @property
    def max_retries(self) -> int:
        """Total attempts allowed per send call."""
        return self._max_retries

    @max_retries.setter
    def max_retries(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidInputError(f"max_retries must be a positive integer, got {value!r}")
        self._max_retries = value

    @property
    def url(self) -> str:
        """Target URL for this connector's platform."""
        return self.event_api_hostname + EVENT_PATH_TEMPLATE.format(
            platform_id=self.platform_id
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            API_KEY_HEADER: self._event_api_key
        }

    async def send(self, event: Optional[Mapping[str, Any]]) -> str:
        """
        Validate, prune and deliver an event.

        Args:
            event: Raw event mapping

        Returns:
            Response body from the ingestion API

        Raises:
            InvalidInputError: If the event is malformed (never retried)
            DeliveryFailedError: If every allowed attempt failed
        """
        body, _ = await self._deliver(event)
        return body

    async def try_send(self, event: Optional[Mapping[str, Any]]) -> SendResult:
        """
        Deliver an event, reporting the outcome as a SendResult.

        Args:
            event: Raw event mapping

        Returns:
            SendResult with ok=True and the body, or the error kind
        """
        try:
            body, attempts = await self._deliver(event)
        except EventSinkError as e:
            return SendResult.failure(e)
        return SendResult.success(body, attempts=attempts)

    async def _deliver(self, event: Optional[Mapping[str, Any]]) -> Tuple[str, int]:
        if not event:
            raise InvalidInputError("The data cannot be null or empty")

        self._validator.validate(event)

        payload = prune(event)
        if payload is None:
            raise InvalidInputError("Failed to process JSON data: filtered result is null")

        try:
            content = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Failed to process JSON data: {e}") from e

        event_type = payload.get("event_type")
        attempt_number = 0
        try:
            async for attempt in build_delivery_retrying(self._max_retries, sleep=self._sleep):
                with attempt:
                    attempt_number = attempt.retry_state.attempt_number
                    response = await self._post(content, event_type, attempt_number)
                    body = self._handle_response(response)
        except DeliveryFailedError as e:
            e.attempts = attempt_number
            logger.error(
                "User event delivery failed after all retries",
                event_type=event_type,
                attempts=attempt_number,
                status_code=e.status_code,
                error=e.message
            )
            raise

        logger.info(
            "User event delivered successfully",
            event_type=event_type,
            status_code=response.status_code,
            attempts=attempt_number
        )
        return body, attempt_number

    async def _post(
        self,
        content: str,
        event_type: Optional[str],
        attempt_number: int
    ) -> Optional[httpx.Response]:
        logger.debug(
            "Attempting user event delivery",
            url=self.url,
            event_type=event_type,
            attempt=attempt_number
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                return await client.post(self.url, content=content, headers=self._headers())

        except httpx.TimeoutException as e:
            logger.warning(
                "User event delivery timeout",
                url=self.url,
                attempt=attempt_number
            )
            raise DeliveryFailedError.from_exception(e) from e

        except (httpx.HTTPError, OSError) as e:
            logger.warning(
                "User event delivery network error",
                url=self.url,
                attempt=attempt_number,
                error=str(e),
                error_type=type(e).__name__
            )
            raise DeliveryFailedError.from_exception(e) from e

    @staticmethod
    def _handle_response(response: Optional[httpx.Response]) -> str:
        if response is None:
            raise DeliveryFailedError("HTTP response cannot be null")

        body = response.text
        if response.is_success:
            return body

        logger.warning(
            "User event delivery HTTP error",
            status_code=response.status_code,
            response=body[:500]  # Truncate large responses
        )
        raise DeliveryFailedError.from_response(response.status_code, body)
