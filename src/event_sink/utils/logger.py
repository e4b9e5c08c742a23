"""
Module: logger.py
Description: Structured logging configuration for the user event sink connector.

Configures structlog for JSON output so connector logs can be shipped
alongside the host application's logs. Provides consistent logging across
all modules with structured key/value context.

Importing this module does not touch the process-wide structlog setup;
the JSON configuration is applied only by configure_logging(), which
UserEventSinkConnector.from_settings() calls with the configured level.
Otherwise the host application's structlog configuration is used.

Key Components:
- JSON output
- Timestamp and log level processors
- Level filtering via configure_logging()
- get_logger() helper function

Dependencies: structlog, logging, datetime
Author: User Event Sink Team
"""

import logging
from datetime import datetime, timezone

import structlog


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 UTC timestamp to log entries.

    Stored under ``logged_at`` so it never collides with an event's own
    ``timestamp`` field passed as log context.
    """
    event_dict["logged_at"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog for JSON output at the given level.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If log_level is not a known level name
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("User event delivered", event_type="HOME", attempts=1)
        {"event": "User event delivered", "event_type": "HOME", "attempts": 1, "logged_at": "2024-01-15T10:30:00Z", "level": "INFO"}
    """
    return structlog.get_logger(name)
