"""
Module: settings.py
Description: Connector configuration using pydantic-settings.

Loads the connector identity and delivery tuning from environment
variables with validation and defaults. Supports .env files for local
development.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectorSettings(BaseSettings):
    """Connector settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Connector identity
    platform_id: str = Field(
        ...,
        description="Platform identifier used in the endpoint path"
    )
    api_hostname: str = Field(
        ...,
        description="Hostname of the user event ingestion API"
    )
    api_key: SecretStr = Field(
        ...,
        description="User event API key"
    )

    # Delivery settings
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Total delivery attempts per event"
    )
    request_timeout: float = Field(
        default=10.0,
        ge=1,
        le=60,
        description="HTTP timeout in seconds for each delivery attempt"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('platform_id', 'api_hostname')
    @classmethod
    def validate_non_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only identity values."""
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v.strip()

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Reject an empty or whitespace-only API key."""
        if not v.get_secret_value().strip():
            raise ValueError("api_key must be a non-empty string")
        return SecretStr(v.get_secret_value().strip())

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


def load_settings(**overrides) -> ConnectorSettings:
    """
    Load connector settings from the environment.

    Args:
        **overrides: Values taking precedence over the environment

    Raises:
        pydantic.ValidationError: If a required variable is missing or invalid
    """
    return ConnectorSettings(**overrides)
