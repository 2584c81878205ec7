"""
Module: settings.py
Description: System-level configuration using pydantic-settings.

Holds the deployment-wide defaults a sink definition may leave out,
most importantly the fallback AWS credentials. Values come from
SQS_SINK_* environment variables or a local .env file.
"""

from typing import Any, Mapping, Optional, Protocol

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SinkSettings(BaseSettings):
    """Deployment-wide settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQS_SINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Fallback credentials for sink definitions without access.key/secret.key
    access_key: Optional[str] = Field(default=None, description="AWS access key ID")
    secret_key: Optional[str] = Field(default=None, description="AWS secret access key")
    region: Optional[str] = Field(default=None, description="Default AWS region")
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom SQS endpoint (LocalStack, VPC endpoint)"
    )

    # Transport timeouts; the only interruption mechanism for a blocked publish
    connect_timeout: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Seconds to wait for a TCP connection to SQS"
    )
    read_timeout: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Seconds to wait for an SQS response"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class ConfigReader(Protocol):
    """Read-only view over system-level sink configuration."""

    def read_config(self, name: str, default: Optional[str] = None) -> Optional[str]:
        ...


class SettingsConfigReader:
    """
    ConfigReader backed by SinkSettings.

    Dotted option names map onto settings fields, so ``access.key``
    reads ``SinkSettings.access_key``.
    """

    def __init__(self, sink_settings: Optional[SinkSettings] = None):
        self.settings = sink_settings or settings

    def read_config(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = getattr(self.settings, name.replace('.', '_'), None)
        if value is None:
            return default
        return str(value)


class MappingConfigReader:
    """ConfigReader over a plain mapping, keyed by dotted option names."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values = dict(values or {})

    def read_config(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.values.get(name)
        if value is None:
            return default
        return str(value)


# Global settings instance
settings = SinkSettings()
