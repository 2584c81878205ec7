"""
Module: errors.py
Description: Error taxonomy for the SQS sink.

ConfigError is raised once while the sink is being set up.
ConnectionUnavailableError tells the host engine to back off and
reconnect. RequestError marks a single event that can never be sent
as-is and must not be retried.
"""

from typing import Optional


class SinkError(Exception):
    """Base error for the SQS sink."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(SinkError):
    """Missing or malformed sink configuration. Fatal at initialization."""


class ConnectionUnavailableError(SinkError):
    """Endpoint unreachable, throttled or timed out. The caller may retry."""


class RequestError(SinkError):
    """Per-event request that the queue will never accept. Not retryable."""
