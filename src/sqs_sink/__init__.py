"""
Package: sqs_sink
Description: Amazon SQS sink for stream-processing engines.

Publishes outgoing events as SQS messages. Handles option validation,
connection lifecycle, FIFO group/deduplication rules and failure
reporting; retry policy stays with the host engine.
"""

from .errors import ConfigError, ConnectionUnavailableError, RequestError, SinkError
from .sink import Sink, SQSSink

__all__ = [
    "ConfigError",
    "ConnectionUnavailableError",
    "RequestError",
    "SinkError",
    "Sink",
    "SQSSink",
]
