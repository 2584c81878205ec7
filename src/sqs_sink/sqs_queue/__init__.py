"""
Package: sqs_queue
Description: SQS connection management and message publishing.

Provides the connection manager owning the boto3 SQS client and the
publisher that turns events into send_message requests.
"""

from .connection import ConnectionManager, ConnectionState
from .publisher import MessagePublisher

__all__ = [
    "ConnectionManager",
    "ConnectionState",
    "MessagePublisher",
]
