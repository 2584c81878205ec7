"""
Module: publisher.py
Description: Publishes single events to SQS through a ConnectionManager.

Applies FIFO rules, builds the PublishRequest and sends it, reporting
failures through the delivery controller.
"""

from typing import Optional

from ..config.sink_config import PublishConfig
from ..delivery.retry import report_send_failures
from ..errors import RequestError
from ..models.request import DynamicAttributes, PublishRequest
from ..utils.logger import get_logger
from .connection import ConnectionManager

logger = get_logger(__name__)


class MessagePublisher:
    """
    Sends string payloads to the configured SQS queue.

    For FIFO queues every message needs a group ID and a deduplication
    ID; for standard queues both are dropped.
    """

    def __init__(self, config: PublishConfig, connection: ConnectionManager):
        self.config = config
        self.connection = connection

    def build_request(
        self,
        payload: str,
        attrs: Optional[DynamicAttributes] = None
    ) -> PublishRequest:
        """
        Build the request for one event without sending it.

        Args:
            payload: Message body
            attrs: Per-event FIFO attributes

        Returns:
            PublishRequest ready to send

        Raises:
            RequestError: If the queue is FIFO and a group or
                deduplication ID is missing
        """
        attrs = attrs or DynamicAttributes()

        if not self.config.is_fifo:
            return PublishRequest(body=payload, delay_seconds=self.config.delay_seconds)

        missing = [
            name for name, value in (
                ('message group ID', attrs.message_group_id),
                ('deduplication ID', attrs.deduplication_id),
            )
            if not value
        ]
        if missing:
            raise RequestError(
                f"FIFO queue {self.config.queue_url} requires a "
                f"{' and a '.join(missing)} for every message"
            )

        return PublishRequest(
            body=payload,
            group_id=attrs.message_group_id,
            dedup_id=attrs.deduplication_id,
            delay_seconds=self.config.delay_seconds
        )

    def publish(self, payload: str, attrs: Optional[DynamicAttributes] = None) -> str:
        """
        Send one event to SQS.

        Args:
            payload: Message body
            attrs: Per-event FIFO attributes

        Returns:
            Message ID from SQS

        Raises:
            RequestError: If the request is invalid or SQS rejects it
            ConnectionUnavailableError: If SQS cannot be reached right now
        """
        request = self.build_request(payload, attrs)
        client = self.connection.client

        with report_send_failures(self.config.queue_url, self.connection.mark_unavailable):
            response = client.send_message(**request.to_send_kwargs(self.config.queue_url))

        message_id = response['MessageId']
        logger.debug(
            "Message sent to SQS",
            message_id=message_id,
            queue_url=self.config.queue_url,
            group_id=request.group_id
        )
        return message_id
