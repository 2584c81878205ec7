"""
Module: sqs.py
Description: Sink publishing text events to an Amazon SQS queue.

Example sink definition::

    @sink(type='sqs',
          queue='https://sqs.us-east-1.amazonaws.com/123456789012/orders.fifo',
          access.key='<aws_access_key>', secret.key='<aws_secret_key>',
          region='us-east-1', delay.interval='5',
          deduplication.id='{{deduplicationID}}', message.group.id='orders')

access.key and secret.key may be left out when SQS_SINK_ACCESS_KEY and
SQS_SINK_SECRET_KEY are set.
"""

from typing import Any, Mapping, Optional

from ..config import options as opts
from ..config.options import OptionHolder
from ..config.settings import ConfigReader
from ..config.sink_config import PublishConfig
from ..errors import ConnectionUnavailableError, RequestError
from ..models.request import DynamicAttributes
from ..sqs_queue.connection import ConnectionManager
from ..sqs_queue.publisher import MessagePublisher
from ..utils.logger import get_logger
from .base import Sink

logger = get_logger(__name__)


class SQSSink(Sink):
    """Publishes string payloads as SQS messages."""

    supported_input_types = (str,)
    supported_dynamic_options = (opts.MESSAGE_GROUP_ID, opts.DEDUPLICATION_ID)

    def __init__(self):
        self.config: Optional[PublishConfig] = None
        self.option_holder: Optional[OptionHolder] = None
        self.connection: Optional[ConnectionManager] = None
        self.publisher: Optional[MessagePublisher] = None

    def init(
        self,
        option_holder: OptionHolder,
        config_reader: Optional[ConfigReader] = None
    ) -> None:
        """
        Validate the sink definition.

        Raises:
            ConfigError: If credentials are missing after the system-level
                fallback, a mandatory option is missing or malformed, or an
                unsupported option is declared dynamic
        """
        self.destroy()
        option_holder.validate_dynamic_keys(self.supported_dynamic_options)
        self.config = PublishConfig.from_options(option_holder, config_reader)
        self.option_holder = option_holder

        logger.info(
            "SQS sink initialized",
            queue_url=self.config.queue_url,
            region=self.config.region,
            fifo=self.config.is_fifo,
            delay_seconds=self.config.delay_seconds
        )

    def connect(self) -> None:
        """
        Connect to the queue. A second call while connected does nothing.

        Raises:
            ConnectionUnavailableError: If the queue cannot be reached
        """
        if self.config is None:
            raise ConnectionUnavailableError("SQS sink must be initialized before connecting")

        if self.connection is None:
            self.connection = ConnectionManager(self.config)
            self.publisher = MessagePublisher(self.config, self.connection)
        self.connection.connect()

    def resolve_attributes(self, dynamic_options: Mapping[str, Any]) -> DynamicAttributes:
        """
        Resolve per-event FIFO attributes.

        A per-event value wins over a static option of the same name.

        Raises:
            RequestError: If dynamic_options holds an unsupported key
        """
        unsupported = sorted(set(dynamic_options) - set(self.supported_dynamic_options))
        if unsupported:
            raise RequestError(
                f"Options {', '.join(unsupported)} cannot vary per event for the SQS sink"
            )

        def lookup(key: str) -> Optional[str]:
            value = dynamic_options.get(key)
            if value is None:
                value = self.option_holder.get(key)
            return None if value is None else str(value)

        return DynamicAttributes(
            message_group_id=lookup(opts.MESSAGE_GROUP_ID),
            deduplication_id=lookup(opts.DEDUPLICATION_ID)
        )

    def _publish(self, payload: str, dynamic_options: Mapping[str, Any]) -> str:
        if self.publisher is None:
            raise ConnectionUnavailableError("SQS sink is not connected")
        return self.publisher.publish(payload, self.resolve_attributes(dynamic_options))

    def disconnect(self) -> None:
        if self.connection is not None:
            self.connection.disconnect()

    def destroy(self) -> None:
        if self.connection is not None:
            self.connection.destroy()
        self.connection = None
        self.publisher = None
