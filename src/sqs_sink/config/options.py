"""
Module: options.py
Description: Option names and the option holder for an SQS sink definition.

The host engine parses a sink definition such as::

    @sink(type='sqs', queue='<queue_url>', region='us-east-1',
          delay.interval='5', message.group.id='orders',
          deduplication.id='{{dedup_id}}')

into static options (fixed for the lifetime of the sink) and dynamic
options (re-resolved for every event). OptionHolder keeps both.
"""

from typing import Any, Iterable, Mapping, Optional

from ..errors import ConfigError

QUEUE_URL = "queue"
ACCESS_KEY = "access.key"
SECRET_KEY = "secret.key"
REGION = "region"
ENDPOINT_URL = "endpoint.url"
DELAY_INTERVAL = "delay.interval"
MESSAGE_GROUP_ID = "message.group.id"
DEDUPLICATION_ID = "deduplication.id"

DEFAULT_DELAY_INTERVAL = 0
MAX_DELAY_INTERVAL = 900


class OptionHolder:
    """
    Static and dynamic options of one sink definition.

    Args:
        static_options: Option name to fixed value
        dynamic_keys: Option names whose value is resolved per event
    """

    def __init__(
        self,
        static_options: Optional[Mapping[str, Any]] = None,
        dynamic_keys: Optional[Iterable[str]] = None
    ):
        self.static_options = dict(static_options or {})
        self.dynamic_keys = frozenset(dynamic_keys or ())

    def get(self, key: str, default: Any = None) -> Any:
        return self.static_options.get(key, default)

    def is_dynamic(self, key: str) -> bool:
        return key in self.dynamic_keys

    def validate_dynamic_keys(self, supported: Iterable[str]) -> None:
        """
        Reject dynamic options the sink cannot vary per event.

        Raises:
            ConfigError: If any declared dynamic key is not supported
        """
        unsupported = sorted(self.dynamic_keys - frozenset(supported))
        if unsupported:
            raise ConfigError(
                f"Options {', '.join(unsupported)} cannot be dynamic for the SQS sink"
            )
