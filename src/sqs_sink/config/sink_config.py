"""
Module: sink_config.py
Description: Validated publish configuration for one SQS sink.

PublishConfig is built once when the sink is initialized and never
changes afterwards. Credentials follow a short chain: the sink
definition first, then the system-level ConfigReader.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ..errors import ConfigError
from . import options as opts
from .options import OptionHolder
from .settings import ConfigReader, SettingsConfigReader


def is_fifo_queue(queue_url: str) -> bool:
    """
    Check whether a queue URL names a FIFO queue.

    A URL ending in ".fifo" is FIFO, and so is one with a single extra
    trailing character after ".fifo" (typically "/").
    """
    return queue_url.endswith(".fifo") or queue_url[:-1].endswith(".fifo")


def _blank(value: Any) -> bool:
    return value is None or not str(value).strip()


class PublishConfig(BaseModel):
    """
    Immutable publish configuration.

    Attributes:
        queue_url: URL of the target queue
        access_key: AWS access key ID
        secret_key: AWS secret access key
        region: AWS region of the queue
        delay_seconds: Seconds a message stays invisible after sending
        endpoint_url: Optional custom SQS endpoint
        is_fifo: Derived from queue_url
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    queue_url: str = Field(..., min_length=1, description="URL of the SQS queue")
    access_key: str = Field(..., min_length=1, repr=False)
    secret_key: str = Field(..., min_length=1, repr=False)
    region: str = Field(..., min_length=1, description="AWS region")
    delay_seconds: int = Field(
        default=opts.DEFAULT_DELAY_INTERVAL,
        ge=0,
        le=opts.MAX_DELAY_INTERVAL,
        description="Delivery delay in seconds"
    )
    endpoint_url: Optional[str] = Field(default=None, description="Custom SQS endpoint")

    @computed_field
    @property
    def is_fifo(self) -> bool:
        return is_fifo_queue(self.queue_url)

    @classmethod
    def from_options(
        cls,
        option_holder: OptionHolder,
        config_reader: Optional[ConfigReader] = None
    ) -> "PublishConfig":
        """
        Validate sink options into a PublishConfig.

        Args:
            option_holder: Options from the sink definition
            config_reader: System-level fallback for credentials, region
                and endpoint; defaults to SinkSettings

        Returns:
            Validated configuration

        Raises:
            ConfigError: If credentials are missing after the fallback,
                or a mandatory parameter is missing or malformed
        """
        reader = config_reader or SettingsConfigReader()

        access_key = option_holder.get(opts.ACCESS_KEY)
        if _blank(access_key):
            access_key = reader.read_config(opts.ACCESS_KEY, None)
        secret_key = option_holder.get(opts.SECRET_KEY)
        if _blank(secret_key):
            secret_key = reader.read_config(opts.SECRET_KEY, None)

        if _blank(access_key) or _blank(secret_key):
            raise ConfigError(
                "Access key and Secret key are mandatory parameters for the SQS client"
            )

        queue_url = option_holder.get(opts.QUEUE_URL)
        if _blank(queue_url):
            raise ConfigError(f"'{opts.QUEUE_URL}' is a mandatory parameter for the SQS sink")

        region = option_holder.get(opts.REGION)
        if _blank(region):
            region = reader.read_config(opts.REGION, None)
        if _blank(region):
            raise ConfigError(f"'{opts.REGION}' is a mandatory parameter for the SQS sink")

        endpoint_url = option_holder.get(opts.ENDPOINT_URL)
        if _blank(endpoint_url):
            endpoint_url = reader.read_config(opts.ENDPOINT_URL, None)

        delay_seconds = _parse_delay(
            option_holder.get(opts.DELAY_INTERVAL, opts.DEFAULT_DELAY_INTERVAL)
        )

        try:
            return cls(
                queue_url=queue_url,
                access_key=access_key,
                secret_key=secret_key,
                region=region,
                delay_seconds=delay_seconds,
                endpoint_url=endpoint_url or None,
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid SQS sink configuration: {e}") from e


def _parse_delay(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"'{opts.DELAY_INTERVAL}' must be an integer number of seconds")
    if isinstance(value, int):
        delay = value
    else:
        try:
            delay = int(str(value).strip())
        except ValueError as e:
            raise ConfigError(
                f"'{opts.DELAY_INTERVAL}' must be an integer number of seconds, got {value!r}"
            ) from e

    if not 0 <= delay <= opts.MAX_DELAY_INTERVAL:
        raise ConfigError(
            f"'{opts.DELAY_INTERVAL}' must be between 0 and {opts.MAX_DELAY_INTERVAL} seconds"
        )
    return delay
