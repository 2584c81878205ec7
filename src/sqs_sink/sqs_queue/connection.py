"""
Module: connection.py
Description: Lifecycle of the SQS client handle for one sink instance.

Creates an authenticated boto3 SQS client on connect(), checks that the
queue is reachable with the given credentials, and releases the client
on disconnect() or after a transient failure. Each sink instance owns
its own ConnectionManager; handles are never shared.
"""

import enum
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config.settings import SinkSettings, settings
from ..config.sink_config import PublishConfig
from ..errors import ConnectionUnavailableError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionState(str, enum.Enum):
    """States of a ConnectionManager."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


class ConnectionManager:
    """
    Owns the boto3 SQS client used to publish to one queue.

    Retries inside botocore are turned off; a failed call is reported
    to the caller straight away.
    """

    def __init__(self, config: PublishConfig, sink_settings: Optional[SinkSettings] = None):
        """
        Initialize connection manager. No network activity happens here.

        Args:
            config: Validated publish configuration
            sink_settings: Source of transport timeouts
        """
        self.config = config
        self.settings = sink_settings or settings
        self.state = ConnectionState.DISCONNECTED
        self._client: Optional[Any] = None

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED and self._client is not None

    @property
    def client(self) -> Any:
        """
        The active SQS client.

        Raises:
            ConnectionUnavailableError: If there is no active connection
        """
        if not self.is_connected:
            raise ConnectionUnavailableError(
                f"Not connected to SQS queue {self.config.queue_url}"
            )
        return self._client

    def _create_client(self) -> Any:
        session = boto3.session.Session(
            aws_access_key_id=self.config.access_key,
            aws_secret_access_key=self.config.secret_key,
            region_name=self.config.region
        )
        client_config = Config(
            connect_timeout=self.settings.connect_timeout,
            read_timeout=self.settings.read_timeout,
            retries={'max_attempts': 0}
        )
        return session.client(
            'sqs',
            endpoint_url=self.config.endpoint_url,
            config=client_config
        )

    def connect(self) -> None:
        """
        Establish the SQS client and verify the queue is reachable.

        Calling connect() while already connected is a no-op.

        Raises:
            ConnectionUnavailableError: If the endpoint cannot be reached,
                the credentials are rejected or the queue does not exist
        """
        if self.is_connected:
            logger.debug("SQS connection already established", queue_url=self.config.queue_url)
            return

        self.state = ConnectionState.CONNECTING
        client = None
        try:
            client = self._create_client()
            client.get_queue_attributes(
                QueueUrl=self.config.queue_url,
                AttributeNames=['QueueArn']
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code')
            self._fail(client)
            logger.error(
                "Failed to connect to SQS",
                queue_url=self.config.queue_url,
                error_code=error_code,
                error_message=e.response.get('Error', {}).get('Message')
            )
            raise ConnectionUnavailableError(
                f"Cannot connect to SQS queue {self.config.queue_url}: {e}",
                error_code=error_code
            ) from e
        except BotoCoreError as e:
            self._fail(client)
            logger.error(
                "Failed to connect to SQS",
                queue_url=self.config.queue_url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise ConnectionUnavailableError(
                f"Cannot connect to SQS queue {self.config.queue_url}: {e}"
            ) from e

        self._client = client
        self.state = ConnectionState.CONNECTED
        logger.info(
            "Connected to SQS",
            queue_url=self.config.queue_url,
            region=self.config.region,
            fifo=self.config.is_fifo
        )

    def _fail(self, client: Optional[Any]) -> None:
        if client is not None:
            client.close()
        self._client = None
        self.state = ConnectionState.FAILED

    def _release(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            client.close()

    def mark_unavailable(self) -> None:
        """Drop the client after a transient failure so connect() can rebuild it."""
        self._release()
        self.state = ConnectionState.DISCONNECTED
        logger.info("SQS connection released after failure", queue_url=self.config.queue_url)

    def disconnect(self) -> None:
        """Release the SQS client. Safe to call from any state."""
        was_connected = self._client is not None
        self._release()
        self.state = ConnectionState.DISCONNECTED
        if was_connected:
            logger.info("Disconnected from SQS", queue_url=self.config.queue_url)

    def destroy(self) -> None:
        """Release everything held by this manager. Safe to call from any state."""
        self.disconnect()
