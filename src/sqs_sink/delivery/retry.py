"""
Module: delivery/retry.py
Description: Failure classification and backpressure reporting.

A send never retries inside the sink. Transient failures (endpoint
unreachable, timeouts, throttling, 5xx) surface as
ConnectionUnavailableError so the host engine can pause and retry with
its own policy; everything else surfaces as RequestError and must not be
retried.
"""

import enum
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError, HTTPClientError
from botocore.exceptions import ConnectionError as BotoConnectionError
from tenacity import (
    Retrying,
    after_log,
    before_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..errors import ConnectionUnavailableError, RequestError
from ..utils.logger import get_logger

logger = get_logger(__name__)

TRANSIENT_ERROR_CODES = frozenset({
    'ThrottlingException',
    'Throttling',
    'RequestThrottled',
    'RequestThrottledException',
    'ServiceUnavailable',
    'InternalError',
    'InternalFailure',
    'KmsThrottled',
    'KmsThrottlingException',
    'RequestTimeout',
    'RequestTimeoutException',
})

# Covers endpoint, proxy, SSL, connect/read timeout and closed-connection errors
TRANSIENT_TRANSPORT_ERRORS = (
    BotoConnectionError,
    HTTPClientError,
)


class FailureKind(str, enum.Enum):
    """How the host engine should treat a failed send."""

    TRANSIENT = "transient"
    FATAL = "fatal"


def _error_code(exc: BaseException) -> Optional[str]:
    if isinstance(exc, ClientError):
        return exc.response.get('Error', {}).get('Code')
    return None


def classify_failure(exc: BaseException) -> FailureKind:
    """
    Classify an exception raised by the SQS client.

    Args:
        exc: Exception from a boto3 call

    Returns:
        FailureKind.TRANSIENT for network, timeout, throttling and
        server-side errors, FailureKind.FATAL otherwise (including other
        botocore errors such as NoCredentialsError or ParamValidationError)
    """
    if isinstance(exc, TRANSIENT_TRANSPORT_ERRORS):
        return FailureKind.TRANSIENT

    if isinstance(exc, ClientError):
        if _error_code(exc) in TRANSIENT_ERROR_CODES:
            return FailureKind.TRANSIENT
        status = exc.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
        if status is not None and status >= 500:
            return FailureKind.TRANSIENT

    return FailureKind.FATAL


@contextmanager
def report_send_failures(
    queue_url: str,
    on_unavailable: Optional[Callable[[], None]] = None
) -> Iterator[None]:
    """
    Map botocore failures inside the block onto sink errors.

    Args:
        queue_url: Queue the block is sending to, for logging
        on_unavailable: Called before raising ConnectionUnavailableError,
            typically to release the broken connection

    Raises:
        ConnectionUnavailableError: On a transient failure
        RequestError: On a fatal failure
    """
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        error_code = _error_code(e)
        if classify_failure(e) is FailureKind.TRANSIENT:
            logger.warning(
                "SQS endpoint unavailable",
                queue_url=queue_url,
                error_code=error_code,
                error=str(e),
                error_type=type(e).__name__
            )
            if on_unavailable is not None:
                on_unavailable()
            raise ConnectionUnavailableError(
                f"SQS endpoint unavailable for {queue_url}: {e}",
                error_code=error_code
            ) from e

        logger.error(
            "SQS rejected message",
            queue_url=queue_url,
            error_code=error_code,
            error=str(e)
        )
        raise RequestError(
            f"SQS rejected message for {queue_url}: {e}",
            error_code=error_code
        ) from e


def connect_with_retry(
    sink,
    attempts: int = 5,
    min_wait: float = 1.0,
    max_wait: float = 30.0
) -> None:
    """
    Connect a sink, backing off while the endpoint is unavailable.

    This is the host side of the retry contract: only
    ConnectionUnavailableError is retried, and the last one is re-raised
    once attempts run out.

    Args:
        sink: Any object with a connect() method
        attempts: Maximum number of connect attempts
        min_wait: Lower bound in seconds for a single backoff wait
        max_wait: Upper bound in seconds for a single backoff wait
    """
    retrying = Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(ConnectionUnavailableError),
        before=before_log(logger, logging.INFO),
        after=after_log(logger, logging.INFO),
        reraise=True
    )
    retrying(sink.connect)
