"""
Module: test_retry.py
Description: Unit tests for failure classification and reporting.

Covers transient vs fatal classification of botocore errors, the
report_send_failures context manager, and the tenacity-based
connect_with_retry helper.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import (
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    HTTPClientError,
    NoCredentialsError,
    ParamValidationError,
    ProxyConnectionError,
    ReadTimeoutError,
    SSLError,
)

from sqs_sink.delivery import FailureKind, classify_failure, connect_with_retry, report_send_failures
from sqs_sink.errors import ConnectionUnavailableError, RequestError


def client_error(code, status=400):
    return ClientError(
        {
            'Error': {'Code': code, 'Message': f"{code} happened"},
            'ResponseMetadata': {'HTTPStatusCode': status},
        },
        'SendMessage'
    )


class TestClassifyFailure:
    """Test cases for classify_failure."""

    @pytest.mark.parametrize("exc", [
        EndpointConnectionError(endpoint_url="https://sqs.us-east-1.amazonaws.com"),
        ConnectTimeoutError(endpoint_url="https://sqs.us-east-1.amazonaws.com"),
        ReadTimeoutError(endpoint_url="https://sqs.us-east-1.amazonaws.com"),
        ConnectionClosedError(endpoint_url="https://sqs.us-east-1.amazonaws.com"),
        SSLError(endpoint_url="https://sqs.us-east-1.amazonaws.com", error="certificate verify failed"),
        ProxyConnectionError(proxy_url="http://proxy:3128", error="connection refused"),
        HTTPClientError(error="connection reset by peer"),
        client_error("ThrottlingException"),
        client_error("RequestThrottled", status=403),
        client_error("ServiceUnavailable", status=503),
        client_error("SomethingNew", status=500),
    ])
    def test_transient(self, exc):
        assert classify_failure(exc) is FailureKind.TRANSIENT

    @pytest.mark.parametrize("exc", [
        client_error("InvalidParameterValue"),
        client_error("InvalidClientTokenId", status=403),
        client_error("AccessDenied", status=403),
        client_error("AWS.SimpleQueueService.NonExistentQueue"),
        ParamValidationError(report="MessageBody is required"),
        NoCredentialsError(),
        ValueError("boom"),
    ])
    def test_fatal(self, exc):
        assert classify_failure(exc) is FailureKind.FATAL


class TestReportSendFailures:
    """Test cases for report_send_failures."""

    def test_passes_success_through(self):
        on_unavailable = MagicMock()
        with report_send_failures("https://q/test", on_unavailable):
            pass
        on_unavailable.assert_not_called()

    def test_transient_becomes_connection_unavailable(self):
        on_unavailable = MagicMock()

        with pytest.raises(ConnectionUnavailableError) as exc_info:
            with report_send_failures("https://q/test", on_unavailable):
                raise client_error("ThrottlingException")

        assert exc_info.value.error_code == "ThrottlingException"
        assert isinstance(exc_info.value.__cause__, ClientError)
        on_unavailable.assert_called_once_with()

    def test_network_outage_becomes_connection_unavailable(self):
        with pytest.raises(ConnectionUnavailableError):
            with report_send_failures("https://q/test"):
                raise EndpointConnectionError(endpoint_url="https://q")

    def test_fatal_becomes_request_error(self):
        on_unavailable = MagicMock()

        with pytest.raises(RequestError) as exc_info:
            with report_send_failures("https://q/test", on_unavailable):
                raise client_error("InvalidParameterValue")

        assert exc_info.value.error_code == "InvalidParameterValue"
        on_unavailable.assert_not_called()

    def test_invalid_parameters_become_request_error(self):
        with pytest.raises(RequestError):
            with report_send_failures("https://q/test"):
                raise ParamValidationError(report="Invalid type for parameter DelaySeconds")

    def test_other_botocore_errors_become_request_error(self):
        on_unavailable = MagicMock()

        with pytest.raises(RequestError):
            with report_send_failures("https://q/test", on_unavailable):
                raise NoCredentialsError()

        on_unavailable.assert_not_called()

    def test_unrelated_errors_propagate_unchanged(self):
        with pytest.raises(KeyError):
            with report_send_failures("https://q/test"):
                raise KeyError("MessageId")


class TestConnectWithRetry:
    """Test cases for connect_with_retry."""

    def test_retries_until_connected(self):
        sink = MagicMock()
        sink.connect.side_effect = [
            ConnectionUnavailableError("down"),
            ConnectionUnavailableError("still down"),
            None,
        ]

        connect_with_retry(sink, attempts=5, min_wait=0, max_wait=0)

        assert sink.connect.call_count == 3

    def test_gives_up_after_attempts(self):
        sink = MagicMock()
        sink.connect.side_effect = ConnectionUnavailableError("down")

        with pytest.raises(ConnectionUnavailableError, match="down"):
            connect_with_retry(sink, attempts=3, min_wait=0, max_wait=0)

        assert sink.connect.call_count == 3

    def test_does_not_retry_other_errors(self):
        sink = MagicMock()
        sink.connect.side_effect = RequestError("bad")

        with pytest.raises(RequestError):
            connect_with_retry(sink, attempts=3, min_wait=0, max_wait=0)

        assert sink.connect.call_count == 1
