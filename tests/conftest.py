"""
Module: conftest.py
Description: Shared pytest fixtures for SQS sink tests.

Provides mocked SQS queues (moto), option sets and config readers so
unit tests run fast and never touch AWS.
"""

import boto3
import pytest
from moto import mock_aws

from sqs_sink.config import MappingConfigReader, OptionHolder, PublishConfig, SinkSettings

REGION = "us-east-1"


@pytest.fixture(autouse=True)
def isolated_sink_env(monkeypatch):
    """Keep SQS_SINK_* variables from the developer's shell out of tests."""
    for name in ("ACCESS_KEY", "SECRET_KEY", "REGION", "ENDPOINT_URL"):
        monkeypatch.delenv(f"SQS_SINK_{name}", raising=False)


@pytest.fixture
def test_settings():
    """Settings with short timeouts and no .env loading."""
    return SinkSettings(_env_file=None, connect_timeout=1.0, read_timeout=1.0)


@pytest.fixture
def empty_reader():
    """System-level config with no fallback values."""
    return MappingConfigReader({})


@pytest.fixture
def aws():
    """Run the test inside a moto AWS mock."""
    with mock_aws():
        yield


@pytest.fixture
def sqs_client(aws):
    return boto3.client("sqs", region_name=REGION)


@pytest.fixture
def standard_queue_url(sqs_client):
    return sqs_client.create_queue(QueueName="test")["QueueUrl"]


@pytest.fixture
def fifo_queue_url(sqs_client):
    return sqs_client.create_queue(
        QueueName="test.fifo",
        Attributes={"FifoQueue": "true"}
    )["QueueUrl"]


def make_options(queue_url, **overrides):
    """Build a complete static option mapping for a sink definition."""
    options = {
        "queue": queue_url,
        "access.key": "A",
        "secret.key": "B",
        "region": REGION,
    }
    options.update(overrides)
    return options


@pytest.fixture
def standard_config(standard_queue_url, empty_reader):
    return PublishConfig.from_options(OptionHolder(make_options(standard_queue_url)), empty_reader)


@pytest.fixture
def fifo_config(fifo_queue_url, empty_reader):
    return PublishConfig.from_options(OptionHolder(make_options(fifo_queue_url)), empty_reader)


def receive_all(sqs_client, queue_url):
    """Receive every visible message from a queue."""
    response = sqs_client.receive_message(
        QueueUrl=queue_url,
        MaxNumberOfMessages=10,
        AttributeNames=["All"],
        WaitTimeSeconds=0
    )
    return response.get("Messages", [])
