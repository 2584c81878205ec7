"""
Module: test_options.py
Description: Unit tests for OptionHolder and the system config readers.
"""

import pytest

from sqs_sink.config import MappingConfigReader, OptionHolder, SettingsConfigReader, SinkSettings
from sqs_sink.errors import ConfigError


class TestOptionHolder:
    """Test cases for OptionHolder."""

    def test_static_lookup(self):
        holder = OptionHolder({"queue": "https://q/test"})
        assert holder.get("queue") == "https://q/test"
        assert holder.get("region") is None
        assert holder.get("delay.interval", 0) == 0

    def test_supported_dynamic_keys(self):
        holder = OptionHolder({}, dynamic_keys=["message.group.id"])
        holder.validate_dynamic_keys(["message.group.id", "deduplication.id"])
        assert holder.is_dynamic("message.group.id")
        assert not holder.is_dynamic("deduplication.id")

    def test_unsupported_dynamic_key(self):
        holder = OptionHolder({}, dynamic_keys=["queue", "message.group.id"])
        with pytest.raises(ConfigError, match="queue"):
            holder.validate_dynamic_keys(["message.group.id", "deduplication.id"])


class TestConfigReaders:
    """Test cases for ConfigReader implementations."""

    def test_mapping_reader(self):
        reader = MappingConfigReader({"access.key": "A"})
        assert reader.read_config("access.key") == "A"
        assert reader.read_config("secret.key") is None
        assert reader.read_config("secret.key", "fallback") == "fallback"

    def test_settings_reader_maps_dotted_names(self):
        reader = SettingsConfigReader(
            SinkSettings(_env_file=None, access_key="A", secret_key="B")
        )
        assert reader.read_config("access.key") == "A"
        assert reader.read_config("secret.key") == "B"
        assert reader.read_config("endpoint.url", "none") == "none"

    def test_settings_log_level_validation(self):
        assert SinkSettings(_env_file=None, log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError):
            SinkSettings(_env_file=None, log_level="verbose")
