"""Tests for ConsumerConfigLoader wiring."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from consumer_config.errors import ConfigFileError, ParseError
from consumer_config.loader import ConsumerConfigLoader
from consumer_config.loader_config import ConfigLoaderDependencies
from consumer_config.settings import ConsumerConfig, RabbitMqSettings


@pytest.fixture
def reader():
    reader = Mock()
    reader.resolve.return_value = Path("/etc/worker/worker.conf")
    reader.read.return_value = "[RabbitMq]\nhost = broker\n"
    return reader


@pytest.fixture
def decoder():
    decoder = Mock()
    decoder.decode.return_value = ConsumerConfig(rabbitmq=RabbitMqSettings(host="broker"))
    return decoder


def test_from_file_reads_resolved_path_and_decodes(reader, decoder):
    loader = ConsumerConfigLoader(reader=reader, decoder=decoder)

    config = loader.from_file("worker.conf")

    reader.resolve.assert_called_once_with("worker.conf")
    reader.read.assert_called_once_with(Path("/etc/worker/worker.conf"))
    decoder.decode.assert_called_once_with("[RabbitMq]\nhost = broker\n")
    assert config is decoder.decode.return_value


def test_from_string_skips_reader(reader, decoder):
    loader = ConsumerConfigLoader(reader=reader, decoder=decoder)

    config = loader.from_string("[Prefetch]\ncount = 1\n")

    reader.read.assert_not_called()
    decoder.decode.assert_called_once_with("[Prefetch]\ncount = 1\n")
    assert config.amqp_url == "amqp://broker"


def test_from_file_propagates_read_errors(reader, decoder):
    reader.read.side_effect = ConfigFileError(2, "Cannot read configuration file", "worker.conf")
    logger = Mock()
    loader = ConsumerConfigLoader(reader=reader, decoder=decoder, logger=logger)

    with pytest.raises(ConfigFileError):
        loader.from_file("worker.conf")

    decoder.decode.assert_not_called()
    logger.error.assert_called_once()


def test_from_string_propagates_parse_errors(reader, decoder):
    decoder.decode.side_effect = ParseError("bad")
    logger = Mock()
    loader = ConsumerConfigLoader(reader=reader, decoder=decoder, logger=logger)

    with pytest.raises(ParseError):
        loader.from_string("[")

    logger.error.assert_called_once()


def test_create_uses_dependency_factories(reader, decoder):
    deps = ConfigLoaderDependencies(make_reader=lambda: reader, make_decoder=lambda: decoder)

    loader = ConsumerConfigLoader.create(dependencies=deps)

    assert loader.reader is reader
    assert loader.decoder is decoder


def test_create_defaults_to_file_reader_and_ini_decoder():
    from consumer_config.decoder import IniConfigDecoder
    from consumer_config.reader import ConfigFileReader

    loader = ConsumerConfigLoader.create()

    assert isinstance(loader.reader, ConfigFileReader)
    assert isinstance(loader.decoder, IniConfigDecoder)


def test_password_is_not_logged(reader, decoder, caplog):
    decoder.decode.return_value = ConsumerConfig(
        rabbitmq=RabbitMqSettings(host="broker", username="u", password="s3cret")
    )
    loader = ConsumerConfigLoader(reader=reader, decoder=decoder)

    with caplog.at_level("DEBUG", logger="consumer_config"):
        loader.from_file("worker.conf")

    assert "s3cret" not in caplog.text
    assert "Loading configuration from" in caplog.text
