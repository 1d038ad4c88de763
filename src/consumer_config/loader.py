"""Loads consumer configurations from files or literal text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from consumer_config.contracts import IConfigDecoder, IConfigReader
from consumer_config.errors import ConfigError
from consumer_config.settings import ConsumerConfig

from .loader_config import ConfigLoaderDependencies


class ConsumerConfigLoader:
    """Reads and decodes configuration sources into ``ConsumerConfig`` objects.

    Either a complete configuration is returned or a ``ConfigError`` is raised;
    a partially decoded configuration is never exposed.
    """

    def __init__(
        self,
        *,
        reader: IConfigReader,
        decoder: IConfigDecoder,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.reader = reader
        self.decoder = decoder

    @classmethod
    def create(
        cls, *, dependencies: Optional[ConfigLoaderDependencies] = None
    ) -> "ConsumerConfigLoader":
        deps = dependencies or ConfigLoaderDependencies()

        return cls(reader=deps.make_reader(), decoder=deps.make_decoder())

    def from_file(self, location: Union[str, Path]) -> ConsumerConfig:
        try:
            path = self.reader.resolve(location)
            self.logger.info("Loading configuration from %s", path)
            config = self.decoder.decode(self.reader.read(path))
        except ConfigError as exc:
            self.logger.error("Failed to load configuration from %s: %s", location, exc)
            raise

        self._log_connection_source(config)
        return config

    def from_string(self, text: str) -> ConsumerConfig:
        try:
            config = self.decoder.decode(text)
        except ConfigError as exc:
            self.logger.error("Failed to parse configuration text: %s", exc)
            raise

        self._log_connection_source(config)
        return config

    def _log_connection_source(self, config: ConsumerConfig) -> None:
        if config.rabbitmq.amqp_url:
            self.logger.debug("Using configured AMQP URL.")
        else:
            self.logger.debug(
                "Built AMQP URL for host=%s port=%s vhost=%s",
                config.rabbitmq.host,
                config.rabbitmq.port or "<default>",
                config.rabbitmq.vhost,
            )


def load_from_file(
    location: Union[str, Path], *, dependencies: Optional[ConfigLoaderDependencies] = None
) -> ConsumerConfig:
    """Load a configuration file, resolving relative paths against the cwd."""
    return ConsumerConfigLoader.create(dependencies=dependencies).from_file(location)


def load_from_string(
    text: str, *, dependencies: Optional[ConfigLoaderDependencies] = None
) -> ConsumerConfig:
    """Load a configuration from literal INI text."""
    return ConsumerConfigLoader.create(dependencies=dependencies).from_string(text)
