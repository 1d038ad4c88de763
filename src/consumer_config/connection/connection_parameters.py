"""Builds pika connection parameters from a consumer configuration."""

from __future__ import annotations

import logging

import pika

from consumer_config.errors import ConfigError
from consumer_config.settings import ConsumerConfig

logger = logging.getLogger(__name__)


def build_connection_parameters(config: ConsumerConfig) -> pika.URLParameters:
    """Return ``pika.URLParameters`` for the configured AMQP URL without connecting."""
    try:
        parameters = pika.URLParameters(config.amqp_url)
    except ValueError as exc:
        raise ConfigError("Invalid AMQP URL in configuration.") from exc

    logger.debug(
        "Prepared connection parameters for %s:%s vhost=%s",
        parameters.host,
        parameters.port,
        parameters.virtual_host,
    )
    return parameters
