"""Provides queue and exchange declaration options derived from a consumer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from consumer_config.settings import ConsumerConfig

MESSAGE_TTL_ARGUMENT = "x-message-ttl"
DEAD_LETTER_EXCHANGE_ARGUMENT = "x-dead-letter-exchange"
DEAD_LETTER_ROUTING_KEY_ARGUMENT = "x-dead-letter-routing-key"


@dataclass(frozen=True)
class QueueTopology:
    """Encapsulates queue declaration options for RabbitMQ consumers.

    ``exchange`` is only meaningful when ``should_bind`` is set; an exchange
    configured as ``<empty>`` binds to the default exchange. ``arguments`` holds
    the ``x-`` options to pass to ``queue_declare``.
    """

    queue_name: str
    prefetch_count: int
    prefetch_global: bool = False
    should_bind: bool = False
    exchange: str = ""
    exchange_type: str = ""
    exchange_durable: bool = False
    exchange_auto_delete: bool = False
    routing_key: str = ""
    arguments: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: ConsumerConfig) -> "QueueTopology":
        return cls(
            queue_name=config.queue_name,
            prefetch_count=config.prefetch_count,
            prefetch_global=config.prefetch_global,
            should_bind=config.has_exchange,
            exchange=config.exchange_name,
            exchange_type=config.exchange_type,
            exchange_durable=config.exchange.durable,
            exchange_auto_delete=config.exchange.auto_delete,
            routing_key=config.routing_key,
            arguments=queue_arguments(config),
        )


def queue_arguments(config: ConsumerConfig) -> Dict[str, Any]:
    arguments: Dict[str, Any] = {}
    if config.has_message_ttl:
        arguments[MESSAGE_TTL_ARGUMENT] = config.message_ttl
    if config.has_dead_letter_exchange:
        arguments[DEAD_LETTER_EXCHANGE_ARGUMENT] = config.dead_letter_exchange
    if config.has_dead_letter_routing:
        arguments[DEAD_LETTER_ROUTING_KEY_ARGUMENT] = config.dead_letter_routing_key
    return arguments
