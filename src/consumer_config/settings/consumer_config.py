"""The loaded consumer configuration and its derived accessors."""

from __future__ import annotations

from dataclasses import dataclass, field

from .amqp_url import build_amqp_url
from .defaults import resolve_exchange_type, resolve_prefetch_count, wrap_int32
from .sections import (
    ExchangeSettings,
    LogSettings,
    PrefetchSettings,
    QueueSettings,
    RabbitMqSettings,
)


@dataclass(frozen=True)
class ConsumerConfig:
    """Immutable configuration of a queue worker.

    The connection URI is derived once, when the instance is created, so the
    object can be shared between threads without further synchronisation.
    """

    rabbitmq: RabbitMqSettings = field(default_factory=RabbitMqSettings)
    prefetch: PrefetchSettings = field(default_factory=PrefetchSettings)
    queue_settings: QueueSettings = field(default_factory=QueueSettings)
    exchange: ExchangeSettings = field(default_factory=ExchangeSettings)
    logs: LogSettings = field(default_factory=LogSettings)
    _amqp_url: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_amqp_url", build_amqp_url(self.rabbitmq))

    @property
    def amqp_url(self) -> str:
        return self._amqp_url

    @property
    def queue_name(self) -> str:
        return self.rabbitmq.queue

    @property
    def has_exchange(self) -> bool:
        return self.exchange.name is not None

    @property
    def exchange_name(self) -> str:
        return self.exchange.name or ""

    @property
    def exchange_type(self) -> str:
        return resolve_exchange_type(
            self.exchange.name,
            self.exchange.type,
            self.exchange.durable,
            self.exchange.auto_delete,
        )

    @property
    def prefetch_count(self) -> int:
        return resolve_prefetch_count(self.prefetch.count)

    @property
    def prefetch_global(self) -> bool:
        return self.prefetch.global_

    @property
    def has_message_ttl(self) -> bool:
        return self.queue_settings.message_ttl > 0

    @property
    def message_ttl(self) -> int:
        """Message TTL in milliseconds as a signed 32-bit value.

        Stored values outside the 32-bit range wrap around rather than
        saturate, so ``has_message_ttl`` can be true while this is negative.
        """
        return wrap_int32(self.queue_settings.message_ttl)

    @property
    def routing_key(self) -> str:
        return self.queue_settings.routing_key or ""

    @property
    def has_dead_letter_exchange(self) -> bool:
        return self.queue_settings.dead_letter_exchange is not None

    @property
    def dead_letter_exchange(self) -> str:
        return self.queue_settings.dead_letter_exchange or ""

    @property
    def has_dead_letter_routing(self) -> bool:
        return self.queue_settings.dead_letter_routing_key is not None

    @property
    def dead_letter_routing_key(self) -> str:
        return self.queue_settings.dead_letter_routing_key or ""
