"""Consumer configuration model and its default-resolution rules."""

from .amqp_url import build_amqp_url
from .consumer_config import ConsumerConfig
from .defaults import (
    DEFAULT_EXCHANGE_TYPE,
    DEFAULT_PREFETCH_COUNT,
    EMPTY_SENTINEL,
    resolve_exchange_type,
    resolve_prefetch_count,
    translate_sentinel,
    wrap_int32,
)
from .sections import (
    ExchangeSettings,
    LogSettings,
    PrefetchSettings,
    QueueSettings,
    RabbitMqSettings,
)

__all__ = [
    "ConsumerConfig",
    "RabbitMqSettings",
    "PrefetchSettings",
    "QueueSettings",
    "ExchangeSettings",
    "LogSettings",
    "build_amqp_url",
    "resolve_exchange_type",
    "resolve_prefetch_count",
    "translate_sentinel",
    "wrap_int32",
    "DEFAULT_EXCHANGE_TYPE",
    "DEFAULT_PREFETCH_COUNT",
    "EMPTY_SENTINEL",
]
