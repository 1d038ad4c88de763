"""Typed sections of a consumer configuration file."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RabbitMqSettings:
    """Connection options from the ``[RabbitMq]`` section.

    ``amqp_url`` takes precedence over the discrete fields when it is set.
    """

    amqp_url: str = field(default="", repr=False)
    host: str = ""
    username: str = ""
    password: str = field(default="", repr=False)
    port: str = ""
    vhost: str = ""
    queue: str = ""
    compression: bool = False
    on_failure: int = 0


@dataclass(frozen=True)
class PrefetchSettings:
    """QoS options from the ``[Prefetch]`` section."""

    count: int = 0
    global_: bool = False


@dataclass(frozen=True)
class QueueSettings:
    """Queue arguments from the ``[QueueSettings]`` section.

    ``None`` marks an unset value and ``""`` one configured as ``<empty>``.
    """

    routing_key: Optional[str] = None
    message_ttl: int = 0
    dead_letter_exchange: Optional[str] = None
    dead_letter_routing_key: Optional[str] = None


@dataclass(frozen=True)
class ExchangeSettings:
    """Exchange declaration options from the ``[Exchange]`` section."""

    name: Optional[str] = None
    auto_delete: bool = False
    type: str = ""
    durable: bool = False


@dataclass(frozen=True)
class LogSettings:
    error: str = ""
    info: str = ""
