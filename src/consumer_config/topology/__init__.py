"""Queue topology derived from consumer configuration."""

from .queue_topology import (
    DEAD_LETTER_EXCHANGE_ARGUMENT,
    DEAD_LETTER_ROUTING_KEY_ARGUMENT,
    MESSAGE_TTL_ARGUMENT,
    QueueTopology,
    queue_arguments,
)

__all__ = [
    "QueueTopology",
    "queue_arguments",
    "MESSAGE_TTL_ARGUMENT",
    "DEAD_LETTER_EXCHANGE_ARGUMENT",
    "DEAD_LETTER_ROUTING_KEY_ARGUMENT",
]
