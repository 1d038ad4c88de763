"""Defines the contract for decoding configuration text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from consumer_config.settings import ConsumerConfig


class IConfigDecoder(ABC):
    """Decodes raw configuration text into a consumer configuration."""

    @abstractmethod
    def decode(self, text: str) -> ConsumerConfig:
        """Convert configuration text into a ``ConsumerConfig``."""
