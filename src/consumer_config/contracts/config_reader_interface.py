"""Defines the contract for reading raw configuration text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class IConfigReader(ABC):
    """Reads configuration text from a location on disk."""

    @abstractmethod
    def resolve(self, location: Union[str, Path]) -> Path:
        """Return the absolute path that ``location`` refers to."""

    @abstractmethod
    def read(self, location: Union[str, Path]) -> str:
        """Return the text stored at ``location``."""
