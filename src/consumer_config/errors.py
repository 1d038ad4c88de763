"""Errors raised while loading a consumer configuration."""

from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base class for configuration loading failures."""


class PathResolutionError(ConfigError):
    """Raised when a configuration path cannot be made absolute."""


class ConfigFileError(ConfigError, OSError):
    """Raised when a configuration (or log) file cannot be opened or read."""


class ParseError(ConfigError, ValueError):
    """Raised when configuration text is malformed or holds an invalid value."""

    def __init__(
        self,
        message: str,
        *,
        section: Optional[str] = None,
        key: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.section = section
        self.key = key
        self.line = line
