"""Filesystem implementation of the configuration reader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from consumer_config.contracts import IConfigReader
from consumer_config.errors import ConfigFileError, PathResolutionError


class ConfigFileReader(IConfigReader):
    """Reads UTF-8 configuration files, resolving relative paths against the cwd."""

    def __init__(self, encoding: str = "utf-8-sig", logger: Optional[logging.Logger] = None) -> None:
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, location: Union[str, Path]) -> Path:
        path = Path(location)
        if path.is_absolute():
            return path

        try:
            resolved = Path(os.path.abspath(path))
        except OSError as exc:
            raise PathResolutionError(
                f"Cannot resolve configuration path {str(location)!r}: {exc}"
            ) from exc

        self.logger.debug("Resolved configuration path %s to %s", location, resolved)
        return resolved

    def read(self, location: Union[str, Path]) -> str:
        path = self.resolve(location)
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise ConfigFileError(f"Configuration file {path} is not valid {self.encoding}.") from exc
        except OSError as exc:
            raise ConfigFileError(
                exc.errno, f"Cannot read configuration file: {exc.strerror}", str(path)
            ) from exc
