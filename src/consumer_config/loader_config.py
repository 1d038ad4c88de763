"""Configuration primitives for wiring a `ConsumerConfigLoader`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from consumer_config.contracts import IConfigDecoder, IConfigReader
from consumer_config.decoder import IniConfigDecoder
from consumer_config.reader import ConfigFileReader


@dataclass(frozen=True)
class ConfigLoaderDependencies:
    """Bundles factory functions for loader wiring."""

    make_reader: Callable[[], IConfigReader] = field(default=ConfigFileReader)
    make_decoder: Callable[[], IConfigDecoder] = field(default=IniConfigDecoder)
