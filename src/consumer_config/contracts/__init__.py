"""Contract interfaces for configuration loading."""

from .config_decoder_interface import IConfigDecoder
from .config_reader_interface import IConfigReader

__all__ = [
    "IConfigDecoder",
    "IConfigReader",
]
