"""Configuration readers."""

from .config_file_reader import ConfigFileReader

__all__ = ["ConfigFileReader"]
