"""Configuration loading for RabbitMQ queue workers."""

from .connection import build_connection_parameters
from .errors import ConfigError, ConfigFileError, ParseError, PathResolutionError
from .loader import ConsumerConfigLoader, load_from_file, load_from_string
from .loader_config import ConfigLoaderDependencies
from .log_files import configure_log_files
from .settings import ConsumerConfig
from .topology import QueueTopology

__all__ = [
    "ConsumerConfig",
    "ConsumerConfigLoader",
    "ConfigLoaderDependencies",
    "load_from_file",
    "load_from_string",
    "QueueTopology",
    "build_connection_parameters",
    "configure_log_files",
    "ConfigError",
    "ConfigFileError",
    "ParseError",
    "PathResolutionError",
]
