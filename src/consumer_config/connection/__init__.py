"""Connection parameter helpers."""

from .connection_parameters import build_connection_parameters

__all__ = ["build_connection_parameters"]
