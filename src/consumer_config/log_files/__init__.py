"""Log file wiring for the ``[Logs]`` section."""

from .log_file_handlers import LOG_FORMAT, configure_log_files

__all__ = ["configure_log_files", "LOG_FORMAT"]
