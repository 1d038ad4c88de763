"""Attaches file handlers for the log paths named in the ``[Logs]`` section."""

from __future__ import annotations

import logging
from typing import List, Optional

from consumer_config.errors import ConfigFileError
from consumer_config.settings import LogSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_log_files(
    logs: LogSettings, logger: Optional[logging.Logger] = None
) -> List[logging.Handler]:
    """Append INFO records to ``logs.info`` and ERROR records to ``logs.error``.

    Paths left empty are skipped. Returns the handlers that were attached so the
    caller can remove and close them.
    """
    target = logger or logging.getLogger()
    handlers: List[logging.Handler] = []
    for path, level in ((logs.info, logging.INFO), (logs.error, logging.ERROR)):
        if not path:
            continue
        try:
            handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError as exc:
            for attached in handlers:
                target.removeHandler(attached)
                attached.close()
            raise ConfigFileError(exc.errno, f"Cannot open log file: {exc.strerror}", path) from exc
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        target.addHandler(handler)
        handlers.append(handler)
    return handlers
