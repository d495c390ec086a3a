"""Root logger configuration and a prefixing logger wrapper.

NOTE: ``flightwatch.logging`` shadows the stdlib ``logging`` package for
code inside this package, so the stdlib is imported as ``_logging`` here.
"""

from __future__ import annotations

import logging as _logging
import os
from logging.handlers import RotatingFileHandler
from typing import Any


_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE = "flightwatch.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | None = "logs",
    max_bytes: int = 2 * 1024 * 1024,  # 2 MB
    backup_count: int = 3,
) -> None:
    """Install console and rotating-file handlers on the root logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Level name, e.g. ``"DEBUG"``.  Unknown names fall back to INFO.
        log_dir: Directory for ``flightwatch.log``.  ``None`` disables the
            file handler (console only).
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept on disk.
    """
    level = getattr(_logging, log_level.upper(), _logging.INFO)

    root = _logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    formatter = _logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)

    console = _logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir is None:
        return

    os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, _LOG_FILE),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)


class ContextualLogger:
    """Prefix every message with ``[key=value]`` pairs.

    Usage::

        log = ContextualLogger(logging.getLogger(__name__), iata="BA117")
        log.info("Polling")  # => "[iata=BA117] Polling"
    """

    def __init__(self, logger: _logging.Logger, **context: Any) -> None:
        self._logger = logger
        self._prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def _fmt(self, msg: str) -> str:
        return f"{self._prefix} {msg}" if self._prefix else msg

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(self._fmt(msg), *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(self._fmt(msg), *args, **kwargs)
