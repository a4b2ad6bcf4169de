from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from . import config

LOGGER = logging.getLogger("iptreport")
_LOGGER_INITIALISED = False
_CURRENT_LOG_FILE: Optional[Path] = config.LOG_FILE


def configure_logger(log_path: Optional[Path] = None) -> None:
    """Configure the shared application logger.

    Log lines always go to stderr; ``log_path`` adds a file handler as well.
    """

    global _LOGGER_INITIALISED, _CURRENT_LOG_FILE

    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
        try:
            handler.close()
        except Exception:  # noqa: BLE001
            continue

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    LOGGER.addHandler(stream_handler)

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        LOGGER.addHandler(file_handler)

    LOGGER.setLevel(logging.INFO)
    LOGGER.propagate = False

    _CURRENT_LOG_FILE = log_path
    _LOGGER_INITIALISED = True


def _ensure_logger() -> None:
    """Initialise the logger lazily using the configured log file."""

    if _LOGGER_INITIALISED:
        return
    configure_logger(config.LOG_FILE)


def get_current_log_path() -> Optional[Path]:
    """Return the log file currently receiving log lines, if any."""

    _ensure_logger()
    return _CURRENT_LOG_FILE


def log_line(message: str) -> None:
    """Write a timestamped log line to stderr and the active log file."""

    _ensure_logger()
    LOGGER.info(message)
