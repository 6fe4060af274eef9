"""ScreenDeck logging setup.

Log lines go to stderr so command output on stdout (dashboard text, JSON,
navigation intents) can be piped untouched. Each CLI action may also mirror
its log to ``<log_dir>/screendeck-<action>-<YYYYmmdd-HHMMSS>.log``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final

LOGGER_NAME: Final[str] = "ScreenDeck"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelabbr)s %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "D",
    logging.INFO: "I",
    logging.WARNING: "W",
    logging.ERROR: "E",
    logging.CRITICAL: "E",
}


class _ShortLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib method name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:1])
        return super().format(record)


log = logging.getLogger(LOGGER_NAME)


def log_file_path(log_dir: str, action: str, *, now: datetime | None = None) -> Path:
    """Return the log file path for one CLI action run."""
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return Path(log_dir or "log") / f"screendeck-{action}-{stamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = True,
    log_dir: str = "log",
) -> Path | None:
    """Configure the ScreenDeck logger for one CLI action.

    Args:
        level: Level for stderr output (e.g., INFO, DEBUG).
        action: CLI action name; required for a log file.
        log_to_file: Whether to mirror logs, at DEBUG, to a file.
        log_dir: Directory for log files.

    Returns:
        Path of the log file, or None when no file is written.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _ShortLevelFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(resolved_level)
    stderr_handler.setFormatter(formatter)

    log.handlers.clear()
    log.addHandler(stderr_handler)

    path: Path | None = None
    if log_to_file and action:
        path = log_file_path(log_dir, action)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False
    return path
