"""SearchFields logging utilities.

Library code logs through ``log`` only and never installs handlers:

- DEBUG: wire records and encode-time values that were dropped as unknown,
  fields without a ``values`` array.
- WARNING: geo-like native values stored as strings, string records with an
  unknown ``stringFormat``.
- ERROR: CLI failures and value count violations reported by ``check``.

The CLI calls ``configure_logging`` once per command. Console output goes to
stderr so that ``normalize`` can print its JSON document on stdout.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("SearchFields")
# Silent until the application configures it.
log.addHandler(logging.NullHandler())


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Route the package logger to stderr and, optionally, a per-command file.

    Replaces any handlers a previous call installed, closing old log files.
    Lines read ``mm-dd HH:MM:SS [LVL] message`` with LVL one of
    DEBG/INFO/WARN/ERRO.

    Args:
        level: Console level from ``log.level`` (e.g., INFO, DEBUG).
        action: CLI command name (``normalize`` or ``check``); names the log file.
        log_to_file: ``log.to_file``; file logs always include DEBUG records.
        log_dir: ``log.dir``; files go to ``<log_dir>/<action>/``.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(
        fmt="%(asctime)s [%(levelabbr)s] %(message)s",
        datefmt="%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]
    if log_to_file and action:
        handlers.append(_file_handler(Path(log_dir or "log"), action, formatter))

    for handler in list(log.handlers):
        log.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False


def _file_handler(log_dir: Path, action: str, formatter: logging.Formatter) -> logging.FileHandler:
    action_dir = log_dir / action
    action_dir.mkdir(parents=True, exist_ok=True)
    log_path = action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler
