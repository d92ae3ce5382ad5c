# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logger for wordclass.

Every log entry is a single JSON line, timestamped, leveled, and tagged with
the source module. Diagnostics such as the vocabulary-size clamp go through
here, never through print().

How this works:
  - We use Python's standard `logging` module under the hood, but replace the
    default formatter with JsonFormatter, which serializes every log record
    into a single JSON line.
  - One handler always writes to stdout, a second one optionally to a file.
  - `get_logger` is the only way to create loggers. Library modules call it
    with just their name; the CLI calls `configure_logging` first so those
    loggers pick up the level and log file from the config.

The JSON structure looks like:
  {"ts": "2026-...", "level": "INFO", "module": "wordclass.builder.pipeline", "msg": "...", ...}
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JsonFormatter(logging.Formatter):
    """
    Formats log records as single-line JSON objects.

    Each log entry contains four mandatory fields:
      ts     — ISO 8601 UTC timestamp
      level  — log level name
      module — the logger name (usually the Python module path)
      msg    — the formatted message string

    Anything passed through `extra=` is merged into the JSON object. That is
    how the builder attaches counts, sizes and paths to its records.
    """

    _STANDARD_ATTRS = frozenset(
        {
            "name",
            "msg",
            "args",
            "created",
            "relativeCreated",
            "exc_info",
            "exc_text",
            "stack_info",
            "lineno",
            "funcName",
            "pathname",
            "filename",
            "module",
            "levelno",
            "levelname",
            "processName",
            "process",
            "threadName",
            "thread",
            "message",
            "msecs",
            "taskName",
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not key.startswith("_"):
                entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_defaults: dict[str, object] = {"log_level": "INFO", "log_file": None}


def _resolve_log_level(level_name: str) -> int:
    """Turn a level name string into the corresponding logging constant."""
    upper = level_name.upper()
    if upper not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
    return getattr(logging, upper)


def configure_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """
    Set the level and optional log file used by every later `get_logger` call
    that doesn't pass its own.

    Loggers that already exist are moved over too: they get the new level, and
    the ones built by `get_logger` swap their file handler for the new log
    file. The CLI creates its own logger before the config is loaded, so its
    later records land in the configured file as well.
    """
    level = _resolve_log_level(log_level)
    _defaults["log_level"] = log_level
    _defaults["log_file"] = log_file

    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if not name.startswith("wordclass") or not isinstance(existing, logging.Logger):
            continue
        existing.setLevel(level)
        if existing.handlers:
            _retarget_file_handler(existing, log_file)


def _add_file_handler(logger: logging.Logger, log_file: Path) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)


def _retarget_file_handler(logger: logging.Logger, log_file: Optional[Path]) -> None:
    """Make `log_file` the only file this logger writes to (none if it is None)."""
    target = os.path.abspath(log_file) if log_file is not None else None
    already_attached = False

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.FileHandler):
            continue
        if handler.baseFilename == target:
            already_attached = True
            continue
        logger.removeHandler(handler)
        handler.close()

    if log_file is not None and not already_attached:
        _add_file_handler(logger, log_file)


def get_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Create a structured JSON logger.

    Args:
        name: Logger name, typically __name__ of the calling module.
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL. Falls back to
                   the level set by `configure_logging`.
        log_file: Optional path to a log file. Falls back to the file set by
                  `configure_logging`. Logs go to both stdout and the file.

    Returns:
        A configured logging.Logger that outputs structured JSON.
    """
    if log_level is None:
        log_level = str(_defaults["log_level"])
    if log_file is None:
        log_file = _defaults["log_file"]  # type: ignore[assignment]

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_log_level(log_level))

    # Avoid stacking handlers if get_logger is called multiple times for the
    # same name.
    if logger.handlers:
        return logger

    formatter = JsonFormatter()

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    if log_file is not None:
        _add_file_handler(logger, log_file)

    # Don't propagate to root logger — we handle all output ourselves.
    logger.propagate = False

    return logger
