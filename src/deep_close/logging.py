"""Structured logging configuration for deep-close."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import IO, Any

# Record attributes copied into the JSON payload when a caller passes them via ``extra``.
COMPARISON_FIELDS: tuple[str, ...] = ("reason", "path", "mismatch_kind", "precision", "strict")


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in COMPARISON_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=str)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    msg = f"Unsupported log level: {level}"
    raise ValueError(msg)


def configure_logging(
    *,
    log_level: str | int = "WARNING",
    log_file: str | Path | None = None,
    stream: IO[str] | None = None,
    console: bool = True,
) -> logging.Logger:
    """Route the ``deep_close`` loggers to JSON console and/or file handlers.

    The console handler writes to ``stream`` (stderr when omitted) so that
    command output on stdout stays machine-readable.
    """

    logger = logging.getLogger("deep_close")
    logger.setLevel(_resolve_level(log_level))
    logger.handlers.clear()
    logger.propagate = False

    formatter = JsonFormatter()

    if console:
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
