# yt_transcript/logging_core/logger.py
"""
Centralized structured logging for the transcript fetcher.

Every record is emitted as one JSON line with the fields:
- timestamp (ISO, UTC)
- level
- message
- run_id
- stage_name (optional, filled by caller)
- event_type (pipeline_start/start/success/failure/fallback/...)
- metadata (dict)

The library only attaches a NullHandler. Hosts (the CLI included) call
configure_logging() to get JSON lines on a stream.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, MutableMapping, Optional, TextIO, Tuple
from uuid import UUID

from logging import Logger

ROOT_LOGGER_NAME = "yt_transcript"


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).replace(microsecond=0, tzinfo=None).isoformat() + "Z",
            "level": record.levelname,
            "message": record.getMessage(),
        }

        if hasattr(record, "run_id"):
            log_record["run_id"] = str(record.run_id)

        for field in ("stage_name", "event_type", "metadata"):
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class RunLoggerAdapter(logging.LoggerAdapter):
    """Binds run_id to every record while keeping caller-supplied extra fields."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> Logger:
    """
    Attach a JSON-lines handler to the package logger.

    Idempotent: calling it again only adjusts the level and stream.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and isinstance(handler.formatter, JSONFormatter):
            handler.setStream(stream or sys.stderr)
            return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(run_id: UUID) -> RunLoggerAdapter:
    """
    Return a logger bound to the given fetch run.

    Nothing is cached per run; each call builds a fresh adapter.
    """
    return RunLoggerAdapter(logging.getLogger(f"{ROOT_LOGGER_NAME}.fetcher"), {"run_id": str(run_id)})


def log_event(
    logger: logging.LoggerAdapter,
    level: int,
    message: str,
    *,
    stage_name: str | None = None,
    event_type: str,
    metadata: Dict[str, Any] | None = None,
) -> None:
    """
    Convenience wrapper for structured logging.

    Use this inside stages and the runner for consistency.
    """
    extra: Dict[str, Any] = {"event_type": event_type}
    if stage_name:
        extra["stage_name"] = stage_name
    if metadata:
        extra["metadata"] = metadata

    logger.log(level, message, extra=extra)


# High-Level Intent
# logging_core/logger.py is the single logging facility for the fetcher.
# Stages and the runner never call logger.info() with free-form strings only;
# they go through log_event() so every line carries run_id, stage_name,
# event_type and metadata.

# Data Flow
# runner.run_fetch() → get_logger(run_id) → passed to each stage via get_logger(run_id)
# → log_event(...) → RunLoggerAdapter merges run_id → JSONFormatter → stream

# Edge Cases & Failure Scenarios
# No host configuration → records reach the NullHandler and vanish.
# configure_logging() called twice → one handler, stream swapped.
# Metadata containing non-JSON values → serialized with str().
