"""Logging pipeline for outline diagnostics.

Render paths log at DEBUG through ``logging.getLogger(__name__)`` loggers
under ``pixelhitbox``; tools install handlers with ``configure_logging``.
When a log file is configured, records travel through a queue and a
listener thread does the console and file writes, so drawing never blocks
on disk.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from pixelhitbox.api.logging import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FORMATS: tuple[str, ...] = ("text", "json")

# Attributes of a bare record, plus the ones formatters attach while formatting.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}

_LISTENER: QueueListener | None = None


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the ``extra=`` fields attached to ``record``."""
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields go under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def make_formatter(kind: str) -> logging.Formatter:
    name = kind.strip().lower()
    if name == "json":
        return JsonFormatter()
    if name == "text":
        return logging.Formatter(TEXT_FORMAT)
    raise ValueError(f"unknown log format {kind!r}, expected one of {LOG_FORMATS}")


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root handlers with a console handler and an optional file.

    A configured file switches the root logger to a ``QueueHandler``; call
    ``shutdown_logging`` before exit to flush it.
    """
    global _LISTENER

    shutdown_logging()
    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.getLevelNamesMapping().get(config.level_name.strip().upper(), logging.INFO))

    if config.file_path is None:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _LISTENER.start()


def shutdown_logging() -> None:
    """Drain the queue, close the file and detach the queue handler."""
    global _LISTENER

    if _LISTENER is None:
        return
    listener, _LISTENER = _LISTENER, None
    listener.stop()
    for handler in listener.handlers:
        handler.close()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, QueueHandler):
            root.removeHandler(handler)


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(make_formatter(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path is not None:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(make_formatter(config.file_format))
        handlers.append(file_handler)
    return handlers
