"""
Logging configuration for the calculator.

stdout belongs to calculator output, so every handler installed here writes
to stderr or to the configured log file. Records may carry an ``extra_data``
dict (input line number, error type, token position); both formatters
render it.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, get_settings


def _extra_data(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_data", None) or {}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Context goes under its own key so it never shadows the fields above
        context = _extra_data(record)
        if context:
            log_data["context"] = context

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Readable single-line records with context appended as key=value pairs"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = _extra_data(record)
        if context:
            text += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"
        return text


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Install handlers on the root logger according to settings"""
    settings = settings or get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    formatter = StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger bound to a fixed context, e.g. the input stream a session reads.

    Calls accept an ``extra_data`` keyword; it is merged over the bound
    context and attached to the record as ``record.extra_data``.
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = dict(kwargs.get("extra") or {})
        extra["extra_data"] = {**self.extra, **kwargs.pop("extra_data", {})}
        kwargs["extra"] = extra
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get logger with permanent context"""
    return ContextLogger(get_logger(name), context)
