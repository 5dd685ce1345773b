"""
Structured logging configuration.

The library only emits records; ``setup_logging`` is for applications and
test sessions that want numtower's records formatted and routed.
"""

import sys
import logging
from typing import Any, Dict
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Decimals and other numbers are rendered with str()
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            pairs = " ".join(f"{key}={value}" for key, value in extra_data.items())
            message = f"{message} [{pairs}]"
        return message


def setup_logging() -> None:
    """Configure the ``numtower`` logger from settings"""
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers = [console_handler]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    logger = logging.getLogger("numtower")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger with permanent structured context"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Merge permanent context and per-call ``extra_data``"""
        extra_data = kwargs.pop("extra_data", {})

        if "extra" not in kwargs:
            kwargs["extra"] = {}

        kwargs["extra"]["extra_data"] = {
            **self.extra,
            **extra_data
        }

        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    logger = get_logger(name)
    return LoggerAdapter(logger, context)


# Usage:
# logger = get_context_logger(__name__, scale=10, rounding_mode="HALF_UP")
# logger.debug("Heron iteration converged", extra_data={"iterations": 5})
