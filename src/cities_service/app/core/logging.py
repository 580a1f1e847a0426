from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception

from .env import pick

# LogRecord attributes set through `extra=` that we surface in JSON output.
_CONTEXT_FIELDS = ("store", "http_method", "path", "status_code")


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter for prod logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }

        for field in _CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info:
            exc_type = record.exc_info[0].__name__ if record.exc_info[0] else None
            stack = "".join(format_exception(*record.exc_info))
            max_stack = int(os.getenv("LOG_STACK_LIMIT", "4000"))
            payload["error"] = {
                "type": exc_type,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "stack": stack[:max_stack] + ("...(truncated)" if len(stack) > max_stack else ""),
            }

        return json.dumps(payload, ensure_ascii=False, default=str)


def _read_level() -> str:
    explicit = os.getenv("LOG_LEVEL")
    if explicit:
        return explicit.upper()
    return pick(prod="INFO", nonprod="DEBUG")


def _read_format() -> str:
    fmt = os.getenv("LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return pick(prod="json", nonprod="plain")


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    level = (level or _read_level()).upper()
    fmt = (fmt or _read_format()).lower()

    formatter_name = "json" if fmt == "json" else "plain"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,  # keep uvicorn & friends
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s [pid:%(process)d] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter_name,
                }
            },
            "root": {
                "level": level,
                "handlers": ["stream"],
            },
            # uvicorn logs bubble up to the root handler; the driver loggers stay quiet.
            "loggers": {
                "uvicorn": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.error": {"level": "INFO", "handlers": [], "propagate": True},
                "uvicorn.access": {"level": "INFO", "handlers": [], "propagate": True},
                "sqlalchemy.engine": {"level": "WARNING", "propagate": True},
                "pymongo": {"level": "WARNING", "propagate": True},
            },
        }
    )
