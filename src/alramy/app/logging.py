"""JSON logging configuration with request tracing."""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from alramy.app.config import get_settings

# Context variable for request tracing (set by LoggingMiddleware)
trace_id_ctx: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Get current trace_id from context."""
    return trace_id_ctx.get()


def set_trace_id(trace_id: str | None = None) -> str:
    """Set trace_id in context, generating one if not provided.

    Args:
        trace_id: Optional trace ID to set. If None, generates a new UUID.

    Returns:
        The trace ID that was set.
    """
    tid = trace_id or str(uuid4())
    trace_id_ctx.set(tid)
    return tid


def clear_trace_context() -> None:
    """Clear trace context (call at end of request)."""
    trace_id_ctx.set(None)


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with schema version and trace context.

    Adds the following standard fields to all logs:
    - timestamp: ISO 8601 format with timezone
    - level: Log level name
    - logger: Logger name
    - schema_version: Log schema version
    - service: Service name
    - trace_id: Request trace ID (if set in context)
    """

    def __init__(self, *args: Any, service: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        settings = get_settings()
        self._schema_version = settings.logging.schema_version
        self._service = service or settings.logging.service_name

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        log_record["schema_version"] = self._schema_version
        log_record["service"] = self._service

        if trace_id := get_trace_id():
            log_record["trace_id"] = trace_id

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        log_record.pop("color_message", None)


def setup_logging(level: int | None = None, service: str | None = None) -> None:
    """Configure JSON logging for the application.

    Args:
        level: Log level. If None, uses LOGGING_LEVEL from settings.
        service: Service name stamped on every record.
    """
    settings = get_settings()

    if level is None:
        level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter(service=service))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # LoggingMiddleware provides structured request logging
    logging.getLogger("uvicorn.access").disabled = True
    logging.getLogger("httpx").setLevel(logging.WARNING)
