"""Logging field schema - v1.0

Standard fields (added to all logs):
- schema_version: Log schema version
- service: Service name (alramy-webapp, alramy-admin)
- event: Event type (session_created, validation_failed, etc.)
- trace_id: Request trace ID (X-Trace-ID header)
- duration_ms: Duration in milliseconds

High cardinality fields (OK in logs, NOT in metric labels):
- user_id: User ID
- trace_id: Trace ID
"""

from enum import StrEnum


class LogEvent(StrEnum):
    """Standard log event types.

    Use these event types in the 'event' extra field for consistent
    log filtering and analysis.
    """

    # Lifecycle events
    APP_STARTED = "app_started"
    APP_STOPPED = "app_stopped"

    # API events
    REQUEST_COMPLETE = "request_complete"
    REQUEST_FAILED = "request_failed"
    REQUEST_SLOW = "request_slow"

    # Domain events
    VALIDATION_FAILED = "validation_failed"
    SESSION_CREATED = "session_created"
