"""Request logging middleware.

Provides canonical log line per request with trace ID propagation.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from alramy.app.config import get_settings
from alramy.app.logging import clear_trace_context, set_trace_id
from alramy.core.logging_schema import LogEvent

logger = logging.getLogger(__name__)

_SKIP_PATHS = ("/health", "/healthz", "/readyz")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging with trace ID propagation.

    - Sets trace_id from X-Trace-ID header or generates new one
    - Logs canonical request log line (one per request)
    - Warns when a request exceeds LOGGING_SLOW_THRESHOLD_MS
    - Adds X-Trace-ID header to response
    - Stores the trace id on request.state so the 500 handler can echo it

    Usage:
        app.add_middleware(LoggingMiddleware)
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        trace_id = set_trace_id(request.headers.get("x-trace-id"))
        request.state.trace_id = trace_id
        slow_threshold_ms = get_settings().logging.slow_threshold_ms

        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "Request failed",
                extra={
                    "event": LogEvent.REQUEST_FAILED,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": duration_ms,
                    "trace_id": trace_id,
                },
            )
            raise
        finally:
            clear_trace_context()

        duration_ms = (time.monotonic() - start) * 1000

        path = request.url.path
        if not path.startswith("/static/") and path not in _SKIP_PATHS:
            logger.info(
                "Request completed",
                extra={
                    "event": LogEvent.REQUEST_COMPLETE,
                    "method": request.method,
                    "path": path,
                    "status": response.status_code,
                    "duration_ms": duration_ms,
                    "trace_id": trace_id,
                },
            )

            if duration_ms > slow_threshold_ms:
                logger.warning(
                    "Slow request detected",
                    extra={
                        "event": LogEvent.REQUEST_SLOW,
                        "method": request.method,
                        "path": path,
                        "status": response.status_code,
                        "duration_ms": duration_ms,
                        "threshold_ms": slow_threshold_ms,
                        "trace_id": trace_id,
                    },
                )

        response.headers["X-Trace-ID"] = trace_id
        return response
