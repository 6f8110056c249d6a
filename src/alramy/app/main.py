"""FastAPI application entry points.

Two shells share the same wiring:
- webapp: public blog site (uvicorn alramy.app.main:webapp)
- admin:  admin dashboard  (uvicorn alramy.app.main:admin)
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from alramy import __version__
from alramy.app.config import get_settings
from alramy.app.logging import setup_logging
from alramy.app.middleware import LoggingMiddleware
from alramy.core.errors import AlRamyError, InternalError, SchemaValidationError
from alramy.core.logging_schema import LogEvent
from alramy.core.validation import to_issues

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


class Site(str, Enum):
    WEBAPP = "webapp"
    ADMIN = "admin"


def _metadata(site: Site) -> tuple[str, str]:
    name = get_settings().site.name
    if site is Site.ADMIN:
        return f"{name} - Admin Dashboard", f"Admin dashboard for {name}"
    return name, "A modern blog platform"


def _error_response(exc: AlRamyError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().to_wire(),
    )


def create_app(site: Site) -> FastAPI:
    """Build the ASGI app for a site."""
    title, description = _metadata(site)
    site_dir = STATIC_DIR / site.value

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        setup_logging(service=f"alramy-{site.value}")
        logger.info(
            "Application started",
            extra={
                "event": LogEvent.APP_STARTED,
                "site": site.value,
                "version": __version__,
            },
        )
        yield
        logger.info(
            "Application stopped",
            extra={"event": LogEvent.APP_STOPPED, "site": site.value},
        )

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(AlRamyError)
    async def alramy_error_handler(_request: Request, exc: AlRamyError) -> JSONResponse:
        """Handle AlRamyError exceptions and return the ApiError envelope."""
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report framework-level request validation as VALIDATION_FAILED."""
        return _error_response(
            SchemaValidationError(to_issues(exc.errors()), schema="request")
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions and return standardized error responses."""
        logger.exception("Unexpected error: %s", exc)
        response = _error_response(InternalError())
        trace_id = getattr(request.state, "trace_id", None)
        if trace_id:
            response.headers["X-Trace-ID"] = trace_id
        return response

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {"status": "ok"}

    app.mount("/static", StaticFiles(directory=site_dir), name="static")

    @app.get("/")
    async def index() -> FileResponse:
        """Serve the site shell."""
        return FileResponse(site_dir / "index.html")

    return app


webapp = create_app(Site.WEBAPP)
admin = create_app(Site.ADMIN)
