"""Error Handlers: the dispatcher that turns raised failures into error envelopes.

Invariants:
    - HTTPError -> its own status, {status, errors: [{status, title, details?}]}
    - RequestValidationError -> 400 error envelope with field-level details
    - Exception (catch-all) -> 500 error envelope, never leaks internal details
    - 4xx logged at WARNING, 5xx at ERROR

Design Decisions:
    - Three-layer handler: domain (HTTPError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py to keep the app module small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from code_annotation.api.rendering import render_errors
from code_annotation.core.errors import HTTPError, bad_request, internal

logger = logging.getLogger(__name__)

GENERIC_INTERNAL_TITLE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HTTPError)
    async def http_error_handler(request: Request, exc: HTTPError):
        """Render a typed failure raised by a handler."""
        log = logger.error if exc.status_code() >= 500 else logger.warning
        log(
            f"HTTPError: {exc}",
            extra={
                "error_status": exc.status_code(),
                "path": request.url.path,
                "method": request.method,
            },
        )
        return render_errors(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors raised by FastAPI itself."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = bad_request("Invalid request data")
        error.details = _describe_validation_errors(exc)
        return render_errors(error)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "path": request.url.path,
            },
        )
        return render_errors(internal(GENERIC_INTERNAL_TITLE))


def _describe_validation_errors(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
