"""Error Handlers — global exception handlers for the products API.

Invariants:
    - CatalogError → structured JSON with code, message, kind and its http_status
    - RequestValidationError → 400 with field-level error details
    - SQLAlchemyError → STORE_PASSTHROUGH envelope (500), driver message not exposed
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Four-layer handler: domain (CatalogError), validation (Pydantic), store, catch-all
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.core.errors import CatalogError, StorePassthroughError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_store_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog domain errors."""
        logger.warning(
            f"CatalogError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_kind": exc.kind.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_store_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        """Raw store failure that the service let through unchanged."""
        logger.error(
            f"Store error on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "STORE_ERROR", "path": request.url.path},
        )
        error = StorePassthroughError.from_exception(exc)
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "kind": "internal",
                    "status": 500,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "kind": "validation",
            "status": 400,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
