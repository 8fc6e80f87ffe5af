"""Error handlers: map exceptions to structured JSON responses.

Invariants:
    - ValidationError / RequestValidationError → 400
    - EntityNotFoundError → 404
    - StoreError → 500, without driver details
    - Exception (catch-all) → 500, never leaks internal details
    - Every body has the shape {"error": {code, message, category, timestamp}}
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    EntityNotFoundError, StoreError, ValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_error_handler,
    )
    app.add_exception_handler(Exception, generic_error_handler)


def error_body(
    code: str, message: str, category: str, **extra: Any,
) -> dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **extra,
        },
    }


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(
        f"Validation error on {request.url.path}: {exc}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", str(exc), "validation"),
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError):
    logger.warning(
        f"Not found on {request.url.path}: {exc}",
        extra={"error_code": "RESOURCE_NOT_FOUND", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(
            "RESOURCE_NOT_FOUND", str(exc), "resource_not_found",
            entity=exc.entity, entity_id=exc.entity_id,
        ),
    )


async def store_error_handler(request: Request, exc: StoreError):
    logger.error(
        f"StoreError on {request.url.path}: {exc}",
        extra={"error_code": "DATABASE_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "DATABASE_ERROR", "The data store is unavailable", "database",
        ),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "VALIDATION_ERROR", "Invalid request data", "validation",
            details=[
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        ),
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all: never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "INTERNAL_ERROR", "An unexpected error occurred", "internal",
        ),
    )
