"""Error Handlers — map warehouse failures to the JSON error envelope.

Invariants:
    - Every error response has the shape {"error": {code, message, category, severity, ...}}
    - WarehouseError keeps its own http_status: 400 entity rules, 404 unknown ids,
      409 placement conflicts, 503 database
    - Placement conflicts and lookups log the box/pallet ids from the error context
    - Unhandled exceptions answer 500 without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from warehouse.core.errors import ErrorCategory, ErrorSeverity, WarehouseError

logger = logging.getLogger(__name__)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_warehouse_error(request: Request, exc: WarehouseError) -> JSONResponse:
    ctx = exc.context
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level, f"{request.method} {request.url.path} -> {exc.http_status} {exc.code}",
        extra={
            "error_code": exc.code, "path": request.url.path,
            "box_id": ctx.box_id, "pallet_id": ctx.pallet_id,
            "operation": ctx.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request body on {request.url.path}: {len(details)} field error(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc, extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


_HANDLERS = (
    (WarehouseError, handle_warehouse_error),
    (RequestValidationError, handle_request_validation),
    (Exception, handle_unexpected),
)


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)
