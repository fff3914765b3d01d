"""
Error normalization for the HTTP layer.

Every failure leaves the service as an ``ErrorResponse`` JSON body. Input
validation problems become 400 "Validation failed"; anything else becomes
500 "Internal server error" carrying the fault's own message.
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
INTERNAL_SERVER_ERROR = "Internal server error"


def format_field_errors(errors: Mapping[str, str]) -> str:
    """Render a field -> reason mapping as ``{field=reason, other=reason}``."""
    return "{" + ", ".join(f"{name}={reason}" for name, reason in errors.items()) + "}"


def _error_json(payload: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=payload.status, content=payload.model_dump(mode="json"))


def validation_error_response(errors: Mapping[str, str]) -> JSONResponse:
    """Build the 400 response for one or more field violations."""
    logger.info("Rejected request: %s", dict(errors))
    return _error_json(
        ErrorResponse(
            error=VALIDATION_FAILED,
            message=format_field_errors(errors),
            status=400,
        )
    )


def internal_error_response(exc: BaseException) -> JSONResponse:
    """Build the 500 response, forwarding the fault text verbatim."""
    message: Optional[str] = str(exc) or None
    return _error_json(
        ErrorResponse(
            error=INTERNAL_SERVER_ERROR,
            message=message,
            status=500,
        )
    )


def request_validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Collapse framework parse errors into a field -> reason mapping."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("body",)
        errors.setdefault(str(loc[-1]), error.get("msg", "Invalid value"))
    return errors


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return validation_error_response(request_validation_errors(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return internal_error_response(exc)


async def catch_unhandled_faults(request: Request, call_next):
    """Turn faults into 500 payloads inside the middleware stack, under CORS."""
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the error normalizer on ``app``.

    Must run before CORS and other middleware are added so the fault
    middleware sits innermost and its 500 responses pass through them.
    The plain ``Exception`` handler stays as a last resort for faults
    raised by outer middleware.
    """
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.middleware("http")(catch_unhandled_faults)
