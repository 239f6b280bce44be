"""Error Handlers — every failure leaves the API in the BirthdayError envelope.

Invariants:
    - BirthdayError → its own http_status and to_response() body
    - RequestValidationError → 400 ProfileValidationError envelope plus per-field
      details, field names relative to the request body ("birthday", not "body.birthday")
    - Anything else → 500 with the generic user message; internals only in the log
    - Log level follows severity: client-side failures at INFO, storage/internal at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from birthday.core.errors import (
    BirthdayError, ErrorCategory, ErrorContext, ErrorSeverity, ProfileValidationError,
)
from birthday.core.user_messages import UNKNOWN_ERROR_MESSAGE

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BirthdayError, _birthday_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def _render(exc: BirthdayError, path: str, **body_extra) -> JSONResponse:
    log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.info
    log(
        f"{exc.code} on {path}: {exc.message}",
        extra={"error_code": exc.code, "path": path},
    )
    body = exc.to_response()
    body["error"].update(body_extra)
    return JSONResponse(status_code=exc.http_status, content=body)


async def _birthday_error_handler(request: Request, exc: BirthdayError):
    return _render(exc, request.url.path)


def _field_path(loc: tuple) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts)


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {"field": _field_path(e["loc"]), "message": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]
    error = ProfileValidationError(
        INVALID_REQUEST_MESSAGE, details[0]["field"] if details else None,
    )
    return _render(error, request.url.path, details=details)


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    error = BirthdayError(
        f"Unhandled {type(exc).__name__}", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
        ErrorSeverity.CRITICAL, ErrorContext(user_message=UNKNOWN_ERROR_MESSAGE), 500,
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())
