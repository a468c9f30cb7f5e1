"""Top-level error boundary: every error leaves the API as {"message": ...}."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gymdesk.core.config import settings

log = logging.getLogger("gymdesk.errors")

GENERIC_ERROR = "Internal Server Error"


def _field_path(loc) -> str:
    # ("body", "phone") -> "phone"; ("query", "days") -> "days"
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts)


def format_validation_errors(errors) -> str:
    messages = []
    for err in errors:
        path = _field_path(err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        messages.append(f"{path}: {msg}" if path else msg)
    return "; ".join(messages) or "Validation error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse({"message": message}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"message": format_validation_errors(exc.errors())},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    log.exception("unhandled error on %s %s", request.method, request.url.path)
    code = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if not isinstance(code, int) or not 400 <= code < 600:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = GENERIC_ERROR if settings.is_production else (str(exc) or GENERIC_ERROR)
    return JSONResponse({"message": message}, status_code=code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
