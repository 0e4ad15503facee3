"""Fallback error handling installed on both FastAPI apps."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_TITLE = "An unexpected error occurred."
VALIDATION_ERROR_TITLE = "Validation failed"
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def problem(status: int, title: str, detail: str, **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {"status": status, "title": title, "detail": detail}
    payload.update(extra)
    return payload


class GlobalExceptionMiddleware(BaseHTTPMiddleware):
    """Turn any exception that escaped the routers into a 500 problem response.

    The raw exception message is returned in ``detail``.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled exception while processing %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content=problem(500, UNEXPECTED_ERROR_TITLE, str(exc)))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        field = ".".join(location) or "request"
        errors.setdefault(field, []).append(str(error.get("msg") or "Invalid value"))
    detail = "; ".join(f"{field}: {', '.join(messages)}" for field, messages in errors.items())
    logger.warning("Validation failed for %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content=problem(400, VALIDATION_ERROR_TITLE, detail, errors=errors))


def install_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_middleware(GlobalExceptionMiddleware)
