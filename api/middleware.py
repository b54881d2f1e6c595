"""
Global middleware and error handlers.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.errors import ForumError, InternalError, InvalidInput

logger = logging.getLogger(__name__)


def _error_response(exc: ForumError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_middleware(app: FastAPI) -> None:
    """Attach request timing and the catch-all for unexpected failures."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = _error_response(InternalError())
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %d in %.3fs", request.method, request.url.path, response.status_code, elapsed)
        return response


def register_exception_handlers(app: FastAPI) -> None:
    """Render forum errors as ``{"error": message}`` with their own status."""

    @app.exception_handler(ForumError)
    async def forum_error_handler(request: Request, exc: ForumError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
        return _error_response(InvalidInput("Invalid request body"))
