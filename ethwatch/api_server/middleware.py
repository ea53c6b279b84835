"""
HTTP middleware: request logging and plain-text error responses.

Responsibilities:
- Log every request with method, path, status and timing.
- Render client errors (4xx) as plain text instead of FastAPI's JSON detail.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)

MSG_INVALID_METHOD = "Invalid request method"


def install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "http_request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Plain-text error body; 405 always reads 'Invalid request method'."""
    if exc.status_code == 405:
        message = MSG_INVALID_METHOD
    else:
        message = str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
