"""
Request logging middleware.

Logs all incoming HTTP requests with timing information.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests with timing information.

    Logs method, path, caller identity, response status and duration.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        caller_header: str = "x-caller-id",
        skip_paths: set[str] | None = None,
    ) -> None:
        super().__init__(app)
        self._caller_header = caller_header
        self._skip_paths = skip_paths or {"/health"}

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in self._skip_paths:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        caller = request.headers.get(self._caller_header, "anonymous")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "Request failed",
                extra={
                    "event": "request_failed",
                    "method": method,
                    "path": path,
                    "caller": caller,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"{method} {path} -> {response.status_code}",
            extra={
                "event": "request_completed",
                "method": method,
                "path": path,
                "caller": caller,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        return response
