"""Request logging middleware.

Logs one line per request: ``METHOD path -> status (duration ms)``.

Usage::

    from backend.middleware import RequestLoggingMiddleware

    app.add_middleware(RequestLoggingMiddleware)
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Paths polled by load balancers; logged at DEBUG only
QUIET_PATHS: set[str] = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs method, path, status and latency of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"{request.method} {request.url.path} -> unhandled error ({elapsed_ms:.0f} ms)"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        if response.status_code >= 500:
            level = logging.ERROR
        logger.log(
            level,
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f} ms)",
        )
        return response
