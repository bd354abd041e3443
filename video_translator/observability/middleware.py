"""
Request context middleware.

Binds the caller's X-Correlation-ID (or a fresh one) for the request,
logs the request outcome with its duration and echoes the id back.

Dependencies: starlette
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from video_translator.observability.correlation import correlation_scope

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        method, path = request.method, request.url.path
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                logger.exception(
                    f"{method} {path} - unhandled {type(e).__name__}",
                    extra={"method": method, "path": path, "duration_ms": _elapsed_ms(started)},
                )
                raise
            logger.info(
                f"{method} {path} - {response.status_code}",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": _elapsed_ms(started),
                },
            )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
