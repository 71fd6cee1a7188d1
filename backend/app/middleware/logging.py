"""
Noteful Backend — Request Logging Middleware
==============================================

What:  One access log line per HTTP request.
Why:   Gives operators traffic, latency and failure rates per route without
       reading application logs.
How:   Measures the time spent below this middleware and logs method, path,
       status, duration, request ID and client IP at a level chosen from the
       status code (5xx ERROR, 4xx WARNING, otherwise INFO).
When:  After RequestIDMiddleware, before the bearer token check, so
       rejected (401) requests are logged too.

What we log vs what we DON'T log:
    Log: method, path, status, duration, IP, request ID
    Don't log: request bodies (note content) or the Authorization header
"""

import logging
import time
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.middleware.request_id import request_id_var

logger = logging.getLogger("noteful.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Args:
        enabled:     False turns the access log off (the test environment)
        skip_paths:  Paths never logged (health probes)
    """

    def __init__(
        self,
        app: ASGIApp,
        enabled: bool = True,
        skip_paths: Iterable[str] = ("/health",),
    ):
        super().__init__(app)
        self.enabled = enabled
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if not self.enabled or path in self.skip_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
