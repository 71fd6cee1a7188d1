"""
Noteful Backend — Request ID Middleware
=========================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
Why:   Ties together the access log line, the 401 rejection log and any
       store failure logged while serving the same request.
How:   Reuses a client-sent X-Request-ID or generates a short UUID, stores it
       in a ContextVar for loggers and in request.state for handlers, and
       sets the X-Request-ID response header.
When:  Outermost application middleware (only CORS runs before it), so the
       access log and the auth rejection log both carry the ID.

Why accept client-provided IDs:
    A client that already tags its own requests can search the server logs
    with the ID it sent. IDs are only used for log correlation, never for
    authorization, so a forged one costs nothing.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Why ContextVar: concurrent requests on one event loop each see their own ID,
# and loggers deep in the services read it without it being passed down.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough to correlate log lines
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
