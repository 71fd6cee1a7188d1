"""
Noteful Backend — Unhandled Error Middleware
==============================================

What:  Turns exceptions nobody anticipated into the terminal 500 response.
Why:   Starlette runs app.exception_handler(Exception) in ServerErrorMiddleware,
       outside every user middleware, so those responses would leave without
       X-Request-ID or CORS headers. Converting them here keeps every 500
       inside the chain.
How:   Wraps call_next; any exception escaping the route is logged with the
       request ID and answered with server_error_response().
When:  Innermost middleware, directly around the routes (inside the bearer
       token check).

Response bodies:
    verbose=True:   {"message": ..., "error": {"message", "type", "details"}}
    verbose=False:  {"error": {"message": "server error"}}
"""

import logging
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "server error"


def error_body(message: str) -> Dict[str, Any]:
    return {"error": {"message": message}}


def server_error_response(exc: Exception, verbose: bool) -> JSONResponse:
    """Build the 500 response; failure detail only goes to the client when verbose."""
    if not verbose:
        return JSONResponse(status_code=500, content=error_body(GENERIC_SERVER_ERROR))

    message = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return JSONResponse(
        status_code=500,
        content={
            "message": message,
            "error": {
                "message": message,
                "type": type(exc).__name__,
                "details": getattr(exc, "context", None) or {},
            },
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Args:
        verbose:  False in production; the client then sees only "server error"
    """

    def __init__(self, app: ASGIApp, verbose: bool = True):
        super().__init__(app)
        self.verbose = verbose

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=exc
            )
            return server_error_response(exc, self.verbose)
