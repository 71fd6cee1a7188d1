"""
Noteful Backend — Bearer Token Middleware
===========================================

What:  Rejects every request that does not carry the shared API token.
Why:   The API has a single trusted client; one shared secret is the whole
       access model.
How:   Reads `Authorization: Bearer <token>` and compares the token to the
       secret given at construction. No match → 401 with
       {"error": "Unauthorized request"} and the route is never reached.
       A match passes the request through untouched.
When:  Innermost middleware: runs after request ID and access logging have
       been set up, before routing.

This is the only authorization mechanism. There are no per-user or
per-resource permissions.
"""

import logging
import secrets

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.exceptions import UnauthorizedError
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def extract_bearer_token(authorization: str) -> str | None:
    """Return the token of a 'Bearer <token>' header value, or None for any other shape."""
    scheme, _, token = authorization.partition(" ")
    if scheme != BEARER_SCHEME or not token:
        return None
    return token


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """
    Validates the bearer credential of every request.

    Args:
        app:        The wrapped ASGI application
        api_token:  The process-wide shared secret (from Settings.api_token).
                    An empty secret matches nothing.
    """

    def __init__(self, app: ASGIApp, api_token: str):
        super().__init__(app)
        self._api_token = api_token

    def is_authorized(self, authorization: str | None) -> bool:
        if not self._api_token or not authorization:
            return False
        token = extract_bearer_token(authorization)
        if token is None:
            return False
        # Why compare_digest: the comparison time does not depend on how many
        # leading characters of a guessed token are right
        return secrets.compare_digest(token.encode("utf-8"), self._api_token.encode("utf-8"))

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self.is_authorized(request.headers.get("Authorization")):
            error = UnauthorizedError()
            logger.error(
                "[%s] Unauthorized request to path: %s",
                request_id_var.get(""),
                request.url.path,
            )
            return JSONResponse(status_code=401, content=error.to_response())

        return await call_next(request)
