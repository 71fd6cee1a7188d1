"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the failure modes of the API.
How:   Each exception carries a client-safe message and an optional context
       dict. Exception handlers registered in main.py translate them into
       JSON responses with the matching HTTP status code.
Who:   Raised by services, validation helpers and route dependencies.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError    → 400 Bad Request (missing/empty required field)
    ├── NotFoundError      → 404 Not Found (item route id does not resolve)
    ├── UnauthorizedError  → 401 Unauthorized (bad or missing bearer token)
    └── StoreError         → 500 Internal Server Error (persistence call failed)

ValidationError, NotFoundError and UnauthorizedError are expected outcomes and
are answered where they are detected. Only StoreError (and anything nobody
anticipated) reaches the terminal error handler.
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  Error description (safe to return in API response)
        context:  Additional debug info (logged; only surfaced in verbose mode)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when a request body is missing a required field.

    HTTP:    400 Bad Request

    Example response:
        {"error": {"message": "Missing 'content' in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """
    Raised when an item route id does not match any stored record.

    HTTP:    404 Not Found

    The store returns None for missing records; the resolution dependency
    converts that None into this exception before any verb logic runs.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} Not Found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class UnauthorizedError(NotefulError):
    """
    Missing or incorrect bearer credential.

    HTTP:    401 Unauthorized

    The body differs from the other errors: {"error": "<message>"}.
    Never raised: BearerTokenMiddleware builds its 401 from to_response()
    before routing, where no exception handler is in play.
    """

    def __init__(
        self,
        message: str = "Unauthorized request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message}


class StoreError(NotefulError):
    """
    Raised when a persistence call fails.

    What:    An insert, update, delete or query against the database failed.
    When:    Constraint violation (e.g. unknown folder_id), lost connection, etc.
    HTTP:    500 Internal Server Error

    Never retried. The full context is logged server-side; whether the client
    sees it depends on the environment (see the error handler in main.py).
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
