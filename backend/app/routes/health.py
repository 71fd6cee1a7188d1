"""
Noteful Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring probes.
How:   Runs SELECT 1 through the request's session and reports the result.
Who:   Monitoring systems holding the API token (the route sits behind the
       bearer token check like every other route).

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.dependencies import DbSession
from app.schemas.common import AUTH_AND_SERVER_ERRORS, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"], responses={401: AUTH_AND_SERVER_ERRORS[401]})

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(response: Response, db: DbSession) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
