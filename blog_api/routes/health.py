"""
Blog API: Health Check Route
==============================

What:  GET /health for container probes and load balancers.
How:   Pings MongoDB; the service is healthy only when the ping succeeds.

    healthy   → HTTP 200
    unhealthy → HTTP 503 (MongoDB unreachable)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from blog_api import __version__
from blog_api import database
from blog_api.schemas.post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "MongoDB unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check() -> JSONResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: MongoDB unreachable: %s", str(e))

    health = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=health.model_dump(),
    )
