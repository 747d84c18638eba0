"""
Blog API Backend - Health Check Route
======================================

What:  Liveness endpoint for process supervisors and load balancers.
How:   Reports version, store size and uptime. The store is in-process, so
       a responding server is a healthy one.
Who:   Called by Docker health checks and monitoring systems.

GET /health is exempt from the AuthGate and skipped by the AccessLog.
"""

import logging
import time

from fastapi import APIRouter, Depends

from blog_api import __version__
from blog_api.dependencies import get_store
from blog_api.schemas.blog import HealthResponse
from blog_api.services.blog_store import BlogStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: BlogStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        blog_count=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
