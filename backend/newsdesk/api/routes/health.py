"""Health Probes — liveness and store readiness, outside the documented API.

Invariants:
    - GET /api/health answers 200 while the process is up, without touching the store
    - GET /api/health/ready answers 503 when the app's store handle is missing
      or cannot run SELECT 1
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", include_in_schema=False)
async def liveness(request: Request):
    return {"status": "healthy", "service": request.app.title}


@router.get("/ready", include_in_schema=False)
async def readiness(request: Request):
    db_manager = request.app.state.db_manager
    if db_manager is not None and await db_manager.health_check():
        return {"status": "ready", "checks": {"database": "healthy"}}

    logger.warning("Readiness probe failed: store unavailable", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": "database_unavailable"},
    )
