"""Health, Readiness & Version: probes for container orchestration and the server version.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - GET /version returns the configured version inside an envelope

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Probe bodies are plain JSON, not envelopes: consumed by orchestrators, not clients
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from code_annotation.api.rendering import render
from code_annotation.config import get_settings
from code_annotation.infrastructure import database
from code_annotation.schemas.serializers import new_version_response

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "code-annotation-api",
        "version": get_settings().version,
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe: includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}


@router.get("/version")
async def get_version():
    """Version of the running server."""
    return render(new_version_response(get_settings().version))
