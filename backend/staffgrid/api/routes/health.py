"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if the record store cannot serve (readiness)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from staffgrid.api.dependencies import get_record_store
from staffgrid.infrastructure.record_store import RecordStore

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "staffgrid-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: RecordStore = Depends(get_record_store)):
    """Readiness probe — includes record store connectivity."""
    if not await store.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "record_store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"record_store": store.backend}}
