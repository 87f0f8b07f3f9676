# gatepass/routers/health.py
"""
System health check endpoint.
Returns status of backend + snapshot storage.
"""

from fastapi import APIRouter, Depends

from gatepass.database import get_store
from gatepass.schemas.responses import HealthResponse
from gatepass.utils.time_utils import utc_now

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="System health check")
def health_check(store=Depends(get_store)):
    storage_ok = store.ping()
    return HealthResponse(
        status="ok" if storage_ok else "degraded",
        timestamp=utc_now().isoformat(),
        storage="ok" if storage_ok else "unreadable",
    )
