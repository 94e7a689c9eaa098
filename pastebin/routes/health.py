"""
Health check route.
"""
from fastapi import APIRouter, Depends

from pastebin.database import RecordStore
from pastebin.deps import get_store
from pastebin.models import HealthCheck

router = APIRouter()


@router.get("/api/healthz", response_model=HealthCheck, response_model_exclude_none=True)
async def health_check(store: RecordStore = Depends(get_store)) -> HealthCheck:
    """
    Health check endpoint.
    Always returns 200; ok reflects whether the database answers.
    """
    if store.is_healthy():
        return HealthCheck(ok=True)
    return HealthCheck(ok=False, error="Database connection failed")
