"""
Record API routes.

``build_router`` produces the create and fetch endpoints for one variant;
the paste and snippet APIs are two instances of the same router.
"""
from fastapi import APIRouter, Depends

from pastebin.clock import Clock
from pastebin.config import Settings
from pastebin.database import RecordStore
from pastebin.deps import get_base_url, get_clock, get_settings, get_store
from pastebin.models import CreateResponse, ErrorResponse
from pastebin.service import create_record, view_record
from pastebin.variants import VariantPolicy


def build_router(policy: VariantPolicy) -> APIRouter:
    """Create/fetch routes for ``policy`` under ``policy.api_prefix``."""
    router = APIRouter(prefix=policy.api_prefix, tags=[policy.name])

    error_responses = {
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
    if policy.distinguishes_gone:
        error_responses[410] = {"model": ErrorResponse}

    @router.post(
        "",
        response_model=CreateResponse,
        status_code=201,
        responses=error_responses,
        name=f"create_{policy.name}",
    )
    async def create(
        payload: policy.create_model,
        store: RecordStore = Depends(get_store),
        settings: Settings = Depends(get_settings),
        clock: Clock = Depends(get_clock),
        base_url: str = Depends(get_base_url),
    ) -> CreateResponse:
        record = create_record(
            store,
            policy,
            content=payload.content,
            expiry=payload.expiry,
            max_views=payload.max_views,
            now=clock(),
            id_length=settings.ID_LENGTH,
        )
        return CreateResponse(id=record.id, url=policy.share_url(base_url, record.id))

    @router.get(
        "/{record_id}",
        response_model=policy.view_model,
        responses=error_responses,
        name=f"fetch_{policy.name}",
    )
    async def fetch(
        record_id: str,
        store: RecordStore = Depends(get_store),
        clock: Clock = Depends(get_clock),
    ):
        """Fetch a record; each fetch consumes one view."""
        record = view_record(store, policy, record_id, now=clock())
        return policy.shape_view(record)

    return router
