"""
HTML page routes.
Serves the create form and the human-facing view pages.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from pastebin.clock import Clock
from pastebin.database import RecordStore
from pastebin.deps import get_clock, get_store
from pastebin.errors import PastebinError
from pastebin.rendering import render_create_page, render_error_page, render_record_page
from pastebin.service import view_record
from pastebin.variants import PASTE, SNIPPET, VariantPolicy

router = APIRouter()


def _render_view(policy: VariantPolicy, record_id: str, store: RecordStore, clock: Clock) -> HTMLResponse:
    try:
        record = view_record(store, policy, record_id, now=clock())
    except PastebinError as e:
        return HTMLResponse(
            render_error_page(policy, e.status_code, e.message),
            status_code=e.status_code,
        )
    return HTMLResponse(render_record_page(policy, record))


@router.get("/", response_class=HTMLResponse)
async def create_page() -> HTMLResponse:
    """Serve the create paste HTML page."""
    return HTMLResponse(render_create_page())


@router.get("/p/{record_id}", response_class=HTMLResponse)
async def view_paste_page(
    record_id: str,
    store: RecordStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
) -> HTMLResponse:
    """View a paste as HTML. Each view increments the view count."""
    return _render_view(PASTE, record_id, store, clock)


@router.get("/s/{record_id}", response_class=HTMLResponse)
async def view_snippet_page(
    record_id: str,
    store: RecordStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
) -> HTMLResponse:
    """View a snippet as HTML. Each view increments the view count."""
    return _render_view(SNIPPET, record_id, store, clock)
