"""
FastAPI dependencies.

The store, settings and base clock live on ``app.state``; endpoints reach
them through these functions so tests can swap any of them per app.
"""
from typing import Optional

from fastapi import Header, Request

from pastebin.clock import Clock, clock_from_test_header, system_clock
from pastebin.config import Settings
from pastebin.database import RecordStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_clock(
    request: Request,
    x_test_now_ms: Optional[str] = Header(None),
) -> Clock:
    """Wall clock, or the x-test-now-ms time when TEST_MODE is enabled."""
    settings = get_settings(request)
    base_clock = getattr(request.app.state, "clock", None) or system_clock
    return clock_from_test_header(x_test_now_ms, settings.TEST_MODE, default=base_clock)


def get_base_url(request: Request) -> str:
    """APP_DOMAIN when configured, otherwise scheme and host of the request."""
    settings = get_settings(request)
    if settings.APP_DOMAIN:
        return settings.APP_DOMAIN.rstrip("/")
    return str(request.base_url).rstrip("/")
