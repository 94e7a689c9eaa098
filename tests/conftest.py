from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from pastebin.config import Settings
from pastebin.database import InMemoryRecordStore
from pastebin.main import create_app
from pastebin.models import Record


class ManualClock:
    """Clock the tests move by hand."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(now) -> ManualClock:
    return ManualClock(now)


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(APP_DOMAIN="", TEST_MODE=False, DEBUG=False)


@pytest.fixture
def client(settings, store, clock) -> TestClient:
    app = create_app(settings=settings, store=store, clock=clock)
    return TestClient(app, base_url="http://testserver")


@pytest.fixture
def make_record(store, now):
    """Insert a record directly into the store."""

    def _make(record_id: str = "abc123", **fields) -> Record:
        record = Record(
            id=record_id,
            content=fields.pop("content", "stored text"),
            created_at=fields.pop("created_at", now),
            **fields,
        )
        store.create(record)
        return record

    return _make
