from datetime import datetime, timedelta, timezone

import pytest

from pastebin.expiration import Availability, evaluate, overshot_view_limit
from pastebin.models import Record

CREATED = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _record(**fields) -> Record:
    return Record(id="abc", content="text", created_at=CREATED, **fields)


def test_missing_record_is_not_found():
    assert evaluate(None, CREATED) is Availability.NOT_FOUND


def test_unlimited_record_is_available():
    assert evaluate(_record(), CREATED + timedelta(days=3650)) is Availability.AVAILABLE


def test_time_expiry_is_strictly_after():
    expires_at = CREATED + timedelta(hours=1)
    record = _record(expires_at=expires_at)

    assert evaluate(record, expires_at) is Availability.AVAILABLE
    assert evaluate(record, expires_at + timedelta(milliseconds=1)) is Availability.EXPIRED


def test_view_limit_exhausts_at_max():
    assert evaluate(_record(max_views=3, view_count=2), CREATED) is Availability.AVAILABLE
    assert evaluate(_record(max_views=3, view_count=3), CREATED) is Availability.EXHAUSTED


def test_time_expiry_reported_before_view_exhaustion():
    record = _record(expires_at=CREATED + timedelta(seconds=10), max_views=1, view_count=1)
    assert evaluate(record, CREATED + timedelta(seconds=11)) is Availability.EXPIRED


@pytest.mark.parametrize("record", [
    None,
    _record(expires_at=CREATED + timedelta(seconds=5)),
    _record(max_views=2, view_count=2),
])
def test_unavailability_is_monotonic(record):
    start = CREATED + timedelta(seconds=6)
    first = evaluate(record, start)
    assert first is not Availability.AVAILABLE

    for offset in (0, 1, 60, 86400 * 365):
        assert evaluate(record, start + timedelta(seconds=offset)) is first


def test_is_unavailable_flags():
    assert Availability.EXPIRED.is_unavailable
    assert Availability.EXHAUSTED.is_unavailable
    assert not Availability.NOT_FOUND.is_unavailable
    assert not Availability.AVAILABLE.is_unavailable


def test_overshot_view_limit():
    assert not overshot_view_limit(_record(view_count=100))
    assert not overshot_view_limit(_record(max_views=3, view_count=3))
    assert overshot_view_limit(_record(max_views=3, view_count=4))
