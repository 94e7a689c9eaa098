"""
Expiration rules.

``evaluate`` decides whether a record can still be viewed. Checks run in a
fixed order: existence, then time expiry, then view exhaustion. A record
that is both time-expired and out of views therefore reports as EXPIRED.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pastebin.models import Record


class Availability(str, Enum):
    NOT_FOUND = "not_found"
    EXPIRED = "expired"
    EXHAUSTED = "exhausted"
    AVAILABLE = "available"

    @property
    def is_unavailable(self) -> bool:
        """True for a record that exists but can no longer be viewed."""
        return self in (Availability.EXPIRED, Availability.EXHAUSTED)


def evaluate(record: Optional[Record], now: datetime) -> Availability:
    if record is None:
        return Availability.NOT_FOUND

    if record.expires_at is not None and now > record.expires_at:
        return Availability.EXPIRED

    if record.max_views is not None and record.view_count >= record.max_views:
        return Availability.EXHAUSTED

    return Availability.AVAILABLE


def overshot_view_limit(record: Record) -> bool:
    """
    True when an increment pushed ``view_count`` past ``max_views``.

    Two viewers can both see the last remaining view as available before
    either increments; the one whose increment lands second gets this.
    """
    return record.max_views is not None and record.view_count > record.max_views
