"""
Clock helpers.

A clock is any zero-argument callable returning an aware UTC datetime. The
view endpoints receive one through dependency injection; only a test-mode
configuration can swap the wall clock for a request-supplied timestamp.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

TEST_NOW_HEADER = "x-test-now-ms"


def system_clock() -> datetime:
    """Wall-clock time in UTC."""
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock frozen at ``moment``."""
    return lambda: moment


def clock_from_test_header(
    x_test_now_ms: Optional[str],
    test_mode: bool,
    default: Clock = system_clock,
) -> Clock:
    """
    Pick the clock for a request.

    Args:
        x_test_now_ms: Value of the x-test-now-ms header, if any
        test_mode: Whether TEST_MODE is enabled in settings
        default: Clock used when the header does not apply

    Returns:
        A clock frozen at the header time in test mode, otherwise ``default``
    """
    if not test_mode or not x_test_now_ms:
        return default

    try:
        timestamp_ms = int(x_test_now_ms)
        moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    except (ValueError, TypeError, OverflowError, OSError) as e:
        logger.warning(f"Invalid {TEST_NOW_HEADER} header: {e}")
        return default

    return fixed_clock(moment)
