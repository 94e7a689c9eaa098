"""
Creation input validation.

``validate_create`` checks the raw request values against the rules of a
variant and returns normalized values. Rules run in a fixed order and the
first violation wins.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Union

from pastebin.errors import ErrorKind, ValidationError
from pastebin.variants import TTL_SECONDS, VariantPolicy


@dataclass(frozen=True)
class CreateInput:
    """Validated creation input."""
    content: str
    expiry: Optional[Union[int, datetime]]
    max_views: Optional[int]


def _as_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int when it is a whole JSON number, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_create(
    policy: VariantPolicy,
    content: Any,
    expiry: Any,
    max_views: Any,
    now: datetime,
) -> CreateInput:
    """
    Validate creation input for a variant.

    Args:
        policy: Variant whose rules apply
        content: Raw content value
        expiry: Raw ttl_seconds (paste) or expiresAt (snippet) value
        max_views: Raw view limit value
        now: Current time, used to reject past expiry timestamps

    Returns:
        Normalized input

    Raises:
        ValidationError: On the first rule the input breaks
    """
    if not isinstance(content, str) or not content.strip():
        raise ValidationError(ErrorKind.INVALID_CONTENT, policy.message(ErrorKind.INVALID_CONTENT))

    if policy.requires_expiry and expiry is None and max_views is None:
        raise ValidationError(ErrorKind.MISSING_EXPIRY, policy.message(ErrorKind.MISSING_EXPIRY))

    normalized_expiry: Optional[Union[int, datetime]] = None
    if expiry is not None:
        if policy.expiry_scheme == TTL_SECONDS:
            ttl_seconds = _as_int(expiry)
            if ttl_seconds is None or ttl_seconds < 1:
                raise ValidationError(ErrorKind.INVALID_TTL, policy.message(ErrorKind.INVALID_TTL))
            # The derived expiry must fit in a datetime
            try:
                now + timedelta(seconds=ttl_seconds)
            except OverflowError:
                raise ValidationError(ErrorKind.INVALID_TTL, policy.message(ErrorKind.INVALID_TTL))
            normalized_expiry = ttl_seconds
        else:
            expires_at = _parse_timestamp(expiry)
            if expires_at is None:
                raise ValidationError(ErrorKind.INVALID_EXPIRY, policy.message(ErrorKind.INVALID_EXPIRY))
            try:
                expires_at = expires_at.astimezone(timezone.utc)
            except OverflowError:
                raise ValidationError(ErrorKind.INVALID_EXPIRY, policy.message(ErrorKind.INVALID_EXPIRY))
            if expires_at <= now:
                raise ValidationError(
                    ErrorKind.EXPIRY_NOT_FUTURE, policy.message(ErrorKind.EXPIRY_NOT_FUTURE)
                )
            normalized_expiry = expires_at

    normalized_max_views: Optional[int] = None
    if max_views is not None:
        normalized_max_views = _as_int(max_views)
        if normalized_max_views is None or normalized_max_views < 1:
            raise ValidationError(
                ErrorKind.INVALID_MAX_VIEWS, policy.message(ErrorKind.INVALID_MAX_VIEWS)
            )

    return CreateInput(
        content=content.strip(),
        expiry=normalized_expiry,
        max_views=normalized_max_views,
    )
