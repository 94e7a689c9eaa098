"""
Create and view operations shared by the paste and snippet APIs.

Both operations take a VariantPolicy; nothing here knows about wire field
names or status codes beyond what the policy provides.
"""
import logging
from datetime import datetime, timedelta
from typing import Any

from pastebin.database import RecordStore
from pastebin.errors import GoneError, InternalError, NotFoundError, StoreError
from pastebin.expiration import Availability, evaluate, overshot_view_limit
from pastebin.ids import generate_id
from pastebin.models import Record
from pastebin.validation import validate_create
from pastebin.variants import TTL_SECONDS, VariantPolicy

logger = logging.getLogger(__name__)


def create_record(
    store: RecordStore,
    policy: VariantPolicy,
    content: Any,
    expiry: Any,
    max_views: Any,
    now: datetime,
    id_length: int = 10,
) -> Record:
    """
    Validate input and persist a new record.

    Args:
        store: Record store
        policy: Variant the request came through
        content: Raw content value
        expiry: Raw ttl_seconds/expiresAt value
        max_views: Raw view limit value
        now: Creation time
        id_length: Length of the generated id

    Returns:
        The persisted record

    Raises:
        ValidationError: If input is invalid (nothing is stored)
        InternalError: If the store fails
    """
    data = validate_create(policy, content, expiry, max_views, now)

    expires_at = None
    if data.expiry is not None:
        if policy.expiry_scheme == TTL_SECONDS:
            expires_at = now + timedelta(seconds=data.expiry)
        else:
            expires_at = data.expiry

    record = Record(
        id=generate_id(id_length),
        content=data.content,
        created_at=now,
        expires_at=expires_at,
        max_views=data.max_views,
        view_count=0,
    )

    try:
        store.create(record)
    except StoreError as e:
        logger.error(f"Error creating {policy.name}: {e}")
        raise InternalError(policy.create_failed_message) from e

    logger.info(f"Created {policy.name} {record.id}")
    return record


def _refuse(policy: VariantPolicy, record_id: str, availability: Availability):
    logger.warning(f"{policy.label} {record_id} unavailable: {availability.value}")
    if not availability.is_unavailable:
        raise NotFoundError(policy.not_found_message)
    if policy.distinguishes_gone:
        raise GoneError(policy.gone_message)
    raise NotFoundError(policy.gone_message)


def view_record(
    store: RecordStore,
    policy: VariantPolicy,
    record_id: str,
    now: datetime,
) -> Record:
    """
    Consume one view of a record.

    Args:
        store: Record store
        policy: Variant the request came through
        record_id: Record identifier
        now: Time to evaluate expiry against

    Returns:
        The record after its view count was incremented

    Raises:
        NotFoundError: Unknown id (or any unavailable record, for pastes)
        GoneError: Expired or view-exhausted record, for snippets
        InternalError: If the store fails
    """
    try:
        record = store.get(record_id)
        availability = evaluate(record, now)
        if availability is not Availability.AVAILABLE:
            _refuse(policy, record_id, availability)

        updated = store.increment_views(record_id)
    except StoreError as e:
        logger.error(f"Error fetching {policy.name} {record_id}: {e}")
        raise InternalError(policy.fetch_failed_message) from e

    if updated is None:
        _refuse(policy, record_id, Availability.NOT_FOUND)
    if overshot_view_limit(updated):
        _refuse(policy, record_id, Availability.EXHAUSTED)

    return updated
