"""
Database layer for Redis operations with in-memory fallback for development.
Handles record creation, lookup, atomic view counting, and health checks.
"""
import functools
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from redis import Redis
from redis.exceptions import RedisError

from pastebin.config import Settings
from pastebin.errors import StoreError
from pastebin.models import Record

logger = logging.getLogger(__name__)


def handle_redis_errors(func):
    """Re-raise Redis failures from a store method as StoreError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RedisError as e:
            logger.error(f"Redis error in {func.__name__}: {type(e).__name__}: {e}")
            raise StoreError(f"Redis operation {func.__name__} failed", cause=e) from e

    return wrapper


class RecordStore(ABC):
    """Storage interface for records."""

    using_fallback = False

    @abstractmethod
    def create(self, record: Record) -> None:
        """Persist a new record in one atomic write."""

    @abstractmethod
    def get(self, record_id: str) -> Optional[Record]:
        """Fetch a record, or None if the id is unknown."""

    @abstractmethod
    def increment_views(self, record_id: str) -> Optional[Record]:
        """
        Atomically add one to the view count and return the updated record.

        Concurrent callers each observe a distinct, strictly increasing count.
        Returns None if the id is unknown.
        """

    @abstractmethod
    def ping(self) -> bool:
        """Raise or return False when the backing database is unreachable."""

    def is_healthy(self) -> bool:
        """Check if database connection is alive."""
        try:
            return bool(self.ping())
        except Exception as e:
            logger.error(f"Health check failed: {e}")
        return False


def record_to_hash(record: Record) -> Dict[str, str]:
    """Flatten a record into Redis hash fields; unset limits are omitted."""
    data = {
        "content": record.content,
        "created_at": record.created_at.isoformat(),
        "view_count": str(record.view_count),
    }
    if record.expires_at is not None:
        data["expires_at"] = record.expires_at.isoformat()
    if record.max_views is not None:
        data["max_views"] = str(record.max_views)
    return data


def record_from_hash(record_id: str, data: Dict[str, Any]) -> Optional[Record]:
    """Rebuild a record from Redis hash fields; None for a missing hash."""
    if not data or "content" not in data:
        return None
    expires_at = data.get("expires_at")
    max_views = data.get("max_views")
    return Record(
        id=record_id,
        content=data["content"],
        created_at=datetime.fromisoformat(data["created_at"]),
        expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
        max_views=int(max_views) if max_views else None,
        view_count=int(data.get("view_count", 0)),
    )


class RedisRecordStore(RecordStore):
    """Records stored as one Redis hash per id.

    Keys carry no Redis TTL: an expired record must stay readable so it can
    be reported as expired rather than unknown.
    """

    def __init__(self, redis: Redis, prefix: str = "paste"):
        self.redis = redis
        self.prefix = prefix

    def key(self, record_id: str) -> str:
        return f"{self.prefix}:{record_id}"

    @handle_redis_errors
    def create(self, record: Record) -> None:
        # A single HSET with a mapping is atomic; readers never see half a record.
        self.redis.hset(self.key(record.id), mapping=record_to_hash(record))
        logger.info(f"Record {record.id} saved successfully")

    @handle_redis_errors
    def get(self, record_id: str) -> Optional[Record]:
        return record_from_hash(record_id, self.redis.hgetall(self.key(record_id)))

    @handle_redis_errors
    def increment_views(self, record_id: str) -> Optional[Record]:
        key = self.key(record_id)
        if not self.redis.exists(key):
            return None

        # HINCRBY and HGETALL run in one MULTI/EXEC block, so the returned
        # hash is exactly the state produced by this increment.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hincrby(key, "view_count", 1)
            pipe.hgetall(key)
            _, data = pipe.execute()

        logger.info(f"View count incremented for record {record_id}")
        return record_from_hash(record_id, data)

    @handle_redis_errors
    def ping(self) -> bool:
        return bool(self.redis.ping())


class InMemoryRecordStore(RecordStore):
    """Simple in-memory store for development/testing (when Redis unavailable)."""

    def __init__(self, using_fallback: bool = False):
        self.records: Dict[str, Record] = {}
        self.lock = threading.Lock()
        self.using_fallback = using_fallback

    def create(self, record: Record) -> None:
        with self.lock:
            self.records[record.id] = record.model_copy()
        logger.info(f"Record {record.id} saved in memory")

    def get(self, record_id: str) -> Optional[Record]:
        with self.lock:
            record = self.records.get(record_id)
            return record.model_copy() if record else None

    def increment_views(self, record_id: str) -> Optional[Record]:
        with self.lock:
            record = self.records.get(record_id)
            if record is None:
                return None
            record.view_count += 1
            return record.model_copy()

    def ping(self) -> bool:
        """Health check."""
        return True


def connect_store(settings: Settings) -> RecordStore:
    """
    Connect to Redis, falling back to an in-memory store.

    Args:
        settings: Application settings (REDIS_URL, REDIS_PREFIX)

    Returns:
        A Redis-backed store, or an in-memory one if Redis cannot be reached
    """
    try:
        logger.info(f"Attempting to connect to Redis: {settings.REDIS_URL[:30]}...")
        redis = Redis.from_url(settings.REDIS_URL, decode_responses=True)
        redis.ping()
        logger.info("✓ Redis connected successfully")
        return RedisRecordStore(redis, prefix=settings.REDIS_PREFIX)
    except (RedisError, ValueError) as e:
        logger.error(f"❌ Error connecting to Redis: {type(e).__name__}: {str(e)}")
        logger.warning("Using in-memory fallback for development. Data will NOT persist across restarts.")
        return InMemoryRecordStore(using_fallback=True)
