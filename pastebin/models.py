"""
Pydantic models for stored records and request/response validation.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def format_timestamp(moment: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ISO 8601 UTC with millisecond precision and a Z suffix."""
    if moment is None:
        return None
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Record(BaseModel):
    """A stored paste/snippet."""
    id: str
    content: str
    created_at: datetime
    expires_at: Optional[datetime] = None
    max_views: Optional[int] = None
    view_count: int = 0

    @property
    def remaining_views(self) -> Optional[int]:
        """Views left, floored at 0, or None when views are unlimited."""
        if self.max_views is None:
            return None
        return max(0, self.max_views - self.view_count)


class PasteCreate(BaseModel):
    """Schema for creating a new paste.

    Field types are open; validate_create applies the rules in order.
    """
    content: Any = Field(None, description="Text content (required, non-empty)")
    expiry: Any = Field(None, alias="ttl_seconds", description="Optional TTL in seconds")
    max_views: Any = Field(None, alias="max_views", description="Optional view limit")


class SnippetCreate(BaseModel):
    """Schema for creating a new snippet (at least one expiry method required)."""
    content: Any = Field(None, description="Text content (required, non-empty)")
    expiry: Any = Field(None, alias="expiresAt", description="Expiry timestamp (ISO 8601)")
    max_views: Any = Field(None, alias="maxViews", description="Optional view limit")


class CreateResponse(BaseModel):
    """Schema for creation response."""
    id: str = Field(..., description="Unique record ID")
    url: str = Field(..., description="Shareable URL to view the record")


class PasteView(BaseModel):
    """Schema for viewing/fetching a paste."""
    content: str = Field(..., description="Paste text content")
    remaining_views: Optional[int] = Field(None, description="Views left (null if unlimited)")
    expires_at: Optional[str] = Field(None, description="Expiry timestamp (ISO 8601, null if no TTL)")


class SnippetView(BaseModel):
    """Schema for viewing/fetching a snippet."""
    model_config = ConfigDict(populate_by_name=True)

    content: str
    view_count: int = Field(..., alias="viewCount")
    created_at: str = Field(..., alias="createdAt")
    expires_at: Optional[str] = Field(None, alias="expiresAt")
    max_views: Optional[int] = Field(None, alias="maxViews")


class ErrorResponse(BaseModel):
    error: str


class HealthCheck(BaseModel):
    """Schema for health check response."""
    ok: bool = Field(..., description="Is the application healthy?")
    error: Optional[str] = Field(None, description="Failure reason when not healthy")
