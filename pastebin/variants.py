"""
Variant policies.

The paste and snippet APIs share one create/view implementation. A policy
holds everything that differs between them: the request model, whether an
expiry method is mandatory, how the TTL is expressed, the status used for
expired records, messages, the share URL prefix and the view response shape.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Type

from pydantic import BaseModel

from pastebin.errors import ErrorKind
from pastebin.models import (
    PasteCreate,
    PasteView,
    Record,
    SnippetCreate,
    SnippetView,
    format_timestamp,
)

TTL_SECONDS = "seconds"
TTL_TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class VariantPolicy:
    name: str
    label: str
    api_prefix: str
    page_prefix: str
    expiry_scheme: str
    requires_expiry: bool
    distinguishes_gone: bool
    create_model: Type[BaseModel]
    view_model: Type[BaseModel]
    shape_view: Callable[[Record], BaseModel]
    messages: Dict[ErrorKind, str]

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    @property
    def gone_message(self) -> str:
        if self.distinguishes_gone:
            return f"{self.label} has expired"
        return self.not_found_message

    @property
    def create_failed_message(self) -> str:
        return f"Failed to create {self.name}"

    @property
    def fetch_failed_message(self) -> str:
        return f"Failed to fetch {self.name}"

    def message(self, kind: ErrorKind) -> str:
        return self.messages[kind]

    def share_url(self, base_url: str, record_id: str) -> str:
        return f"{base_url.rstrip('/')}{self.page_prefix}/{record_id}"


def _shape_paste(record: Record) -> PasteView:
    return PasteView(
        content=record.content,
        remaining_views=record.remaining_views,
        expires_at=format_timestamp(record.expires_at),
    )


def _shape_snippet(record: Record) -> SnippetView:
    return SnippetView(
        content=record.content,
        view_count=record.view_count,
        created_at=format_timestamp(record.created_at),
        expires_at=format_timestamp(record.expires_at),
        max_views=record.max_views,
    )


PASTE = VariantPolicy(
    name="paste",
    label="Paste",
    api_prefix="/api/pastes",
    page_prefix="/p",
    expiry_scheme=TTL_SECONDS,
    requires_expiry=False,
    distinguishes_gone=False,
    create_model=PasteCreate,
    view_model=PasteView,
    shape_view=_shape_paste,
    messages={
        ErrorKind.INVALID_CONTENT: "content is required and must be a non-empty string",
        ErrorKind.INVALID_TTL: "ttl_seconds must be an integer >= 1",
        ErrorKind.INVALID_MAX_VIEWS: "max_views must be an integer >= 1",
    },
)

SNIPPET = VariantPolicy(
    name="snippet",
    label="Snippet",
    api_prefix="/api/snippets",
    page_prefix="/s",
    expiry_scheme=TTL_TIMESTAMP,
    requires_expiry=True,
    distinguishes_gone=True,
    create_model=SnippetCreate,
    view_model=SnippetView,
    shape_view=_shape_snippet,
    messages={
        ErrorKind.INVALID_CONTENT: "Content cannot be empty",
        ErrorKind.MISSING_EXPIRY: "At least one expiry method (expiresAt or maxViews) is required",
        ErrorKind.INVALID_EXPIRY: "expiresAt must be a valid ISO-8601 timestamp",
        ErrorKind.EXPIRY_NOT_FUTURE: "expiresAt must be in the future",
        ErrorKind.INVALID_MAX_VIEWS: "maxViews must be a positive integer",
    },
)

VARIANTS = (PASTE, SNIPPET)

