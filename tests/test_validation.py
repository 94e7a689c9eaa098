from datetime import datetime, timedelta, timezone

import pytest

from pastebin.errors import ErrorKind, ValidationError
from pastebin.validation import validate_create
from pastebin.variants import PASTE, SNIPPET

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _kind(policy, content, expiry=None, max_views=None):
    with pytest.raises(ValidationError) as exc_info:
        validate_create(policy, content, expiry, max_views, NOW)
    return exc_info.value.kind


@pytest.mark.parametrize("content", [None, "", "   \n\t", 42, ["a"]])
def test_content_must_be_non_empty_string(content):
    assert _kind(PASTE, content) == ErrorKind.INVALID_CONTENT
    assert _kind(SNIPPET, content, max_views=1) == ErrorKind.INVALID_CONTENT


def test_content_is_trimmed():
    result = validate_create(PASTE, "  hello \n", None, None, NOW)
    assert result.content == "hello"


def test_paste_limits_are_all_optional():
    result = validate_create(PASTE, "hello", None, None, NOW)
    assert result.expiry is None
    assert result.max_views is None


def test_paste_accepts_ttl_and_max_views():
    result = validate_create(PASTE, "hello", 3600, 10, NOW)
    assert result.expiry == 3600
    assert result.max_views == 10


@pytest.mark.parametrize("ttl", [0, -5, 60.5, "60", True, 10**12])
def test_paste_rejects_bad_ttl(ttl):
    assert _kind(PASTE, "hello", expiry=ttl) == ErrorKind.INVALID_TTL


def test_whole_float_ttl_is_normalized_to_int():
    result = validate_create(PASTE, "hello", 60.0, None, NOW)
    assert result.expiry == 60
    assert isinstance(result.expiry, int)


@pytest.mark.parametrize("max_views", [0, -1, 2.5, "3", False])
def test_rejects_bad_max_views(max_views):
    assert _kind(PASTE, "hello", max_views=max_views) == ErrorKind.INVALID_MAX_VIEWS
    assert _kind(SNIPPET, "hello", max_views=max_views) == ErrorKind.INVALID_MAX_VIEWS


def test_snippet_requires_an_expiry_method():
    with pytest.raises(ValidationError) as exc_info:
        validate_create(SNIPPET, "hello", None, None, NOW)
    assert exc_info.value.kind == ErrorKind.MISSING_EXPIRY
    assert "At least one expiry method" in exc_info.value.message


@pytest.mark.parametrize("expires_at", ["tomorrow", "2026-13-01T00:00:00Z", "", 1234567890])
def test_snippet_rejects_unparseable_expiry(expires_at):
    assert _kind(SNIPPET, "hello", expiry=expires_at) == ErrorKind.INVALID_EXPIRY


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(seconds=-1), timedelta(days=-30)])
def test_snippet_rejects_expiry_not_in_future(offset):
    expires_at = (NOW + offset).isoformat()
    assert _kind(SNIPPET, "hello", expiry=expires_at) == ErrorKind.EXPIRY_NOT_FUTURE


def test_snippet_accepts_z_suffix_and_naive_timestamps():
    zulu = validate_create(SNIPPET, "hello", "2026-01-16T00:00:00Z", None, NOW)
    assert zulu.expiry == datetime(2026, 1, 16, tzinfo=timezone.utc)

    naive = validate_create(SNIPPET, "hello", "2026-01-16T00:00:00", None, NOW)
    assert naive.expiry == datetime(2026, 1, 16, tzinfo=timezone.utc)


def test_snippet_max_views_alone_is_enough():
    result = validate_create(SNIPPET, "hello", None, 3, NOW)
    assert result.expiry is None
    assert result.max_views == 3


def test_rules_fail_fast_in_order():
    # Bad content wins over everything else
    assert _kind(SNIPPET, "", expiry="garbage", max_views=0) == ErrorKind.INVALID_CONTENT
    # Expiry is checked before max_views
    assert _kind(PASTE, "hello", expiry=0, max_views=0) == ErrorKind.INVALID_TTL
    assert _kind(SNIPPET, "hello", expiry="garbage", max_views=0) == ErrorKind.INVALID_EXPIRY


def test_messages_follow_variant():
    with pytest.raises(ValidationError) as paste_error:
        validate_create(PASTE, "", None, None, NOW)
    with pytest.raises(ValidationError) as snippet_error:
        validate_create(SNIPPET, "", None, None, NOW)

    assert "content is required" in paste_error.value.message
    assert snippet_error.value.message == "Content cannot be empty"
    assert paste_error.value.status_code == 400


def test_snippet_expiry_is_normalized_to_utc():
    result = validate_create(SNIPPET, "hello", "2026-01-16T05:00:00+05:00", None, NOW)
    assert result.expiry == datetime(2026, 1, 16, 0, 0, tzinfo=timezone.utc)
    assert result.expiry.utcoffset() == timedelta(0)


def test_snippet_rejects_expiry_beyond_utc_range():
    assert _kind(SNIPPET, "hello", expiry="9999-12-31T23:00:00-05:00") == ErrorKind.INVALID_EXPIRY
