"""Unit tests for the LinkModel dataclass in link_model.py.

Test coverage includes:

1. Model creation and defaults
   - Ensures instances can be created with valid data.
   - Verifies optional fields default to "plain, unvisited, never expires".

2. Expiration semantics
   - Links without expires_at never expire.
   - Links are expired from expires_at onwards (inclusive boundary).

3. Equality and immutability
   - Confirms models with identical data compare equal.
   - Verifies fields are frozen after object creation.
"""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timedelta, UTC

import pytest

from kvshortener.models import LinkModel


@pytest.fixture
def now():
    return datetime(2025, 10, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def link(now):
    return LinkModel(shortcode='abc123', content='https://example.com/article/123', is_url=True, created_at=now)


# -------------------------------------------------
# 1. Model creation and defaults
# -------------------------------------------------

def test_link_model_defaults(link, now):
    """Ensure optional fields fall back to their defaults."""
    assert link.shortcode == 'abc123'
    assert link.content == 'https://example.com/article/123'
    assert link.is_url is True
    assert link.created_at == now
    assert link.raw_display is False
    assert link.clicks == 0
    assert link.expires_at is None


# -------------------------------------------------
# 2. Expiration semantics
# -------------------------------------------------

def test_link_without_expiry_never_expires(link, now):
    assert not link.is_expired(now + timedelta(days=3650))


@pytest.mark.parametrize(
    'offset, expected',
    [
        (timedelta(minutes=9, seconds=59), False),
        (timedelta(minutes=10), True),
        (timedelta(minutes=10, microseconds=1), True),
    ],
)
def test_link_expiry_boundary(link, now, offset, expected):
    """Ensure a link is expired exactly from expires_at onwards."""
    expiring = replace(link, expires_at=now + timedelta(minutes=10))
    assert expiring.is_expired(now + offset) is expected


# -------------------------------------------------
# 3. Equality and immutability
# -------------------------------------------------

def test_link_model_equality(link, now):
    same = LinkModel(shortcode='abc123', content='https://example.com/article/123', is_url=True, created_at=now)
    assert link == same
    assert link != replace(link, clicks=1)


@pytest.mark.parametrize('field, value', [('clicks', 5), ('content', 'changed'), ('expires_at', None)])
def test_link_model_is_frozen(link, field, value):
    """Ensure LinkModel fields can't be reassigned."""
    with pytest.raises(FrozenInstanceError):
        setattr(link, field, value)
