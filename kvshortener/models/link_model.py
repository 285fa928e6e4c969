from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LinkModel:
    """Represent a stored short link.

    Attributes:
        shortcode (str):
            The unique short identifier of the link.
        content (str):
            The stored URL or free-form text, trimmed of surrounding whitespace.
        is_url (bool):
            True if `content` was a well-formed absolute URL at creation time.
            Fixed at creation, never recomputed.
        created_at (datetime):
            Creation time (aware, UTC).
        raw_display (bool):
            If True, the content is always served as plain text (no redirect,
            no formatted view).
        clicks (int):
            Number of successful resolutions so far.
        expires_at (datetime | None):
            Time after which the link is dead. None means it never expires.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> link = LinkModel(
        ...     shortcode='abc123',
        ...     content='https://example.com/article/123',
        ...     is_url=True,
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=10),
        ... )
        >>> link.is_expired(now)
        False
        >>> link.is_expired(now + timedelta(minutes=10))
        True
    """

    shortcode: str
    content: str
    is_url: bool
    created_at: datetime
    raw_display: bool = False
    clicks: int = 0
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now
