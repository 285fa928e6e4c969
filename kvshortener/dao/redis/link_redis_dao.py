"""Data Access Object (DAO) implementation for managing links in Redis

This module provides a Redis-based implementation of LinkBaseDAO for CRUD-like
operations with LinkModel instances.

Every link is stored as one JSON document under `links:<shortcode>:data`:

    {
        "content": "https://example.com/page",
        "isUrl": true,
        "rawDisplay": false,
        "createdAt": "2025-10-15T12:00:00.000Z",
        "clicks": 3,
        "expiresAt": "2025-10-15T12:10:00.000Z"
    }

Links with an `expiresAt` carry a Redis TTL equal to the whole seconds left
until expiry, so Redis drops them even if nobody ever looks at them again.

Classes:
    LinkRedisDAO:
        DAO for storing and retrieving LinkModel in a Redis datastore.

Example:
    >>> from kvshortener.dao.redis import LinkRedisDAO

    >>> dao = LinkRedisDAO(prefix="app:dev")
    >>> dao.insert(link)
    <LinkRedisDAO>
    >>> dao.get("abc123").content
    'https://example.com/page'
    >>> dao.delete("abc123")
    True
"""

import json
from datetime import datetime, UTC

from beartype import beartype

from kvshortener.models import LinkModel
from kvshortener.dao.base import LinkBaseDAO
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_connection_error
from kvshortener.dao.exceptions import DataStoreError, LinkAlreadyExistsError, LinkNotFoundError
from kvshortener.utils.helpers import format_timestamp, parse_timestamp, remaining_ttl


class LinkRedisDAO(RedisClientMixin, LinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing link records

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        exists(shortcode: str, **kwargs) -> bool:
            EXISTS on the link's record key.

        insert(link: LinkModel, overwrite: bool = False, **kwargs) -> LinkRedisDAO:
            SET the record (NX unless overwrite) with a TTL derived from expires_at.
            Raises LinkAlreadyExistsError when the shortcode is taken.

        get(shortcode: str, **kwargs) -> LinkModel:
            GET and decode the record.
            Raises LinkNotFoundError when the shortcode doesn't exist.

        update(link: LinkModel, **kwargs) -> LinkRedisDAO:
            SET the record again with a freshly recomputed TTL.

        delete(shortcode: str, **kwargs) -> bool:
            DEL the record key.

    All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        return bool(self.redis.exists(self.keys.link_key(shortcode)))

    @handle_redis_connection_error
    @beartype
    def insert(self, link: LinkModel, overwrite: bool = False, **kwargs) -> 'LinkRedisDAO':
        """Insert a link record into Redis

        Without `overwrite` the write is a single SET NX, so two concurrent
        inserts of the same shortcode cannot both succeed.

        Raises:
            LinkAlreadyExistsError:
                If a record with the same shortcode already exists (and overwrite=False).
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> dao.insert(LinkModel(shortcode='abc123', content='hello', is_url=False, created_at=now))
            <LinkRedisDAO>
        """
        link_key = self.keys.link_key(link.shortcode)
        ttl = remaining_ttl(link.expires_at, datetime.now(UTC))

        stored = self.redis.set(link_key, self._serialize(link), ex=ttl, nx=not overwrite)
        if not stored:
            raise LinkAlreadyExistsError(f"Link with code '{link.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> LinkModel:
        """Retrieve a stored link record by shortcode

        Raises:
            LinkNotFoundError:
                If the link does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur or the stored record is corrupt.

        Example:
            >>> dao.get('abc123')
            LinkModel(shortcode='abc123', content='https://example.com', ...)
        """
        raw = self.redis.get(self.keys.link_key(shortcode))
        if raw is None:
            raise LinkNotFoundError(f"Link with code '{shortcode}' not found.")
        return self._deserialize(shortcode, raw)

    @handle_redis_connection_error
    @beartype
    def update(self, link: LinkModel, **kwargs) -> 'LinkRedisDAO':
        """Rewrite a link record, recomputing its TTL from the original expires_at

        NOTE: Redis has an atomic INCR, but a record is a single JSON document,
              so click counting stays a read-modify-write. Concurrent updates
              of the same link can lose clicks:

              (lambda 1): GET  <app>:links:<shortcode>:data  => clicks: 4
              (lambda 2): GET  <app>:links:<shortcode>:data  => clicks: 4
              (lambda 1): SET  <app>:links:<shortcode>:data  (clicks: 5) EX <ttl>
              (lambda 2): SET  <app>:links:<shortcode>:data  (clicks: 5) EX <ttl>
        """
        link_key = self.keys.link_key(link.shortcode)
        ttl = remaining_ttl(link.expires_at, datetime.now(UTC))
        self.redis.set(link_key, self._serialize(link), ex=ttl)
        return self

    @handle_redis_connection_error
    @beartype
    def delete(self, shortcode: str, **kwargs) -> bool:
        return self.redis.delete(self.keys.link_key(shortcode)) > 0

    @staticmethod
    def _serialize(link: LinkModel) -> str:
        return json.dumps(
            {
                'content': link.content,
                'isUrl': link.is_url,
                'rawDisplay': link.raw_display,
                'createdAt': format_timestamp(link.created_at),
                'clicks': link.clicks,
                'expiresAt': None if link.expires_at is None else format_timestamp(link.expires_at),
            }
        )

    @staticmethod
    def _deserialize(shortcode: str, raw: str | bytes) -> LinkModel:
        try:
            data = json.loads(raw)
            expires_at = data.get('expiresAt')
            return LinkModel(
                shortcode=shortcode,
                content=data['content'],
                is_url=bool(data.get('isUrl', False)),
                raw_display=bool(data.get('rawDisplay', False)),
                created_at=parse_timestamp(data['createdAt']),
                clicks=int(data.get('clicks') or 0),
                expires_at=None if not expires_at else parse_timestamp(expires_at),
            )
        except (ValueError, KeyError, TypeError) as e:
            raise DataStoreError(f"Corrupt link record stored under code '{shortcode}'.") from e
