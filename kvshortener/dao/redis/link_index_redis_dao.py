"""Redis implementation of the link index

The index is a sorted set under `links:index`, scored by the time each
shortcode was first added. Sorted set commands are atomic, so concurrent
adds and removes never overwrite each other the way a read-modify-write of
a serialized list would. The index can still diverge from the records
themselves (the two live under different keys), which
LinkLifecycleManager.enumerate() repairs.
"""

from datetime import datetime, UTC

from beartype import beartype

from kvshortener.dao.base import LinkIndexBaseDAO
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_connection_error


class LinkIndexRedisDAO(RedisClientMixin, LinkIndexBaseDAO):
    """Redis sorted-set backed index of known shortcodes

    Example:
        >>> index = LinkIndexRedisDAO(redis_client=link_dao.redis, prefix='kvshortener:dev')
        >>> index.add('abc123')
        True
        >>> index.add('abc123')
        False
        >>> index.members()
        ['abc123']
    """

    @handle_redis_connection_error
    @beartype
    def add(self, shortcode: str, **kwargs) -> bool:
        # NX: a re-added shortcode keeps its original position
        score = datetime.now(UTC).timestamp()
        return self.redis.zadd(self.keys.index_key(), {shortcode: score}, nx=True) > 0

    @handle_redis_connection_error
    @beartype
    def remove(self, shortcode: str, **kwargs) -> bool:
        return self.redis.zrem(self.keys.index_key(), shortcode) > 0

    @handle_redis_connection_error
    def members(self, **kwargs) -> list[str]:
        shortcodes = self.redis.zrange(self.keys.index_key(), 0, -1)
        return [code.decode('utf-8') if isinstance(code, bytes) else code for code in shortcodes]

    @handle_redis_connection_error
    @beartype
    def prune(self, shortcodes: list[str], **kwargs) -> int:
        if not shortcodes:
            return 0
        return self.redis.zrem(self.keys.index_key(), *shortcodes)
