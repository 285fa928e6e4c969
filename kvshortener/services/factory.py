import logging

from kvshortener.dao.redis import LinkRedisDAO, LinkIndexRedisDAO
from kvshortener.services.link_lifecycle import LinkLifecycleManager
from kvshortener.utils.config import app_prefix, redis_config


logger = logging.getLogger(__name__)


def lifecycle_manager(lambda_name: str) -> LinkLifecycleManager:
    """Build a LinkLifecycleManager from the lambda's AppConfig section

    Both DAOs share one Redis client (and therefore one healthcheck).

    Example:
        >>> manager = lifecycle_manager('redirect_link')
        >>> manager.resolve('abc123').kind
        <ViewKind.REDIRECT: 'redirect'>
    """
    logger.debug('Assuming Redis as the backend database for links.', extra={'lambdaName': lambda_name})
    link_dao = LinkRedisDAO(**redis_config(lambda_name), prefix=app_prefix())
    index_dao = LinkIndexRedisDAO(redis_client=link_dao.redis, prefix=app_prefix())
    return LinkLifecycleManager(link_dao=link_dao, index_dao=index_dao)
