import logging
from datetime import datetime, UTC
from typing import Any

from kvshortener.models import LinkModel
from kvshortener.services import lifecycle_manager
from kvshortener.utils.access import has_valid_session, stats_password_hash
from kvshortener.utils.helpers import format_timestamp, guarantee_500_response
from kvshortener.utils.responses import response_401, response_success
from kvshortener.lambdas.link_stats.constants import STATS_UNAUTHORIZED, STATS_SUCCESS


logger = logging.getLogger(__name__)


def link_summary(link: LinkModel) -> dict:
    return {
        'shortCode': link.shortcode,
        'content': link.content,
        'isUrl': link.is_url,
        'clicks': link.clicks,
        'createdAt': format_timestamp(link.created_at),
        'expiresAt': None if link.expires_at is None else format_timestamp(link.expires_at),
    }


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests for link statistics

    Only visitors holding a valid session cookie (see validate_password) may
    see the statistics. Enumerating links also prunes stale index entries.

    HTTP responses:
        200: Statistics of every live link
            body: {"success": true, "links": [{"shortCode": ..., "clicks": ..., ...}]}
        401: Missing, forged or expired session cookie
        500: Internal server error
    """
    if not has_valid_session(event, stats_password_hash(), datetime.now(UTC)):
        logger.info('No valid session for statistics. Responding with 401.', extra={'event': STATS_UNAUTHORIZED})
        return response_401('Password required.', error_code=STATS_UNAUTHORIZED)

    manager = lifecycle_manager('link_stats')
    links = [link_summary(link) for link in manager.enumerate()]

    logger.info('Serving link statistics. Responding with 200.', extra={'links': len(links), 'event': STATS_SUCCESS})
    return response_success(links=links)
