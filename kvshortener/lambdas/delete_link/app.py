import logging
from typing import Any

from kvshortener.services import lifecycle_manager
from kvshortener.dao.exceptions import LinkNotFoundError
from kvshortener.utils.helpers import guarantee_500_response
from kvshortener.utils.responses import response_400, response_404, response_success
from kvshortener.lambdas.delete_link.constants import (
    MISSING_SHORTCODE,
    LINK_NOT_FOUND,
    LINK_DELETED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to delete short links

    HTTP responses:
        200: Link deleted
            body: {"success": true, "message": "Link deleted."}
        400: Missing shortcode in path parameters
        404: No link stored under the shortcode
        500: Internal server error
    """
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400("Missing 'shortcode' in path.", error_code=MISSING_SHORTCODE)

    manager = lifecycle_manager('delete_link')
    try:
        manager.delete(shortcode)
    except LinkNotFoundError:
        logger.info('Link not found. Responding with 404.', extra={'shortcode': shortcode, 'event': LINK_NOT_FOUND})
        return response_404(f"Link with code '{shortcode}' not found.", error_code=LINK_NOT_FOUND)

    logger.info('Link deleted. Responding with 200.', extra={'shortcode': shortcode, 'event': LINK_DELETED})
    return response_success(message='Link deleted.')
