import logging
from typing import Any

from kvshortener.models import ViewKind
from kvshortener.services import lifecycle_manager
from kvshortener.dao.exceptions import LinkNotFoundError
from kvshortener.exceptions import LinkExpiredError
from kvshortener.utils.helpers import get_short_url, guarantee_500_response
from kvshortener.utils.responses import response_302, response_400, response_404, response_410, response_success, response_text
from kvshortener.lambdas.redirect_link.constants import (
    MISSING_SHORTCODE,
    LINK_NOT_FOUND,
    LINK_EXPIRED,
    REDIRECT_SUCCESS,
    RAW_CONTENT_SUCCESS,
    FORMATTED_CONTENT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to visit short links

    This Lambda handler follows this procedure to serve links:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the link (counts the visit, purges expired links)
    - Step 3: Present the content according to its view kind

    HTTP responses:
        302: Content is a URL
            headers:
                Location: stored URL
        200: Content is text
            raw display: text/plain body with the content verbatim
            otherwise:   {"success": true, "shortCode": "...", "content": "...", "clicks": 1}
        400: Missing shortcode in path parameters
        404: No link stored under the shortcode
        410: The link has expired
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'shortcode': 'abc123'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400("Missing 'shortcode' in path.", error_code=MISSING_SHORTCODE)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 2- Resolve the link
    manager = lifecycle_manager('redirect_link')
    try:
        view = manager.resolve(shortcode)
    except LinkNotFoundError:
        logger.info('Link not found. Responding with 404.', extra={'shortcode': shortcode, 'event': LINK_NOT_FOUND})
        return response_404(f"Short URL {get_short_url(shortcode, event)} doesn't exist.", error_code=LINK_NOT_FOUND)
    except LinkExpiredError:
        logger.info('Link has expired. Responding with 410.', extra={'shortcode': shortcode, 'event': LINK_EXPIRED})
        return response_410('This link has expired.', error_code=LINK_EXPIRED)

    # 3- Present the content
    match view.kind:
        case ViewKind.REDIRECT:
            logger.info(
                'Redirecting client to target URL. Responding with 302.',
                extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
            )
            return response_302(location=view.content)
        case ViewKind.RAW_TEXT:
            logger.info(
                'Serving raw content. Responding with 200.',
                extra={'shortcode': shortcode, 'event': RAW_CONTENT_SUCCESS},
            )
            return response_text(view.content)
        case _:
            logger.info(
                'Serving formatted content. Responding with 200.',
                extra={'shortcode': shortcode, 'event': FORMATTED_CONTENT_SUCCESS},
            )
            return response_success(shortCode=view.shortcode, content=view.content, clicks=view.clicks)
