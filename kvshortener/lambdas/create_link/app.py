import logging
from typing import Any

from kvshortener.services import lifecycle_manager
from kvshortener.dao.exceptions import LinkAlreadyExistsError
from kvshortener.exceptions import InvalidInputError
from kvshortener.utils.helpers import base_url, request_json, guarantee_500_response
from kvshortener.utils.responses import response_400, response_success
from kvshortener.lambdas.create_link.constants import (
    INVALID_JSON_BODY,
    INVALID_INPUT,
    SHORTCODE_TAKEN,
    LINK_CREATED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to create short links

    This Lambda handler follows this procedure to create links:
    - Step 1: Decode the JSON request body
    - Step 2: Store the content under a custom or generated shortcode
    - Step 3: Respond with the public short URL

    Request body:
        content (str): URL or text to shorten (required)
        customCode (str): user-chosen shortcode (optional)
        expiration (str): 'never', '10m', '30m', '1h', '24h', '7d' or '30d' (optional)
        rawDisplay (bool): always serve content as plain text (optional)

    HTTP responses:
        200: Link created
            body: {"success": true, "shortUrl": "...", "shortCode": "..."}
        400: Bad client request
            error: malformed body, empty content, invalid or taken custom code
        500: Internal server error
            error: server experienced an internal error

    Example:
        >>> event = {'body': '{"content": "https://example.com", "customCode": "ex"}'}
        >>> response = lambda_handler(event, None)
        >>> json.loads(response['body'])
        {'success': True, 'shortUrl': 'http://localhost:3000/ex', 'shortCode': 'ex'}
    """
    # 1- Decode request body
    try:
        body = request_json(event)
    except ValueError:
        logger.info('Request body is not valid JSON. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('Request body must be valid JSON.', error_code=INVALID_JSON_BODY)

    if not isinstance(body, dict):
        logger.info('Request body is not a JSON object. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('Request body must be a JSON object.', error_code=INVALID_JSON_BODY)

    # 2- Store the link
    manager = lifecycle_manager('create_link')
    try:
        created = manager.create(
            content=body.get('content'),
            custom_code=body.get('customCode'),
            expiration=body.get('expiration'),
            raw_display=bool(body.get('rawDisplay', False)),
            base_url=base_url(event),
        )
    except InvalidInputError as e:
        logger.info('Invalid link parameters. Responding with 400.', extra={'event': INVALID_INPUT, 'reason': str(e)})
        return response_400(str(e), error_code=INVALID_INPUT)
    except LinkAlreadyExistsError:
        logger.info(
            'Custom shortcode already taken. Responding with 400.',
            extra={'shortcode': body.get('customCode'), 'event': SHORTCODE_TAKEN},
        )
        return response_400('This short code is already taken, please choose another one.', error_code=SHORTCODE_TAKEN)

    # 3- Respond with the short URL
    logger.info(
        'Link created. Responding with 200.',
        extra={'shortcode': created.shortcode, 'event': LINK_CREATED},
    )
    return response_success(shortUrl=created.short_url, shortCode=created.shortcode)
