import logging
from datetime import datetime, UTC
from typing import Any

from kvshortener.utils.access import issue_session_cookie, stats_password_hash, verify_password
from kvshortener.utils.helpers import request_json, guarantee_500_response
from kvshortener.utils.responses import response_302, response_400, response_401
from kvshortener.lambdas.validate_password.constants import (
    INVALID_JSON_BODY,
    PASSWORD_REJECTED,
    PASSWORD_ACCEPTED,
)


logger = logging.getLogger(__name__)

STATS_PATH = '/stats'


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Handle incoming API Gateway requests to unlock the statistics page

    HTTP responses:
        302: Password accepted
            headers:
                Location: /stats
                Set-Cookie: signed session cookie valid for one hour
        400: Malformed request body
        401: Wrong password
        500: Internal server error
    """
    try:
        body = request_json(event)
    except ValueError:
        logger.info('Request body is not valid JSON. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400('Request body must be valid JSON.', error_code=INVALID_JSON_BODY)

    password = body.get('password') if isinstance(body, dict) else None
    secret = stats_password_hash()

    if not verify_password(password, secret):
        logger.info('Wrong statistics password. Responding with 401.', extra={'event': PASSWORD_REJECTED})
        return response_401('Invalid password.', error_code=PASSWORD_REJECTED)

    logger.info('Statistics password accepted. Responding with 302.', extra={'event': PASSWORD_ACCEPTED})
    return response_302(location=STATS_PATH, cookie=issue_session_cookie(secret, datetime.now(UTC)))
