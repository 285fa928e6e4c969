import os
import logging
from typing import Any

from kvshortener.constants import ENV
from kvshortener.utils.access import clear_session_cookie
from kvshortener.utils.helpers import guarantee_500_response
from kvshortener.utils.responses import response_302
from kvshortener.lambdas.logout.constants import LOGOUT_SUCCESS


logger = logging.getLogger(__name__)

DEFAULT_HOME_PATH = '/u'


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Clear the statistics session cookie and send the client home (HTTP 302)"""
    location = os.getenv(ENV.App.HOME_PATH) or DEFAULT_HOME_PATH
    logger.info('Statistics session cleared. Responding with 302.', extra={'event': LOGOUT_SUCCESS})
    return response_302(location=location, cookie=clear_session_cookie())
