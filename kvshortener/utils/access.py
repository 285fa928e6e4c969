"""Password gate for the link statistics endpoint.

A visitor proves knowledge of the statistics password once (POST /validate)
and receives a short-lived session cookie. The cookie value is
`<expiry epoch seconds>.<HMAC-SHA256 signature>`, signed with the configured
password hash, so it cannot be forged by simply setting `validated=true`.

Functions:
    stats_password_hash() -> str
        Configured SHA-256 hex digest of the statistics password
    hash_password(password) -> str
        SHA-256 hex digest of a password
    verify_password(password, expected_hash) -> bool
        Constant-time comparison of a password against a stored hash
    issue_session_cookie(secret, now) -> str
        Set-Cookie header value for a fresh session
    clear_session_cookie() -> str
        Set-Cookie header value which removes the session
    has_valid_session(event, secret, now) -> bool
        True if the request carries an unexpired, correctly signed session
"""

import os
import hmac
import hashlib
import logging
from datetime import datetime
from http.cookies import SimpleCookie, CookieError

from kvshortener.types import LambdaEvent
from kvshortener.constants import ENV, Session
from kvshortener.exceptions import MissingEnvironmentVariableError
from kvshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def stats_password_hash() -> str:
    """Return the configured statistics password hash

    Falls back to the development hash only when running locally.

    Raises:
        MissingEnvironmentVariableError:
            If STATS_PASSWORD_HASH is unset outside of local development.
    """
    configured = os.environ.get(ENV.App.STATS_PASSWORD_HASH)
    if configured:
        return configured.strip().lower()

    if running_locally():
        logger.warning('STATS_PASSWORD_HASH is not set. Using the development password hash.')
        return Session.DEV_PASSWORD_HASH

    raise MissingEnvironmentVariableError(f"Missing required environment variables: '{ENV.App.STATS_PASSWORD_HASH}'")


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode('utf-8')).hexdigest()


def verify_password(password: str, expected_hash: str) -> bool:
    if not isinstance(password, str):
        return False
    return hmac.compare_digest(hash_password(password), expected_hash.lower())


def _sign(secret: str, payload: str) -> str:
    return hmac.new(secret.encode('utf-8'), payload.encode('utf-8'), hashlib.sha256).hexdigest()


def issue_session_cookie(secret: str, now: datetime) -> str:
    expires = str(int(now.timestamp()) + Session.MAX_AGE)
    token = f'{expires}.{_sign(secret, expires)}'
    return f'{Session.COOKIE_NAME}={token}; Max-Age={Session.MAX_AGE}; Path=/; HttpOnly; Secure'


def clear_session_cookie() -> str:
    return f'{Session.COOKIE_NAME}=; Max-Age=0; Path=/; HttpOnly; Secure'


def _request_cookies(event: LambdaEvent) -> str:
    headers = event.get('headers') or {}
    for name, value in headers.items():
        if name.lower() == 'cookie' and value:
            return value
    # HTTP API (payload v2) passes cookies separately
    return '; '.join(event.get('cookies') or [])


def has_valid_session(event: LambdaEvent, secret: str, now: datetime) -> bool:
    cookies = SimpleCookie()
    try:
        cookies.load(_request_cookies(event))
    except CookieError:
        return False

    morsel = cookies.get(Session.COOKIE_NAME)
    if morsel is None:
        return False

    expires, _, signature = morsel.value.partition('.')
    if not expires.isdigit() or not signature:
        return False
    if not hmac.compare_digest(_sign(secret, expires), signature):
        return False
    return int(expires) > now.timestamp()
