"""Helper utilities for AWS lambda functions and link records.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    get_short_url() -> str
        Get string representation of short URL for a given shortcode
    request_json() -> Any
        Decode the JSON body of an API Gateway event
    is_url() -> bool
        Check whether a string is a well-formed absolute URL
    expiration_deadline() -> datetime | None
        Resolve an expiration class into an absolute expiry time
    remaining_ttl() -> int | None
        Whole seconds left until an expiry time (store TTL)
    format_timestamp() -> str
        Serialize a datetime as ISO-8601 UTC with a 'Z' suffix
    parse_timestamp() -> datetime
        Parse a serialized timestamp back into an aware datetime
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unhandled handler exceptions into HTTP 500 responses

Example:
    Typical usage inside a Lambda handler:

        >>> from kvshortener.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import json
import math
import base64
import logging
import functools
import urllib.parse
from datetime import datetime, UTC
from typing import Any
from collections.abc import Callable

from kvshortener.constants import Expiration, EXPIRATION_DURATIONS, UNKNOWN_INTERNAL_SERVER_ERROR
from kvshortener.exceptions import MissingEnvironmentVariableError
from kvshortener.utils.responses import response_500
from kvshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)

# Schemes which are meaningless without a host component
HOST_SCHEMES = frozenset({'http', 'https', 'ftp', 'ws', 'wss'})


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://example.com"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def get_short_url(shortcode: str, event: dict[str, Any]) -> str:
    """Get string representation of shortened URL"""
    return f'{base_url(event).rstrip("/")}/{shortcode}'


def request_json(event: dict[str, Any]) -> Any:
    """Decode the JSON body of an API Gateway event

    An empty body decodes to an empty dict. Base64-encoded bodies are decoded first.

    Raises:
        ValueError:
            If the body is not valid (base64-encoded) JSON.
    """
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body, validate=True).decode('utf-8')
    return json.loads(body)


def is_url(content: str) -> bool:
    """Check whether `content` is a well-formed absolute URL

    Any parse failure counts as "not a URL". Web schemes (http, https, ftp,
    ws, wss) additionally need a host.

    Example:
        >>> is_url('https://example.com/page')
        True
        >>> is_url('mailto:someone@example.com')
        True
        >>> is_url('just some text')
        False
        >>> is_url('https://')
        False
    """
    # Raw whitespace is never part of a URL ("todo: buy milk" parses with scheme "todo")
    if not content or any(c.isspace() for c in content):
        return False

    try:
        parts = urllib.parse.urlsplit(content)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False

    if not parts.scheme:
        return False
    if parts.scheme in HOST_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path)


def expiration_deadline(expiration: str | None, now: datetime) -> datetime | None:
    """Resolve an expiration class into an absolute expiry time

    Args:
        expiration (str | None):
            One of 'never', '10m', '30m', '1h', '24h', '7d', '30d'.
            None and unrecognized values mean the link never expires.
        now (datetime):
            Reference time (creation time of the link).

    Returns:
        datetime | None: expiry time, or None for links that never expire.

    Example:
        >>> expiration_deadline('1h', datetime(2025, 10, 15, 12, 0, tzinfo=UTC))
        datetime.datetime(2025, 10, 15, 13, 0, tzinfo=datetime.timezone.utc)
        >>> expiration_deadline('forever', datetime.now(UTC)) is None
        True
    """
    if not expiration:
        return None

    try:
        expiration_class = Expiration(expiration)
    except ValueError:
        logger.debug('Unrecognized expiration class %r, link never expires.', expiration)
        return None

    duration = EXPIRATION_DURATIONS.get(expiration_class)
    return None if duration is None else now + duration


def remaining_ttl(expires_at: datetime | None, now: datetime) -> int | None:
    """Whole seconds left until `expires_at` (floored, never below 1)

    Redis rejects non-positive TTLs; a link with less than a second left is
    stored for one more second and purged lazily on its next observation.

    Returns:
        int | None: TTL in seconds, None when the link never expires.
    """
    if expires_at is None:
        return None
    return max(1, math.floor((expires_at - now).total_seconds()))


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as ISO-8601 UTC with millisecond precision

    Example:
        >>> format_timestamp(datetime(2025, 10, 15, 12, 0, tzinfo=UTC))
        '2025-10-15T12:00:00.000Z'
    """
    # fmt: off
    return value.astimezone(UTC) \
                .isoformat(timespec='milliseconds') \
                .replace('+00:00', 'Z')
    # fmt: on


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given"""
    parsed = datetime.fromisoformat(value)
    return parsed.replace(tzinfo=UTC) if parsed.tzinfo is None else parsed


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('STATS_PASSWORD_HASH')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'STATS_PASSWORD_HASH'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with HTTP 500 when a handler raises unexpectedly

    When running locally the original exception is re-raised so it shows up
    in the SAM console.
    """

    @functools.wraps(handler)
    def wrapper(event, context):
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.', extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR})
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
