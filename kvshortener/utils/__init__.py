from kvshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config, redis_config
from kvshortener.utils.helpers import (
    base_url,
    get_short_url,
    request_json,
    is_url,
    expiration_deadline,
    remaining_ttl,
    format_timestamp,
    parse_timestamp,
    require_environment,
    guarantee_500_response,
)
from kvshortener.utils.shortener import generate_shortcode
from kvshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'redis_config',
    'base_url',
    'get_short_url',
    'request_json',
    'is_url',
    'expiration_deadline',
    'remaining_ttl',
    'format_timestamp',
    'parse_timestamp',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
