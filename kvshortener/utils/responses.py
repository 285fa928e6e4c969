"""API Gateway (Lambda proxy) response builders shared by all handlers.

JSON bodies follow the public API shape:

    success: {"success": true, ...payload}
    failure: {"success": false, "error": "<message>", "errorCode": "<code>"}
"""

import json
from typing import Any

from kvshortener.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,DELETE',
}


def response_json(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_success(status_code: int = 200, **payload: Any) -> LambdaResponse:
    return response_json(status_code, {'success': True, **payload})


def response_error(status_code: int, error: str, error_code: str | None = None) -> LambdaResponse:
    body = {'success': False, 'error': error}
    if error_code:
        body['errorCode'] = error_code
    return response_json(status_code, body)


def response_400(error: str = 'Bad Request', error_code: str | None = None) -> LambdaResponse:
    return response_error(400, error, error_code)


def response_401(error: str = 'Unauthorized', error_code: str | None = None) -> LambdaResponse:
    return response_error(401, error, error_code)


def response_404(error: str = 'Not Found', error_code: str | None = None) -> LambdaResponse:
    return response_error(404, error, error_code)


def response_410(error: str = 'Gone', error_code: str | None = None) -> LambdaResponse:
    return response_error(410, error, error_code)


def response_500(error: str = 'Internal Server Error', error_code: str | None = None) -> LambdaResponse:
    return response_error(500, error, error_code)


def response_302(*, location: str, cookie: str | None = None) -> LambdaResponse:
    headers = {'Location': location, **CORS_HEADERS}
    if cookie is not None:
        headers['Set-Cookie'] = cookie
    return {
        'statusCode': 302,
        'headers': headers,
        'body': json.dumps({}),  # no body needed for redirects
    }


def response_text(content: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'text/plain; charset=utf-8', **CORS_HEADERS},
        'body': content,
    }
