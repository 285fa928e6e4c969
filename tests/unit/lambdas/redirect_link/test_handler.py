"""Unit tests for the redirect_link AWS Lambda handler.

Test coverage includes:

1. Successful resolution
   - Ensures URLs return a 302 redirect with correct Location header.
   - Ensures raw content is served as plain text.
   - Ensures formatted content is served as JSON with the click count.

2. Invalid path parameters
   - Ensures requests missing the `shortcode` parameter return HTTP 400.

3. Unknown and expired links
   - Ensures unknown shortcodes return HTTP 404.
   - Ensures expired links return HTTP 410.

4. Unexpected errors
   - Ensures configuration and data store failures return HTTP 500.
"""

import json

import pytest

from kvshortener.lambdas.redirect_link import app
from kvshortener.models import ResolvedView, ViewKind
from kvshortener.dao.exceptions import DataStoreError, LinkNotFoundError
from kvshortener.exceptions import BadConfigurationError, LinkExpiredError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture()
def successful_event():
    return {
        "resource": "/{shortcode}",
        "pathParameters": {"shortcode": "abc123"},
        "httpMethod": "GET",
        "path": "/abc123",
        "requestContext": {"domainName": "testhost:1000", "stage": "test"}
    }


@pytest.fixture()
def bad_request_400():
    return {
        "resource": "/{shortcode}",
        "pathParameters": {"invalid": "path"},
        "httpMethod": "GET",
        "path": "/abc123",
        "requestContext": {"domainName": "testhost:1000", "stage": "test"}
    }


@pytest.fixture()
def target_url():
    return 'https://example.com/blog/chuck-norris-is-awesome'


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(patch_lifecycle_manager, manager, target_url):
    """Automatically patch Lambda dependencies for all tests."""
    patch_lifecycle_manager(app)
    manager.resolve.return_value = ResolvedView(kind=ViewKind.REDIRECT, shortcode='abc123', content=target_url, clicks=1)


# -------------------------------
# 1. Successful resolution
# -------------------------------


def test_lambda_handler(successful_event, context, manager, lambda_names, target_url):
    """Ensure Lambda correctly redirects URL links (HTTP 302)."""
    response = app.lambda_handler(successful_event, context)
    headers = response['headers']
    body = json.loads(response['body'])

    assert response['statusCode'] == 302
    assert body == {}
    assert headers['Location'] == target_url

    assert lambda_names == ['redirect_link']
    manager.resolve.assert_called_once_with('abc123')


def test_lambda_handler_with_raw_content(successful_event, context, manager):
    """Ensure raw display links are served verbatim as plain text."""
    manager.resolve.return_value = ResolvedView(kind=ViewKind.RAW_TEXT, shortcode='abc123', content='<b>plain</b>\nnotes', clicks=3)

    response = app.lambda_handler(successful_event, context)

    assert response['statusCode'] == 200
    assert response['headers']['Content-Type'] == 'text/plain; charset=utf-8'
    assert response['body'] == '<b>plain</b>\nnotes'


def test_lambda_handler_with_formatted_content(successful_event, context, manager):
    """Ensure text links are served as JSON with the post-increment click count."""
    manager.resolve.return_value = ResolvedView(kind=ViewKind.FORMATTED, shortcode='abc123', content='meeting notes', clicks=7)

    response = app.lambda_handler(successful_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert body == {'success': True, 'shortCode': 'abc123', 'content': 'meeting notes', 'clicks': 7}


# -------------------------------
# 2. Invalid path parameters
# -------------------------------


@pytest.mark.parametrize('path_parameters', [{"invalid": "path"}, None, {"shortcode": ""}])
def test_lambda_handler_with_invalid_path_parameters(bad_request_400, context, manager, path_parameters):
    """Ensure missing `shortcode` path parameter returns HTTP 400."""
    bad_request_400['pathParameters'] = path_parameters

    response = app.lambda_handler(bad_request_400, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 400
    assert body == {'success': False, 'error': "Missing 'shortcode' in path.", 'errorCode': 'MISSING_SHORTCODE'}
    manager.resolve.assert_not_called()


# -------------------------------
# 3. Unknown and expired links
# -------------------------------


def test_lambda_handler_with_unknown_shortcode(successful_event, context, manager):
    """Ensure non-existing shortcodes return HTTP 404."""
    manager.resolve.side_effect = LinkNotFoundError("Link with code 'abc123' not found.")

    response = app.lambda_handler(successful_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 404
    assert body['errorCode'] == 'LINK_NOT_FOUND'
    assert body['error'] == "Short URL https://testhost:1000/abc123 doesn't exist."


def test_lambda_handler_with_expired_link(successful_event, context, manager):
    """Ensure expired links return HTTP 410."""
    manager.resolve.side_effect = LinkExpiredError("Link with code 'abc123' has expired.")

    response = app.lambda_handler(successful_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 410
    assert body == {'success': False, 'error': 'This link has expired.', 'errorCode': 'LINK_EXPIRED'}


# -------------------------------
# 4. Unexpected errors
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        DataStoreError("Can't connect to Redis at redis:6379/0."),
        BadConfigurationError("AppConfig document has no 'redirect_link' configuration for the active backend."),
    ],
)
def test_lambda_handler_with_unexpected_error(successful_event, context, manager, error):
    """Ensure infrastructure failures return HTTP 500."""
    manager.resolve.side_effect = error

    response = app.lambda_handler(successful_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body == {'success': False, 'error': 'Internal Server Error', 'errorCode': 'UNKNOWN_INTERNAL_SERVER_ERROR'}


def test_lambda_handler_reraises_when_running_locally(monkeypatch, successful_event, context, manager):
    monkeypatch.setenv('AWS_SAM_LOCAL', 'true')
    manager.resolve.side_effect = DataStoreError('down')

    with pytest.raises(DataStoreError):
        app.lambda_handler(successful_event, context)
