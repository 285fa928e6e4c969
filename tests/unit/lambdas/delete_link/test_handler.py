"""Unit tests for the delete_link AWS Lambda handler.

Test coverage includes:
    1. Deleting an existing link returns HTTP 200.
    2. Missing shortcode returns HTTP 400.
    3. Unknown (or already deleted) shortcode returns HTTP 404.
    4. Data store failures return HTTP 500.
"""

import json

import pytest

from kvshortener.lambdas.delete_link import app
from kvshortener.dao.exceptions import DataStoreError, LinkNotFoundError


@pytest.fixture()
def apigw_event():
    return {
        "resource": "/api/delete/{shortcode}",
        "pathParameters": {"shortcode": "abc123"},
        "httpMethod": "DELETE",
        "path": "/api/delete/abc123",
    }


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(patch_lifecycle_manager):
    patch_lifecycle_manager(app)


# -------------------------------
# 1. Successful deletion
# -------------------------------


def test_lambda_handler(apigw_event, context, manager, lambda_names):
    response = app.lambda_handler(apigw_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert body == {'success': True, 'message': 'Link deleted.'}
    assert lambda_names == ['delete_link']
    manager.delete.assert_called_once_with('abc123')


# -------------------------------
# 2. Missing shortcode
# -------------------------------


def test_lambda_handler_without_shortcode(apigw_event, context, manager):
    apigw_event['pathParameters'] = None

    response = app.lambda_handler(apigw_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 400
    assert body['errorCode'] == 'MISSING_SHORTCODE'
    manager.delete.assert_not_called()


# -------------------------------
# 3. Unknown shortcode
# -------------------------------


def test_lambda_handler_with_unknown_shortcode(apigw_event, context, manager):
    """Ensure deleting twice answers 404 instead of crashing."""
    manager.delete.side_effect = LinkNotFoundError("Link with code 'abc123' not found.")

    response = app.lambda_handler(apigw_event, context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 404
    assert body == {'success': False, 'error': "Link with code 'abc123' not found.", 'errorCode': 'LINK_NOT_FOUND'}


# -------------------------------
# 4. Data store failures
# -------------------------------


def test_lambda_handler_with_data_store_error(apigw_event, context, manager):
    manager.delete.side_effect = DataStoreError('down')

    response = app.lambda_handler(apigw_event, context)

    assert response['statusCode'] == 500
