"""Unit tests for the logout AWS Lambda handler."""

import pytest

from kvshortener.lambdas.logout import app


@pytest.mark.parametrize('home_path, expected', [(None, '/u'), ('', '/u'), ('/home', '/home')])
def test_lambda_handler(monkeypatch, context, home_path, expected):
    """Ensure logout clears the session cookie and redirects home (HTTP 302)."""
    if home_path is None:
        monkeypatch.delenv('HOME_PATH', raising=False)
    else:
        monkeypatch.setenv('HOME_PATH', home_path)

    response = app.lambda_handler({"httpMethod": "POST", "path": "/logout"}, context)
    headers = response['headers']

    assert response['statusCode'] == 302
    assert headers['Location'] == expected
    assert headers['Set-Cookie'] == 'validated=; Max-Age=0; Path=/; HttpOnly; Secure'
