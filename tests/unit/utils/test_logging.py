"""Unit tests for JSON logging in logging.py

Test coverage includes:
    1. JsonFormatter renders base fields, extras and exceptions.
    2. initialize_logging() installs the JSON handler at LOG_LEVEL.
"""

import sys
import json
import logging

import pytest

from kvshortener.utils.logging import JsonFormatter, initialize_logging


def make_record(msg='Redirecting client. Responding with 302.', args=(), exc_info=None, **extra):
    record = logging.LogRecord('kvshortener.test', logging.INFO, __file__, 10, msg, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JsonFormatter
# -------------------------------


def test_json_formatter_base_fields():
    record = make_record('Created %s links.', args=(3,))
    record.created = 1760529600.0  # 2025-10-15T12:00:00Z

    log = json.loads(JsonFormatter().format(record))

    assert log == {
        'timestamp': '2025-10-15T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'kvshortener.test',
        'message': 'Created 3 links.',
    }


def test_json_formatter_includes_extras():
    record = make_record(shortcode='abc123', event='REDIRECT_SUCCESS', level='spoofed')

    log = json.loads(JsonFormatter().format(record))

    assert log['shortcode'] == 'abc123'
    assert log['event'] == 'REDIRECT_SUCCESS'
    assert log['level'] == 'INFO'  # extras never overwrite base fields


def test_json_formatter_serializes_unknown_types():
    record = make_record(payload={1, 2})

    log = json.loads(JsonFormatter().format(record))

    assert log['payload'] == str({1, 2})


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record(exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.mark.parametrize('level, expected', [(None, logging.INFO), ('debug', logging.DEBUG), ('WARNING', logging.WARNING)])
def test_initialize_logging(monkeypatch, level, expected):
    if level is None:
        monkeypatch.delenv('LOG_LEVEL', raising=False)
    else:
        monkeypatch.setenv('LOG_LEVEL', level)

    initialize_logging()

    root = logging.getLogger()
    assert root.level == expected
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
