from unittest.mock import MagicMock

import pytest

from kvshortener.services import LinkLifecycleManager


@pytest.fixture(autouse=True)
def _deployed_environment(monkeypatch):
    """Run handlers as if deployed, so unexpected errors become HTTP 500 responses."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture()
def context():
    class _Context:
        function_name = 'test_function'
    return _Context()


@pytest.fixture()
def manager():
    """Mock LinkLifecycleManager handed out by the lifecycle_manager() factory."""
    return MagicMock(spec=LinkLifecycleManager)


@pytest.fixture()
def lambda_names():
    """Names passed to the lifecycle_manager() factory."""
    return []


@pytest.fixture()
def patch_lifecycle_manager(monkeypatch, manager, lambda_names):
    def _patch(app):
        def _lifecycle_manager(lambda_name):
            lambda_names.append(lambda_name)
            return manager

        monkeypatch.setattr(app, 'lifecycle_manager', _lifecycle_manager)

    return _patch
