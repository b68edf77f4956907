"""Pytest fixtures for paygate tests."""

import pytest

from paygate.application import Application
from paygate.config import AppConfig


@pytest.fixture
def test_config():
    """Provide a configuration that never reaches a real gateway."""
    return AppConfig.for_testing()


@pytest.fixture
def application(test_config):
    """Provide a booted application."""
    app = Application(test_config)
    app.boot()
    return app
