"""Shared fixtures for CLI tests."""

import pytest

from esf_events.cli.app import create_cli_app
from esf_events.config.settings import Environment, LogLevel, Settings


@pytest.fixture
def cli_settings():
    """Provide test Settings with known values."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,
        max_listeners=5,
    )


@pytest.fixture
def test_cli_app(cli_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=cli_settings)
