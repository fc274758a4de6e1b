"""Pytest configuration and fixtures for esf_events tests."""

import loguru
import pytest
from typer.testing import CliRunner

from esf_events.app import create_app
from esf_events.cli.app import create_cli_app
from esf_events.config.settings import Environment, LogLevel, Settings
from esf_events.events import BaseEventBus, EventBus
from esf_events.infrastructure.logging import reset_logging


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_bus(mocker):
    """Provide a mock event bus for testing collaborators."""
    bus = mocker.Mock(spec=BaseEventBus)
    return bus


@pytest.fixture
def bus(mock_logger):
    """Provide a real EventBus with a mocked logger.

    Use mock_logger assertions to check diagnostics such as unknown-tag
    and listener-leak warnings.
    """
    return EventBus(logger=mock_logger)


@pytest.fixture
def recorder():
    """Provide a listener factory that records (name, event) calls in order."""
    calls: list[tuple[str, object]] = []

    def make(name: str):
        def listener(event):
            calls.append((name, event))

        return listener

    make.calls = calls  # type: ignore[attr-defined]
    return make


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
