"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def make_settings():
    """Build Settings stand-ins with a given level and mode."""

    def _make(log_level: str = "INFO", is_production: bool = False) -> Mock:
        settings = Mock(spec=Settings)
        settings.LOG_LEVEL = log_level
        settings.is_production = is_production
        return settings

    return _make


@pytest.fixture
def mock_settings(make_settings):
    """Development-mode settings at INFO level."""
    return make_settings()
