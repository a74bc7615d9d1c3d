"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Development Settings stand-in (console rendering, DEBUG level)."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "DEBUG"
    settings.PREFIX = "dev-"
    settings.is_production = False
    return settings
