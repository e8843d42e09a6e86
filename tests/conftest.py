"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest
import structlog

from latsize.config import Settings
from latsize.geometry import Polygon, as_polygon
from latsize.utils.logging import (
    _configure_quiet_default,
    clear_correlation_context,
    configure_logging,
)


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        SAMPLE_COUNT=5,
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def unconfigured_logging() -> Iterator[None]:
    """Drop any structlog configuration made by earlier tests."""
    structlog.reset_defaults()
    _configure_quiet_default()
    yield
    structlog.reset_defaults()
    _configure_quiet_default()


@pytest.fixture
def quadrilateral() -> Polygon:
    """Polygon whose first reduction step takes the shortcut branch."""
    return as_polygon([(0, 0), (3, 5), (7, 9), (8, 12)])


@pytest.fixture
def sheared_quadrilateral() -> Polygon:
    """Polygon reduced in a single range-scan step."""
    return as_polygon([(0, 0), (2, 3), (2, 7), (4, 8)])


@pytest.fixture
def unit_triangle() -> Polygon:
    return as_polygon([(0, 0), (1, 0), (0, 1)])
