"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from aoc.config import Settings
from aoc.geometry import Grid2D, OrthogonalPolygon2D, Point
from aoc.utils.logging import clear_correlation_context, configure_logging


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
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def six_grid() -> Grid2D[int]:
    """3x2 grid holding 1..6 row by row."""
    return Grid2D.from_flat(3, 2, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def notched_polygon() -> OrthogonalPolygon2D:
    """14-vertex orthogonal polygon with area 42 and perimeter 38."""
    return OrthogonalPolygon2D.from_vertices(
        [
            Point.new(0, 0),
            Point.new(6, 0),
            Point.new(6, -5),
            Point.new(4, -5),
            Point.new(4, -7),
            Point.new(6, -7),
            Point.new(6, -9),
            Point.new(1, -9),
            Point.new(1, -7),
            Point.new(0, -7),
            Point.new(0, -5),
            Point.new(2, -5),
            Point.new(2, -2),
            Point.new(0, -2),
        ]
    )
