"""Structured logging configuration using structlog.

Puzzle solutions tag their log events with the puzzle being solved and the
part (1 or 2), so interleaved runs stay readable. Output is either JSON or
colored console text.
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from aoc.config import settings

# Context variables for correlation IDs
_puzzle: ContextVar[str | None] = ContextVar("puzzle", default=None)
_part: ContextVar[int | None] = ContextVar("part", default=None)


def set_correlation_context(
    puzzle: str | None = None,
    part: int | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        puzzle: Puzzle identifier (e.g., "2023-18")
        part: Puzzle part being solved
    """
    if puzzle is not None:
        _puzzle.set(puzzle)
    if part is not None:
        _part.set(part)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _puzzle.set(None)
    _part.set(None)


@contextmanager
def puzzle_context(puzzle: str, part: int | None = None) -> Iterator[None]:
    """Tag every log event emitted inside the block with a puzzle and part.

    The previous correlation values are restored on exit, so contexts nest.
    """
    puzzle_token = _puzzle.set(puzzle)
    part_token = _part.set(part)
    try:
        yield
    finally:
        _part.reset(part_token)
        _puzzle.reset(puzzle_token)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    puzzle = _puzzle.get()
    part = _part.get()

    if puzzle is not None:
        event_dict["puzzle"] = puzzle
    if part is not None:
        event_dict["part"] = part

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Library modules that use plain stdlib loggers share the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
