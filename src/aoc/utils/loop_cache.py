"""Iterate a state machine many times by detecting when it starts to repeat.

Puzzles often ask for the state after a huge number of steps of a
deterministic process that falls into a cycle long before that. `run` keeps
every state seen so far and, on the first repeat, jumps straight to the
answer instead of stepping through the remaining iterations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from aoc.utils.logging import get_logger

T = TypeVar("T")


def run(item: T, max_num_iterations: int, step: Callable[[T], T]) -> T:
    """Apply step to item max_num_iterations times, skipping repeated cycles.

    States are compared with ``==`` only, so they do not need to be hashable.
    step must return a new state rather than mutate its argument.

    Args:
        item: Initial state.
        max_num_iterations: Number of times step would be applied.
        step: Function computing the next state.

    Returns:
        The state after max_num_iterations steps.

    Raises:
        ValueError: If max_num_iterations is not positive.

    Example:
        >>> run(0, 1_000_000_000, lambda n: (n + 1) % 7)
        6
    """
    if max_num_iterations <= 0:
        raise ValueError("max_num_iterations must be positive")

    history = [item]
    current = item
    for _ in range(max_num_iterations):
        current = step(current)
        if current in history:
            offset = history.index(current)
            cycle_length = len(history) - offset
            logger = get_logger(__name__)
            logger.debug(
                "Cycle detected",
                offset=offset,
                cycle_length=cycle_length,
                iterations=max_num_iterations,
            )
            return history[offset + (max_num_iterations - offset) % cycle_length]
        history.append(current)
    return current
