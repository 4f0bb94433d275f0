"""Weighted random task selection.

Pure given the random source: the only input besides the forest is an
object with a ``randrange(n)`` method, drawn from exactly once per roll.
"""

import logging
import random
from typing import Protocol

from .errors import InternalConsistencyError
from .models import TaskForest
from .priority import resolve_priority

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw an integer uniformly from ``[0, n)``."""

    def randrange(self, stop: int) -> int: ...


def is_eligible(forest: TaskForest, position: int) -> bool:
    """Check if a task may be rolled.

    Only open tasks with a non-negative resolved priority qualify. A
    negative priority is how a user pauses a task.
    """
    task = forest.get(position)
    if task is None or not task.is_open():
        return False
    return resolve_priority(forest, position) >= 0


def eligible_weights(forest: TaskForest) -> list[tuple[int, int]]:
    """Return ``(position, weight)`` for every eligible task, in source order."""
    return [
        (position, resolve_priority(forest, position))
        for position in forest.positions()
        if is_eligible(forest, position)
    ]


def sample_task(forest: TaskForest, rng: RandomSource | None = None) -> int | None:
    """Pick one eligible task with probability proportional to its priority.

    Args:
        forest: The forest to roll from.
        rng: Random source; a fresh ``random.Random()`` when omitted.

    Returns:
        The chosen position, or None when the total weight is below 1
        (no task can be picked). Priority-0 tasks are eligible but never
        chosen.
    """
    pairs = eligible_weights(forest)
    total = sum(weight for _, weight in pairs)
    if total < 1:
        logger.debug(f"No rollable task among {len(pairs)} eligible")
        return None

    index = (rng or random.Random()).randrange(total)
    for position, weight in pairs:
        if weight > index:
            logger.debug(f"Rolled {index}/{total} -> position {position}")
            return position
        index -= weight

    # randrange(total) < total, so the walk always lands on a pair
    raise InternalConsistencyError(f"Roll index escaped total weight {total}")
