"""Effective priority resolution.

This is the only place that interprets ``Task.priority``; every other
component asks for the resolved value because the raw one is often absent.
"""

from .errors import InternalConsistencyError
from .models import TaskForest


def resolve_priority(forest: TaskForest, position: int) -> int:
    """Compute the effective priority of the task at ``position``.

    Rules, checked in order:

    1. Unknown position -> ``default_priority``.
    2. Inheritance on, no explicit priority, has a parent -> the parent's
       resolved priority.
    3. No explicit priority -> ``default_priority``.
    4. Otherwise the explicit priority.

    The parent chain is walked iteratively so deep nesting cannot exhaust
    the interpreter stack.

    Raises:
        InternalConsistencyError: The parent chain loops back on itself.
    """
    config = forest.config
    seen: set[int] = set()
    current: int | None = position

    while current is not None:
        task = forest.get(current)
        if task is None:
            return config.default_priority
        if task.priority is not None:
            return task.priority
        if not config.priority_inheritance or task.parent_position is None:
            return config.default_priority

        seen.add(current)
        current = task.parent_position
        if current in seen:
            raise InternalConsistencyError(
                f"Parent chain of task {position} loops at position {current}"
            )

    return config.default_priority
