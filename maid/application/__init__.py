"""Application service layer for maid.

Services combine the extractor with the task domain for one invocation
and return Result values. They perform no I/O.

Example usage:
    >>> from maid.application import load_forest, roll_task
    >>> from maid.domain.shared import is_ok
    >>> from maid.domain.task import SchedulingConfig
    >>>
    >>> forest = load_forest("- [ ] water plants %prio=2\\n", SchedulingConfig()).value
    >>> result = roll_task(forest)
    >>> if is_ok(result):
    ...     position, event = result.value
    ...     print(f"Work on line {position + 1}")
    Work on line 1
"""

from maid.application.task_service import (
    ForestStats,
    get_forest_stats,
    load_forest,
    priority_of,
    reorder_forest,
    roll_task,
    toggle_task,
)

__all__ = [
    "ForestStats",
    "load_forest",
    "roll_task",
    "reorder_forest",
    "priority_of",
    "toggle_task",
    "get_forest_stats",
]
