"""Task tree construction.

Builds a linked TaskForest from the extractor's flat, source-ordered
records. Pure - no I/O, no side effects beyond the returned structure.
"""

import logging
from collections.abc import Iterable

from .errors import DuplicatePositionError, MissingParentError
from .models import SchedulingConfig, Task, TaskForest, TaskRecord

logger = logging.getLogger(__name__)


def build_forest(
    records: Iterable[TaskRecord],
    config: SchedulingConfig | None = None,
) -> TaskForest:
    """Build a forest from records in document order.

    Each record becomes a Task; a record with a parent is appended to that
    parent's ``children``. Parents always precede their children in source
    order, so the parent must already be in the forest when the child
    arrives.

    Args:
        records: Extractor output, top to bottom.
        config: Scheduling settings attached to the forest.

    Returns:
        Fully linked TaskForest.

    Raises:
        MissingParentError: A record names a parent not yet seen.
        DuplicatePositionError: A position occurs twice.
    """
    tasks: dict[int, Task] = {}

    for record in records:
        if record.position in tasks:
            raise DuplicatePositionError(record.position)

        parent_position = record.parent_position
        if parent_position is not None:
            parent = tasks.get(parent_position)
            if parent is None:
                raise MissingParentError(record.position, parent_position)
            parent.children.append(record.position)

        tasks[record.position] = Task.from_record(record)

    logger.debug(f"Built forest with {len(tasks)} tasks")
    return TaskForest(tasks=tasks, config=config or SchedulingConfig())
