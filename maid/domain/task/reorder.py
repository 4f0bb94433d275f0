"""Reorder engine.

Classifies top-level tasks into buckets, sorts each bucket, and serializes
the forest back into one document string. Children always travel with
their parent in original order; only roots are bucketed and sorted.

All functions are pure - no I/O, no side effects. The forest is read,
never mutated.
"""

import logging
from collections import Counter
from datetime import date, datetime
from statistics import median

from .errors import InternalConsistencyError
from .models import Bucket, Task, TaskForest, TaskState
from .priority import resolve_priority
from .traversal import walk

logger = logging.getLogger(__name__)

# =============================================================================
# Section Headers
# =============================================================================

SECTION_HEADERS: dict[Bucket, str] = {
    Bucket.ANOMALOUS: "## Triage",
    Bucket.UNPRIORITIZED: "## Unprioritized",
    Bucket.PRIORITIZED: "## Prioritized",
    Bucket.DONE: "## Done",
}

DEFAULT_INDENT = "\t"
DEFAULT_NEWLINE = "\n"


# =============================================================================
# Classification
# =============================================================================


def classify(task: Task) -> Bucket:
    """Return the bucket a task belongs to.

    Only the task's own state and explicit priority count; a parent's state
    never leaks into a child's classification.
    """
    if task.priority is None and task.state in (TaskState.OPEN, TaskState.UNSPECIFIED):
        return Bucket.UNPRIORITIZED
    if task.priority is not None and task.state == TaskState.OPEN:
        return Bucket.PRIORITIZED
    if task.state.is_terminal:
        return Bucket.DONE
    # e.g. "- [] ... %prio=2": prioritized but with no checkbox state
    return Bucket.ANOMALOUS


def bucket_roots(forest: TaskForest) -> dict[Bucket, list[Task]]:
    """Group top-level tasks by bucket, keeping source order inside each."""
    buckets: dict[Bucket, list[Task]] = {bucket: [] for bucket in Bucket}
    for task in forest.roots():
        buckets[classify(task)].append(task)
    return buckets


# =============================================================================
# Sorting
# =============================================================================


def prioritized_sort_key(forest: TaskForest, task: Task) -> tuple[bool, datetime, int, int]:
    """Sort key for the prioritized-open bucket.

    Tasks with a due date come first, earliest due first; the rest follow by
    resolved priority, highest first. Position breaks every remaining tie.
    """
    has_due = task.due_at is not None
    return (
        not has_due,
        task.due_at if has_due else datetime.min,
        -resolve_priority(forest, task.position),
        task.position,
    )


def done_sort_key(task: Task) -> tuple[bool, int, int]:
    """Sort key for the done bucket.

    Most recently completed first. Tasks without a completion date come
    after every dated one, in source order.
    """
    done_at: date | None = task.done_at
    return (
        done_at is None,
        -done_at.toordinal() if done_at is not None else 0,
        task.position,
    )


def sort_prioritized(
    forest: TaskForest,
    tasks: list[Task],
    median_split: bool = False,
) -> list[Task]:
    """Sort the prioritized-open bucket.

    With ``median_split`` the bucket is first partitioned at the median
    resolved priority: tasks at or above the median form the high half,
    the rest the low half. Each half is sorted on its own and the high half
    is emitted first, so a due date can only lift a task within its half.
    """

    def key(task: Task) -> tuple[bool, datetime, int, int]:
        return prioritized_sort_key(forest, task)

    if not median_split or not tasks:
        return sorted(tasks, key=key)

    cut = median(resolve_priority(forest, task.position) for task in tasks)
    high = [task for task in tasks if resolve_priority(forest, task.position) >= cut]
    low = [task for task in tasks if resolve_priority(forest, task.position) < cut]
    return sorted(high, key=key) + sorted(low, key=key)


def plan_reorder(forest: TaskForest, median_split: bool = False) -> dict[Bucket, list[int]]:
    """Compute the sorted root positions of every bucket.

    Args:
        forest: The forest to plan for.
        median_split: Enable the median split of the prioritized bucket.

    Returns:
        Mapping of bucket -> root positions in emission order.
    """
    buckets = bucket_roots(forest)
    ordered: dict[Bucket, list[Task]] = {
        # Triage stays in source order so it reads as found.
        Bucket.ANOMALOUS: buckets[Bucket.ANOMALOUS],
        Bucket.UNPRIORITIZED: sorted(buckets[Bucket.UNPRIORITIZED], key=lambda t: t.position),
        Bucket.PRIORITIZED: sort_prioritized(
            forest, buckets[Bucket.PRIORITIZED], median_split=median_split
        ),
        Bucket.DONE: sorted(buckets[Bucket.DONE], key=done_sort_key),
    }
    return {bucket: [task.position for task in tasks] for bucket, tasks in ordered.items()}


# =============================================================================
# Serialization
# =============================================================================


def _check_completeness(forest: TaskForest, emitted: list[int]) -> None:
    """Verify every forest position was emitted exactly once."""
    counts = Counter(emitted)
    missing = [position for position in forest.positions() if position not in counts]
    duplicated = sorted(position for position, n in counts.items() if n > 1)
    unknown = sorted(position for position in counts if position not in forest)

    if missing or duplicated or unknown:
        raise InternalConsistencyError(
            f"Reorder would lose or repeat tasks: missing={missing} "
            f"duplicated={duplicated} unknown={unknown}",
            missing=missing,
            duplicated=duplicated,
        )


def detect_newline(text: str) -> str:
    """Return the line ending of a document's first line, LF if it has none."""
    end = text.find("\n")
    if end > 0 and text[end - 1] == "\r":
        return "\r\n"
    return DEFAULT_NEWLINE


def reorder(
    forest: TaskForest,
    *,
    median_split: bool = False,
    indent: str = DEFAULT_INDENT,
    newline: str = DEFAULT_NEWLINE,
    plan: dict[Bucket, list[int]] | None = None,
) -> str:
    """Serialize the forest as bucketed, sorted sections.

    Sections appear as triage (only when non-empty), unprioritized,
    prioritized, done. Each root is followed by its subtree, one ``indent``
    per level, children in source order.

    Args:
        forest: The forest to reorder.
        median_split: Enable the median split of the prioritized bucket.
        indent: Indentation unit for nested tasks.
        newline: Line ending written between lines.
        plan: A result of ``plan_reorder`` for this forest, computed here
            when omitted.

    Returns:
        The replacement document text, ending with a newline.

    Raises:
        InternalConsistencyError: Some task was not emitted exactly once.
    """
    if plan is None:
        plan = plan_reorder(forest, median_split=median_split)
    emitted: list[int] = []
    sections: list[str] = []

    for bucket in Bucket:
        roots = plan[bucket]
        if bucket == Bucket.ANOMALOUS and not roots:
            continue

        lines = [SECTION_HEADERS[bucket]]
        for root in roots:
            for depth, task in walk(forest, root):
                lines.append(indent * depth + task.raw_text)
                emitted.append(task.position)
        sections.append(newline.join(lines))

    _check_completeness(forest, emitted)

    sizes = {bucket.value: len(roots) for bucket, roots in plan.items()}
    logger.debug(f"Reordered {len(emitted)} tasks: {sizes}")
    return (newline * 2).join(sections) + newline
