"""Task application service.

Orchestrates the task domain for one invocation: a document's text comes
in, a forest is built fresh from it, and one operation runs against that
snapshot. All functions are pure - no I/O, no side effects. Domain errors
are returned as Err values, never swallowed.
"""

import logging
from datetime import date

from pydantic import BaseModel

from maid.domain.shared import Err, Ok, Result
from maid.domain.task import (
    Bucket,
    ForestError,
    ForestReordered,
    InternalConsistencyError,
    NoEligibleTask,
    RandomSource,
    SchedulingConfig,
    TaskForest,
    TaskRolled,
    TaskState,
    TaskToggled,
    build_forest,
    count_by_state,
    eligible_weights,
    plan_reorder,
    reorder,
    resolve_priority,
    sample_task,
    toggle_completion,
)
from maid.domain.task.completion import CHECKBOX_PATTERN
from maid.domain.task.reorder import DEFAULT_INDENT, DEFAULT_NEWLINE
from maid.infrastructure.markdown import extract_records

logger = logging.getLogger(__name__)


class ForestStats(BaseModel):
    """Summary of a task forest for the status command."""

    total: int
    by_state: dict[str, int]
    bucket_sizes: dict[str, int]
    eligible: int
    total_weight: int


def load_forest(text: str, config: SchedulingConfig) -> Result[TaskForest, ForestError]:
    """Extract tasks from a document and link them into a forest.

    Args:
        text: Full document text.
        config: Scheduling settings for the forest.

    Returns:
        Ok(TaskForest), or Err(ForestError) when the records are malformed.
    """
    records = extract_records(text)
    try:
        return Ok(build_forest(records, config))
    except ForestError as e:
        logger.error(f"Cannot build task forest: {e}")
        return Err(e)


def roll_task(
    forest: TaskForest,
    rng: RandomSource | None = None,
) -> Result[tuple[int, TaskRolled], NoEligibleTask]:
    """Pick a task to work on, weighted by resolved priority.

    Returns:
        Ok((position, TaskRolled)), or Err(NoEligibleTask()) when nothing
        can be picked. The caller must not move the cursor in that case.
    """
    position = sample_task(forest, rng)
    if position is None:
        return Err(NoEligibleTask())

    pairs = eligible_weights(forest)
    event = TaskRolled(
        position=position,
        weight=resolve_priority(forest, position),
        total_weight=sum(weight for _, weight in pairs),
        candidates=len(pairs),
    )
    logger.info(f"Rolled task at line {position + 1} ({event.weight}/{event.total_weight})")
    return Ok((position, event))


def reorder_forest(
    forest: TaskForest,
    median_split: bool = False,
    indent: str = DEFAULT_INDENT,
    newline: str = DEFAULT_NEWLINE,
) -> Result[tuple[str, ForestReordered], InternalConsistencyError]:
    """Produce the reordered document for a forest.

    Returns:
        Ok((text, ForestReordered)), or Err(InternalConsistencyError) if the
        output would lose or repeat a task. The caller must not write the
        document in that case.
    """
    try:
        plan = plan_reorder(forest, median_split=median_split)
        text = reorder(forest, indent=indent, newline=newline, plan=plan)
    except InternalConsistencyError as e:
        logger.error(f"Refusing reorder output: {e}")
        return Err(e)

    event = ForestReordered(
        task_count=len(forest),
        bucket_sizes={bucket.value: len(roots) for bucket, roots in plan.items()},
    )
    return Ok((text, event))


def priority_of(forest: TaskForest, position: int) -> Result[int, str]:
    """Resolved priority of the task on a line.

    Unlike ``resolve_priority`` this refuses positions that are not tasks,
    since a user asking about a line expects that line to be a task.
    """
    if position not in forest:
        return Err(f"Line {position + 1} is not a task")
    return Ok(resolve_priority(forest, position))


def toggle_task(text: str, position: int, today: date) -> Result[tuple[str, TaskToggled], str]:
    """Flip the checkbox on one line of a document.

    Line endings and every other line are preserved exactly.

    Args:
        text: Full document text.
        position: 0-based line index.
        today: Date stamped on newly completed tasks.

    Returns:
        Ok((new_text, TaskToggled)), or Err(str) if the line can't be toggled.
    """
    lines = text.splitlines(keepends=True)
    if position < 0 or position >= len(lines):
        return Err(f"Line {position + 1} is out of range (document has {len(lines)} lines)")

    line = lines[position]
    body = line.rstrip("\r\n")
    ending = line[len(body) :]

    toggled = toggle_completion(body, today)
    if toggled is None:
        return Err(f"Line {position + 1} has no open or done checkbox")

    lines[position] = toggled + ending
    was_open = CHECKBOX_PATTERN.search(body).group(1) == " "
    state = TaskState.DONE if was_open else TaskState.OPEN
    return Ok(("".join(lines), TaskToggled(position=position, state=state)))


def get_forest_stats(forest: TaskForest) -> ForestStats:
    """Calculate summary statistics for a forest."""
    pairs = eligible_weights(forest)
    plan = plan_reorder(forest)
    return ForestStats(
        total=len(forest),
        by_state={state.value: n for state, n in count_by_state(forest).items()},
        bucket_sizes={bucket.value: len(plan[bucket]) for bucket in Bucket},
        eligible=len(pairs),
        total_weight=sum(weight for _, weight in pairs),
    )
