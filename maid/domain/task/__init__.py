"""Task domain - checklist forest, priorities, rolling and reordering.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskState - Checkbox state enumeration
    TaskRecord - Raw task handed over by an extractor
    Task - Forest node with position-based parent/child links
    TaskForest - Position -> Task arena plus scheduling config
    SchedulingConfig - Default priority and inheritance switch
    Bucket - Reorder classification

Operations:
    build_forest - Link records into a forest
    resolve_priority - Effective priority with optional inheritance
    sample_task - Weighted random pick of an open task
    reorder - Bucket, sort and serialize the forest
    toggle_completion - Flip a checklist line between open and done

Errors:
    MissingParentError, DuplicatePositionError - malformed input
    InternalConsistencyError - reorder lost or repeated a task
    NoEligibleTask - empty roll result (not an exception)
"""

from .completion import format_done_at, toggle_completion
from .errors import (
    DuplicatePositionError,
    ForestError,
    InternalConsistencyError,
    MissingParentError,
    NoEligibleTask,
)
from .events import DomainEvent, ForestReordered, TaskRolled, TaskToggled
from .forest import build_forest
from .models import Bucket, SchedulingConfig, Task, TaskForest, TaskRecord, TaskState
from .priority import resolve_priority
from .reorder import (
    DEFAULT_INDENT,
    DEFAULT_NEWLINE,
    SECTION_HEADERS,
    classify,
    detect_newline,
    plan_reorder,
    reorder,
)
from .sampling import RandomSource, eligible_weights, is_eligible, sample_task
from .traversal import count_by_state, fold_forest, iter_forest, walk

__all__ = [
    # Models
    "TaskState",
    "TaskRecord",
    "Task",
    "TaskForest",
    "SchedulingConfig",
    "Bucket",
    # Tree builder
    "build_forest",
    # Priority
    "resolve_priority",
    # Sampling
    "RandomSource",
    "is_eligible",
    "eligible_weights",
    "sample_task",
    # Reorder
    "DEFAULT_INDENT",
    "DEFAULT_NEWLINE",
    "SECTION_HEADERS",
    "classify",
    "detect_newline",
    "plan_reorder",
    "reorder",
    # Traversal
    "walk",
    "iter_forest",
    "fold_forest",
    "count_by_state",
    # Completion
    "toggle_completion",
    "format_done_at",
    # Errors
    "ForestError",
    "MissingParentError",
    "DuplicatePositionError",
    "InternalConsistencyError",
    "NoEligibleTask",
    # Events
    "DomainEvent",
    "TaskRolled",
    "ForestReordered",
    "TaskToggled",
]
