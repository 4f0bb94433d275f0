"""Task domain models.

Pure domain models for the checklist task forest. Uses Pydantic for
validation of records handed over by the extractor and for
serialization compatibility with the rest of the codebase.
"""

from collections.abc import Iterator
from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TaskState(str, Enum):
    """Completion state of a checklist item."""

    OPEN = "open"
    DONE = "done"
    ABANDONED = "abandoned"
    UNSPECIFIED = "unspecified"

    @property
    def is_terminal(self) -> bool:
        """True for explicit states other than open (done, abandoned)."""
        return self in (TaskState.DONE, TaskState.ABANDONED)


class Bucket(str, Enum):
    """Reorder classification of a top-level task.

    Declaration order is the order sections are emitted in.
    """

    ANOMALOUS = "anomalous"
    UNPRIORITIZED = "unprioritized"
    PRIORITIZED = "prioritized"
    DONE = "done"


def naive_utc(value: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive UTC so due dates always compare."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class SchedulingConfig(BaseModel):
    """Scheduling settings the forest is resolved against."""

    default_priority: int = 0
    priority_inheritance: bool = False

    model_config = {"frozen": True}


class TaskRecord(BaseModel):
    """A raw task as produced by the extractor.

    ``raw_text`` is the task line without its leading indentation.
    ``parent_position`` must reference a record emitted earlier.
    """

    position: int = Field(ge=0)
    raw_text: str
    state: TaskState = TaskState.OPEN
    priority: int | None = None
    done_at: date | None = None
    due_at: datetime | None = None
    parent_position: int | None = None

    model_config = {"frozen": True}

    @field_validator("due_at")
    @classmethod
    def _due_at_naive_utc(cls, value: datetime | None) -> datetime | None:
        return naive_utc(value)


class Task(BaseModel):
    """A node of the task forest.

    Parent and children are plain position references into the owning
    forest; ``children`` keeps source order.
    """

    position: int
    raw_text: str
    state: TaskState = TaskState.OPEN
    priority: int | None = None
    done_at: date | None = None
    due_at: datetime | None = None
    parent_position: int | None = None
    children: list[int] = Field(default_factory=list)

    @field_validator("due_at")
    @classmethod
    def _due_at_naive_utc(cls, value: datetime | None) -> datetime | None:
        return naive_utc(value)

    @classmethod
    def from_record(cls, record: TaskRecord) -> "Task":
        """Create an unlinked task from an extractor record."""
        return cls(**record.model_dump())

    def is_root(self) -> bool:
        """Check if this task is top-level (has no enclosing task)."""
        return self.parent_position is None

    def is_open(self) -> bool:
        return self.state == TaskState.OPEN


class TaskForest(BaseModel):
    """All tasks of one document, keyed by position.

    The mapping's insertion order is source order. The forest owns every
    task; nothing outside it holds task objects across invocations.
    """

    tasks: dict[int, Task] = Field(default_factory=dict)
    config: SchedulingConfig = Field(default_factory=SchedulingConfig)

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, position: object) -> bool:
        return position in self.tasks

    def get(self, position: int) -> Task | None:
        """Return the task at ``position``, or None."""
        return self.tasks.get(position)

    def positions(self) -> list[int]:
        """All positions in source order."""
        return list(self.tasks)

    def roots(self) -> Iterator[Task]:
        """Iterate top-level tasks in source order."""
        return (task for task in self.tasks.values() if task.is_root())
