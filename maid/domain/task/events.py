"""Task domain events.

Immutable records of what an operation did, returned next to the
operation's result so callers can log or report them.

All events are pure data structures - no I/O, no side effects.
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from .models import TaskState


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and timestamp.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}


class TaskRolled(DomainEvent):
    """A task was picked by the weighted roll."""

    position: int
    weight: int
    total_weight: int
    candidates: int


class ForestReordered(DomainEvent):
    """The document was reorganized into bucket sections.

    ``bucket_sizes`` counts top-level tasks per bucket.
    """

    task_count: int
    bucket_sizes: dict[str, int]


class TaskToggled(DomainEvent):
    """A task line's checkbox was flipped."""

    position: int
    state: TaskState
