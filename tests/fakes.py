# tests/fakes.py

from __future__ import annotations

from typing import Any

from maid.domain.task import TaskRecord, TaskState


class ScriptedRandom:
    """
    Random source that returns pre-set draws in order.

    Lets sampling tests pin the exact draw instead of relying on seeds.
    """

    def __init__(self, *draws: int) -> None:
        self.draws = list(draws)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self.draws.pop(0)
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        return value


def make_record(
    position: int,
    raw_text: str | None = None,
    *,
    state: TaskState = TaskState.OPEN,
    priority: int | None = None,
    parent: int | None = None,
    **extra: Any,
) -> TaskRecord:
    """Build a TaskRecord with sensible defaults for tests."""
    return TaskRecord(
        position=position,
        raw_text=raw_text if raw_text is not None else f"- [ ] task {position}",
        state=state,
        priority=priority,
        parent_position=parent,
        **extra,
    )
