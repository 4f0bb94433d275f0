# tests/test_priority.py

from __future__ import annotations

import pytest

from maid.domain.task import (
    InternalConsistencyError,
    SchedulingConfig,
    Task,
    TaskForest,
    resolve_priority,
)

from .fakes import make_record


@pytest.mark.parametrize("inheritance", [True, False])
def test_root_without_priority_gets_default(forest_of, inheritance: bool) -> None:
    forest = forest_of([make_record(0)], default_priority=7, priority_inheritance=inheritance)
    assert resolve_priority(forest, 0) == 7


def test_child_inherits_when_enabled(forest_of) -> None:
    records = [make_record(0, priority=5), make_record(1, parent=0)]

    inherited = forest_of(records, default_priority=1, priority_inheritance=True)
    assert resolve_priority(inherited, 1) == 5

    not_inherited = forest_of(records, default_priority=1, priority_inheritance=False)
    assert resolve_priority(not_inherited, 1) == 1


def test_inheritance_walks_several_levels(forest_of) -> None:
    forest = forest_of(
        [
            make_record(0, priority=9),
            make_record(1, parent=0),
            make_record(2, parent=1),
            make_record(3, parent=2),
        ],
        priority_inheritance=True,
    )
    assert resolve_priority(forest, 3) == 9


def test_nearest_explicit_priority_wins(forest_of) -> None:
    forest = forest_of(
        [
            make_record(0, priority=9),
            make_record(1, priority=0, parent=0),
            make_record(2, parent=1),
        ],
        default_priority=4,
        priority_inheritance=True,
    )
    # Explicit 0 is a priority, not an absence
    assert resolve_priority(forest, 2) == 0


def test_inheritance_falls_back_to_default_at_root(forest_of) -> None:
    forest = forest_of(
        [make_record(0), make_record(1, parent=0)],
        default_priority=3,
        priority_inheritance=True,
    )
    assert resolve_priority(forest, 1) == 3


def test_explicit_priority_is_returned_as_is(forest_of) -> None:
    forest = forest_of([make_record(0, priority=-2)], default_priority=5)
    assert resolve_priority(forest, 0) == -2


def test_unknown_position_gets_default(forest_of) -> None:
    forest = forest_of([make_record(0, priority=5)], default_priority=2)
    assert resolve_priority(forest, 42) == 2


def test_deep_chain_does_not_recurse(forest_of) -> None:
    depth = 5000
    records = [make_record(0, priority=8)] + [make_record(i, parent=i - 1) for i in range(1, depth)]
    forest = forest_of(records, priority_inheritance=True)
    assert resolve_priority(forest, depth - 1) == 8


def test_parent_cycle_is_reported() -> None:
    # Not producible by build_forest; constructed by hand to exercise the guard
    forest = TaskForest(
        tasks={
            1: Task(position=1, raw_text="- [ ] a", parent_position=2),
            2: Task(position=2, raw_text="- [ ] b", parent_position=1),
        },
        config=SchedulingConfig(priority_inheritance=True),
    )
    with pytest.raises(InternalConsistencyError):
        resolve_priority(forest, 1)
