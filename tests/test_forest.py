# tests/test_forest.py

from __future__ import annotations

import pytest

from maid.domain.task import (
    DuplicatePositionError,
    ForestError,
    MissingParentError,
    SchedulingConfig,
    TaskState,
    build_forest,
    count_by_state,
    iter_forest,
    walk,
)

from .fakes import make_record


def test_build_links_children_in_source_order() -> None:
    forest = build_forest(
        [
            make_record(0),
            make_record(1, parent=0),
            make_record(4, parent=0),
            make_record(5, parent=4),
            make_record(7),
        ]
    )

    assert forest.positions() == [0, 1, 4, 5, 7]
    assert forest.get(0).children == [1, 4]
    assert forest.get(4).children == [5]
    assert [task.position for task in forest.roots()] == [0, 7]
    assert len(forest) == 5


def test_every_parent_lists_its_children() -> None:
    records = [make_record(0), make_record(1, parent=0), make_record(2, parent=1), make_record(3, parent=0)]
    forest = build_forest(records)

    for record in records:
        if record.parent_position is not None:
            assert record.position in forest.get(record.parent_position).children


def test_missing_parent_is_rejected() -> None:
    with pytest.raises(MissingParentError) as info:
        build_forest([make_record(0), make_record(2, parent=1)])

    assert info.value.position == 2
    assert info.value.parent_position == 1
    assert isinstance(info.value, ForestError)


def test_parent_after_child_is_rejected() -> None:
    # Parent must precede the child in source order
    with pytest.raises(MissingParentError):
        build_forest([make_record(1, parent=3), make_record(3)])


def test_duplicate_position_is_rejected() -> None:
    with pytest.raises(DuplicatePositionError) as info:
        build_forest([make_record(0), make_record(0, "- [ ] again")])

    assert info.value.position == 0


def test_config_is_attached() -> None:
    config = SchedulingConfig(default_priority=2, priority_inheritance=True)
    forest = build_forest([make_record(0)], config)
    assert forest.config == config


def test_empty_records_build_empty_forest() -> None:
    forest = build_forest([])
    assert len(forest) == 0
    assert list(forest.roots()) == []


def test_record_fields_are_copied() -> None:
    forest = build_forest(
        [make_record(3, "- [x] shipped %prio=4", state=TaskState.DONE, priority=4)]
    )
    task = forest.get(3)
    assert task.raw_text == "- [x] shipped %prio=4"
    assert task.state == TaskState.DONE
    assert task.priority == 4
    assert task.is_root()


def test_walk_yields_depth_first_with_depths() -> None:
    forest = build_forest(
        [
            make_record(0),
            make_record(1, parent=0),
            make_record(2, parent=1),
            make_record(3, parent=0),
            make_record(4),
        ]
    )

    assert [(depth, task.position) for depth, task in walk(forest, 0)] == [
        (0, 0),
        (1, 1),
        (2, 2),
        (1, 3),
    ]
    assert [task.position for _, task in iter_forest(forest)] == [0, 1, 2, 3, 4]
    assert list(walk(forest, 99)) == []


def test_walk_handles_deep_nesting() -> None:
    depth = 5000
    records = [make_record(0)] + [make_record(i, parent=i - 1) for i in range(1, depth)]
    forest = build_forest(records)

    visited = list(walk(forest, 0))
    assert len(visited) == depth
    assert visited[-1][0] == depth - 1


def test_count_by_state_includes_nested_tasks() -> None:
    forest = build_forest(
        [
            make_record(0),
            make_record(1, state=TaskState.DONE, parent=0),
            make_record(2, state=TaskState.ABANDONED),
        ]
    )
    counts = count_by_state(forest)
    assert counts[TaskState.OPEN] == 1
    assert counts[TaskState.DONE] == 1
    assert counts[TaskState.ABANDONED] == 1
    assert counts[TaskState.UNSPECIFIED] == 0
