# tests/test_task_service.py

from __future__ import annotations

from datetime import date

from maid.application import (
    get_forest_stats,
    load_forest,
    priority_of,
    reorder_forest,
    roll_task,
    toggle_task,
)
from maid.domain.shared import Err, Ok, is_err, is_ok
from maid.domain.task import (
    InternalConsistencyError,
    NoEligibleTask,
    SchedulingConfig,
    Task,
    TaskForest,
    TaskState,
)

from .fakes import ScriptedRandom

DOC = (
    "- [ ] inbox\n"
    "- [ ] project %prio=3\n"
    "  - [ ] step one\n"
    "- [x] shipped (Done at 2024-01-05)\n"
)

INHERIT = SchedulingConfig(default_priority=0, priority_inheritance=True)


def test_load_forest_ok() -> None:
    result = load_forest(DOC, INHERIT)
    assert isinstance(result, Ok)
    forest = result.value
    assert forest.positions() == [0, 1, 2, 3]
    assert forest.get(1).children == [2]


def test_load_forest_empty_document() -> None:
    result = load_forest("", SchedulingConfig())
    assert is_ok(result)
    assert len(result.value) == 0


def test_roll_task_returns_position_and_event() -> None:
    forest = load_forest(DOC, INHERIT).value
    # eligible: inbox (0), project (3), step one (3) -> total 6
    result = roll_task(forest, ScriptedRandom(4))
    assert isinstance(result, Ok)
    position, event = result.value
    assert position == 2
    assert event.position == 2
    assert event.weight == 3
    assert event.total_weight == 6
    assert event.candidates == 3


def test_roll_task_without_candidates_is_explicit() -> None:
    forest = load_forest("- [x] done\n- [ ] zero %prio=0\n", SchedulingConfig()).value
    result = roll_task(forest)
    assert isinstance(result, Err)
    assert result.error == NoEligibleTask()


def test_reorder_forest_reports_bucket_sizes() -> None:
    forest = load_forest(DOC, INHERIT).value
    result = reorder_forest(forest)
    assert isinstance(result, Ok)
    text, event = result.value
    assert text.startswith("## Unprioritized\n- [ ] inbox\n")
    assert event.task_count == 4
    assert event.bucket_sizes == {"anomalous": 0, "unprioritized": 1, "prioritized": 1, "done": 1}


def test_reorder_forest_passes_line_ending_through() -> None:
    forest = load_forest(DOC.replace("\n", "\r\n"), INHERIT).value
    result = reorder_forest(forest, newline="\r\n")
    assert isinstance(result, Ok)
    text, event = result.value
    assert text.startswith("## Unprioritized\r\n- [ ] inbox\r\n\r\n## Prioritized\r\n")
    assert event.bucket_sizes["prioritized"] == 1


def test_reorder_forest_refuses_inconsistent_output() -> None:
    forest = TaskForest(tasks={3: Task(position=3, raw_text="- [ ] lost", parent_position=1)})
    result = reorder_forest(forest)
    assert is_err(result)
    assert isinstance(result.error, InternalConsistencyError)


def test_priority_of() -> None:
    forest = load_forest(DOC, INHERIT).value
    assert priority_of(forest, 2) == Ok(3)
    assert is_err(priority_of(forest, 10))


def test_toggle_task_preserves_other_lines_and_endings() -> None:
    text = "# list\r\n- [ ] a\r\n- [ ] b\r\n"
    result = toggle_task(text, 2, date(2024, 2, 3))
    assert isinstance(result, Ok)
    new_text, event = result.value
    assert new_text == "# list\r\n- [ ] a\r\n- [x] b (Done at 2024-02-03)\r\n"
    assert event.position == 2
    assert event.state == TaskState.DONE


def test_toggle_task_reopens() -> None:
    result = toggle_task("- [x] a (Done at 2024-01-01)", 0, date(2024, 2, 3))
    new_text, event = result.value
    assert new_text == "- [ ] a"
    assert event.state == TaskState.OPEN


def test_toggle_task_errors() -> None:
    assert is_err(toggle_task("- [ ] a\n", 5, date.today()))
    assert is_err(toggle_task("just text\n", 0, date.today()))


def test_forest_stats() -> None:
    stats = get_forest_stats(load_forest(DOC, INHERIT).value)
    assert stats.total == 4
    assert stats.by_state["open"] == 3
    assert stats.by_state["done"] == 1
    assert stats.bucket_sizes["prioritized"] == 1
    assert stats.eligible == 3
    assert stats.total_weight == 6
