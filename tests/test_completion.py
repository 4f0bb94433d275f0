# tests/test_completion.py

from __future__ import annotations

from datetime import date

import pytest

from maid.domain.task import format_done_at, toggle_completion

TODAY = date(2024, 7, 9)


def test_completing_adds_stamp() -> None:
    assert toggle_completion("- [ ] feed cat %prio=2", TODAY) == (
        "- [x] feed cat %prio=2 (Done at 2024-07-09)"
    )


def test_reopening_removes_stamp() -> None:
    assert toggle_completion("- [x] feed cat (Done at 2024-07-01) %prio=2", TODAY) == (
        "- [ ] feed cat %prio=2"
    )


def test_existing_stamp_is_kept_when_completing() -> None:
    line = "- [ ] feed cat (Done at 2024-07-01)"
    assert toggle_completion(line, TODAY) == "- [x] feed cat (Done at 2024-07-01)"


def test_uppercase_done_reopens() -> None:
    assert toggle_completion("  - [X] nested", TODAY) == "  - [ ] nested"


@pytest.mark.parametrize("line", ["plain text", "- [-] abandoned", "- [] unspecified", ""])
def test_untoggleable_lines(line: str) -> None:
    assert toggle_completion(line, TODAY) is None


def test_round_trip_restores_line() -> None:
    line = "\t- [ ] water plants %due=2024-07-10"
    assert toggle_completion(toggle_completion(line, TODAY), TODAY) == line


def test_format_done_at() -> None:
    assert format_done_at(date(2024, 1, 2)) == " (Done at 2024-01-02)"
