"""Markdown checklist extractor.

Turns a Markdown document into the ordered TaskRecord sequence the task
domain consumes. Positions are 0-based line indexes; nesting follows list
indentation.

Recognized inline metadata:

    %prio=3                 explicit priority (may be negative)
    %due=2024-05-01         due date, optionally with a time (T09:30)
    (Done at 2024-04-30)    completion stamp written by the toggle command
"""

import logging
import re
from datetime import date, datetime

from maid.domain.task import SECTION_HEADERS, TaskRecord, TaskState
from maid.domain.task.completion import DONE_AT_PATTERN

logger = logging.getLogger(__name__)

TASK_LINE_PATTERN = re.compile(r"^(?P<indent>[ \t]*)[-*+] \[(?P<mark>[ xX-]?)\]")
PRIO_PATTERN = re.compile(r"%prio=(-?\d+)")
DUE_PATTERN = re.compile(r"%due=(\d{4}-\d{2}-\d{2}(?:T\d{2}:\d{2}(?::\d{2})?)?)")

TAB_WIDTH = 4

STATE_MARKERS: dict[str, TaskState] = {
    " ": TaskState.OPEN,
    "x": TaskState.DONE,
    "X": TaskState.DONE,
    "-": TaskState.ABANDONED,
    "": TaskState.UNSPECIFIED,
}


def indent_width(whitespace: str) -> int:
    """Column width of leading whitespace, tabs counting as TAB_WIDTH."""
    return sum(TAB_WIDTH if char == "\t" else 1 for char in whitespace)


def _leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def _parse_priority(text: str) -> int | None:
    match = PRIO_PATTERN.search(text)
    return int(match.group(1)) if match else None


def _parse_due(text: str, position: int) -> datetime | None:
    match = DUE_PATTERN.search(text)
    if match is None:
        return None
    try:
        return datetime.fromisoformat(match.group(1))
    except ValueError:
        logger.warning(f"Ignoring invalid due date on line {position + 1}: {match.group(1)}")
        return None


def _parse_done_at(text: str, position: int) -> date | None:
    match = DONE_AT_PATTERN.search(text)
    if match is None:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        logger.warning(f"Ignoring invalid completion date on line {position + 1}: {match.group(1)}")
        return None


def extract_records(text: str) -> list[TaskRecord]:
    """Extract task records from a Markdown document.

    A task's parent is the nearest preceding task with a smaller
    indentation width. Any other non-blank line closes every open task
    indented at or deeper than itself, so a heading ends the trees above
    it while an indented note under a task does not.

    Args:
        text: Full document text.

    Returns:
        Records in document order, parents before children.
    """
    records: list[TaskRecord] = []
    # (indent width, position) of the tasks enclosing the current line
    stack: list[tuple[int, int]] = []

    for position, line in enumerate(text.splitlines()):
        if not line.strip():
            continue

        width = indent_width(_leading_whitespace(line))
        while stack and stack[-1][0] >= width:
            stack.pop()

        match = TASK_LINE_PATTERN.match(line)
        if match is None:
            continue

        raw_text = line[len(match.group("indent")) :]
        records.append(
            TaskRecord(
                position=position,
                raw_text=raw_text,
                state=STATE_MARKERS[match.group("mark")],
                priority=_parse_priority(raw_text),
                done_at=_parse_done_at(raw_text, position),
                due_at=_parse_due(raw_text, position),
                parent_position=stack[-1][1] if stack else None,
            )
        )
        stack.append((width, position))

    logger.debug(f"Extracted {len(records)} task records")
    return records


def count_foreign_lines(text: str) -> int:
    """Count non-blank lines that are neither tasks nor section headers.

    These are the lines a reorder would not carry over.
    """
    headers = set(SECTION_HEADERS.values())
    count = 0
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped in headers:
            continue
        if TASK_LINE_PATTERN.match(line) is None:
            count += 1
    return count
