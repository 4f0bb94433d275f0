"""Completion toggle for a single checklist line.

Flips ``- [ ]`` to ``- [x]`` (stamping the completion date) and back
(dropping the stamp). Pure string in, string out.
"""

import re
from datetime import date

CHECKBOX_PATTERN = re.compile(r"[-*+] \[([xX ]?)\]")
DONE_AT_PATTERN = re.compile(r" \(Done at (\d{4}-\d{2}-\d{2})\)")


def format_done_at(day: date) -> str:
    """Render the completion stamp appended to finished tasks."""
    return f" (Done at {day.isoformat()})"


def toggle_completion(line: str, today: date) -> str | None:
    """Return ``line`` with its checkbox flipped, or None if it can't be.

    Only open (``[ ]``) and done (``[x]``/``[X]``) boxes toggle. An existing
    stamp is kept when completing, and removed when reopening.
    """
    match = CHECKBOX_PATTERN.search(line)
    if match is None:
        return None

    marker = match.group(1)
    if marker == " ":
        replacement = "x"
    elif marker in ("x", "X"):
        replacement = " "
    else:
        return None

    start, end = match.span(1)
    toggled = line[:start] + replacement + line[end:]

    stamp = DONE_AT_PATTERN.search(toggled)
    if replacement == "x" and stamp is None:
        toggled = toggled + format_done_at(today)
    elif replacement == " " and stamp is not None:
        toggled = toggled[: stamp.start()] + toggled[stamp.end() :]
    return toggled
