"""Shared domain utilities for maid.

Example usage:
    >>> from maid.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_line(lines: list[str], index: int) -> Result[str, str]:
    ...     if index >= len(lines):
    ...         return Err("Line out of range")
    ...     return Ok(lines[index])
"""

from maid.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
