"""Result monad for the maid application layer.

Domain functions raise on structural violations (a corrupt task forest is
never something to "continue" from). The services above them convert those
failures into values so callers decide what to show and whether to write.

Example usage:
    >>> def parse_line(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a line number: {text}")
    ...     return Ok(int(text))
    ...
    >>> result = parse_line("12")
    >>> if is_ok(result):
    ...     print(f"Line: {result.value}")
    Line: 12
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome carrying ``error``.

    The error is either a message string or one of the domain error types
    (e.g. ``MissingParentError``), depending on the service.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)
