"""Task domain errors.

Structural problems with the forest are raised, never repaired: a guessed
fix risks silently losing a user's task.
"""


class ForestError(Exception):
    """Base class for errors raised while building a forest."""

    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position


class MissingParentError(ForestError):
    """A record names a parent that has not been seen yet."""

    def __init__(self, position: int, parent_position: int) -> None:
        super().__init__(
            position,
            f"Task at position {position} references parent {parent_position}, "
            "which does not precede it",
        )
        self.parent_position = parent_position


class DuplicatePositionError(ForestError):
    """Two records share the same position."""

    def __init__(self, position: int) -> None:
        super().__init__(position, f"Duplicate task position {position}")


class InternalConsistencyError(Exception):
    """The engine produced an inconsistent result.

    Raised by reorder when the emitted output does not account for every
    task exactly once. Callers must not write the output.
    """

    def __init__(
        self,
        message: str,
        missing: list[int] | None = None,
        duplicated: list[int] | None = None,
    ) -> None:
        super().__init__(message)
        self.missing = missing or []
        self.duplicated = duplicated or []


class NoEligibleTask:
    """Empty result of a weighted roll.

    Not an exception: it is the explicit "nothing to pick" variant, distinct
    from picking the task at position 0.
    """

    def __repr__(self) -> str:
        return "NoEligibleTask()"

    def __str__(self) -> str:
        return "No eligible task to roll"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoEligibleTask)

    def __hash__(self) -> int:
        return hash(NoEligibleTask)
