"""Pure forest traversal helpers.

All functions in this module are pure - no I/O, no side effects.
Traversal is iterative (explicit stack) so pathological nesting depth
cannot hit the recursion limit.
"""

from collections.abc import Callable, Iterator
from typing import TypeVar

from .models import Task, TaskForest, TaskState

T = TypeVar("T")


def walk(forest: TaskForest, position: int) -> Iterator[tuple[int, Task]]:
    """Yield ``(depth, task)`` for a subtree in depth-first source order.

    The task at ``position`` is yielded at depth 0. Children are visited
    in their stored (document) order, never re-sorted.
    """
    root = forest.get(position)
    if root is None:
        return

    stack: list[tuple[int, Task]] = [(0, root)]
    while stack:
        depth, task = stack.pop()
        yield depth, task
        for child_position in reversed(task.children):
            child = forest.get(child_position)
            if child is not None:
                stack.append((depth + 1, child))


def iter_forest(forest: TaskForest) -> Iterator[tuple[int, Task]]:
    """Yield ``(depth, task)`` for every tree, roots in source order."""
    for root in forest.roots():
        yield from walk(forest, root.position)


def fold_forest(
    forest: TaskForest,
    initial: T,
    f: Callable[[T, Task, int], T],
) -> T:
    """Fold over all tasks with their depth.

    Args:
        forest: The forest to fold over
        initial: Starting accumulator value
        f: Function (accumulator, task, depth) -> new_accumulator

    Returns:
        Final accumulated value after visiting all tasks
    """
    acc = initial
    for depth, task in iter_forest(forest):
        acc = f(acc, task, depth)
    return acc


def count_by_state(forest: TaskForest) -> dict[TaskState, int]:
    """Count every task (roots and nested) by completion state."""
    counts: dict[TaskState, int] = {state: 0 for state in TaskState}

    def count(acc: dict[TaskState, int], task: Task, depth: int) -> dict[TaskState, int]:
        acc[task.state] += 1
        return acc

    return fold_forest(forest, counts, count)
