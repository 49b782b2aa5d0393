"""Index arithmetic for array-backed binary heaps."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def left_child(index: int) -> int:
    """Index of the left child of ``index``."""
    return index * 2 + 1


def right_child(index: int) -> int:
    """Index of the right child of ``index``."""
    return index * 2 + 2


def parent(index: int) -> int:
    """Index of the parent of ``index``; the root is its own parent."""
    if index < 0:
        raise ValueError("heap index must not be negative")
    return (index - 1) // 2 if index else 0


def heap_height(values: Sequence[Any]) -> int:
    """Count the steps from the last element up towards the root.

    Climbing stops at the root or at the first element that is smaller
    than its parent.
    """
    index = len(values) - 1
    height = 0
    while index > 0:
        above = parent(index)
        if values[index] < values[above]:
            break
        height += 1
        index = above
    return height