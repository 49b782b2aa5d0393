"""A value with a size that copies into independent instances."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class ValueBox:
    """Holds a value and a size; copies never share state with the original."""

    value: int = 0
    size: int = 0

    def set(self, value: int, size: int) -> None:
        """Replace both the value and the size."""
        self.value = value
        self.size = size

    def copy(self) -> ValueBox:
        """Return an independent box with the same contents."""
        return replace(self)