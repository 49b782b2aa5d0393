"""Palindromic numbers and a list of keys each holding a nested list."""

from __future__ import annotations

from collections.abc import Iterable


def _reverse_digits(num: int) -> int:
    if num == 0:
        return 0
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def palindrome_digits(num: int) -> int:
    """Return the digit count of ``num`` if it is a positive palindrome, else 0."""
    if num <= 0:
        return 0
    return len(str(num)) if _reverse_digits(num) == num else 0


def is_palindrome(num: int) -> bool:
    """Tell whether the decimal digits of ``num`` read the same both ways."""
    return _reverse_digits(num) == num


def largest_palindrome(values: Iterable[int]) -> tuple[int, int]:
    """Return the first value with the most palindromic digits, and that count."""
    items = list(values)
    if not items:
        raise ValueError("largest_palindrome() needs at least one value")
    best = max(items, key=palindrome_digits)
    return best, palindrome_digits(best)


class NestedList:
    """An ordered list of keys, each carrying its own list of values."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, list[int]]] = []

    def append(self, key: int) -> None:
        """Add ``key`` at the end with an empty nested list."""
        self._entries.append((key, []))

    def add_nested(self, key: int, value: int) -> None:
        """Append ``value`` to the nested list of every entry holding ``key``."""
        found = False
        for stored, nested in self._entries:
            if stored == key:
                nested.append(value)
                found = True
        if not found:
            raise KeyError(f"no entry with key {key}")

    def keys(self) -> list[int]:
        """Return the keys in order."""
        return [key for key, _ in self._entries]

    def nested(self, key: int) -> list[int]:
        """Return the nested values of the first entry holding ``key``."""
        for stored, nested in self._entries:
            if stored == key:
                return list(nested)
        raise KeyError(f"no entry with key {key}")

    def converted(self) -> NestedList:
        """Build a list whose keys are the numbers spelled by each nested list.

        The first nested value is the leading digit; trailing zeros drop out.
        """
        result = NestedList()
        for _, nested in self._entries:
            number = sum(value * 10**place for place, value in enumerate(nested))
            result.append(_reverse_digits(number))
        return result

    def __len__(self) -> int:
        return len(self._entries)