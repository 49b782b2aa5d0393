"""Small recursive counting and enumeration routines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import product

_DIGIT_WORDS = (
    "Zero",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
)

_ESCAPE_STEPS = (1, 2, 4)


def count_ones(num: int) -> int:
    """Count the set bits of ``num``; zero and negative numbers have none."""
    if num <= 0:
        return 0
    return bin(num).count("1")


def digit_count(num: int) -> int:
    """Count the decimal digits of ``num``; zero and negatives count as 0."""
    if num <= 0:
        return 0
    return len(str(num))


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and the largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("min_max() needs at least one value")
    return min(items), max(items)


def escape_ways(n: int) -> int:
    """Count the ordered ways to climb ``n`` steps in strides of 1, 2 or 4."""
    if n < 0:
        return 0
    ways = [1]
    for height in range(1, n + 1):
        ways.append(sum(ways[height - step] for step in _ESCAPE_STEPS if step <= height))
    return ways[n]


def say_digits(num: int) -> list[str]:
    """Spell out the decimal digits of ``num`` as English words.

    Zero has no digits to say and gives an empty list.
    """
    if num < 0:
        raise ValueError("cannot spell a negative number")
    if num == 0:
        return []
    return [_DIGIT_WORDS[int(digit)] for digit in str(num)]


def subsequences(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, leaving characters out first."""

    def build(index: int, prefix: str) -> Iterator[str]:
        if index == len(text):
            yield prefix
            return
        yield from build(index + 1, prefix)
        yield from build(index + 1, prefix + text[index])

    yield from build(0, "")


def words_of_length(alphabet: Sequence[str], k: int) -> Iterator[str]:
    """Yield every word of length ``k`` over ``alphabet``, in alphabet order."""
    if k < 0:
        raise ValueError("word length must not be negative")
    for letters in product(alphabet, repeat=k):
        yield "".join(letters)


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def subset_sums(values: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield the subsets of non-negative ``values`` that add up to ``target``.

    Subsets keep the order of ``values``; those that leave an element out
    come before those that take it.
    """
    items = list(values)
    chosen: list[int] = []

    def search(index: int, remaining: int) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if index == len(items):
            return
        yield from search(index + 1, remaining)
        value = items[index]
        if value <= remaining:
            chosen.append(value)
            yield from search(index + 1, remaining - value)
            chosen.pop()

    yield from search(0, target)