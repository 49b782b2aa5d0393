"""Comparison sorts and binary search."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition_first(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[lo]
    slot = hi
    for i in range(hi, lo, -1):
        if items[i] > pivot:
            items[i], items[slot] = items[slot], items[i]
            slot -= 1
    items[slot], items[lo] = items[lo], items[slot]
    return slot


def _partition_last(items: list[Any], lo: int, hi: int) -> int:
    pivot = items[hi]
    slot = lo
    for i in range(lo, hi):
        if items[i] < pivot:
            items[i], items[slot] = items[slot], items[i]
            slot += 1
    items[slot], items[hi] = items[hi], items[slot]
    return slot


def _quick_sort(
    values: Iterable[Any], partition: Callable[[list[Any], int, int], int]
) -> list[Any]:
    items = list(values)

    def sort(lo: int, hi: int) -> None:
        # Recurse into the smaller side and loop over the larger one.
        while lo < hi:
            split = partition(items, lo, hi)
            if split - lo < hi - split:
                sort(lo, split - 1)
                lo = split + 1
            else:
                sort(split + 1, hi)
                hi = split - 1

    sort(0, len(items) - 1)
    return items


def quick_sort_first_pivot(values: Iterable[Any]) -> list[Any]:
    """Quick sort taking the first element of each range as pivot."""
    return _quick_sort(values, _partition_first)


def quick_sort_last_pivot(values: Iterable[Any]) -> list[Any]:
    """Quick sort taking the last element of each range as pivot."""
    return _quick_sort(values, _partition_last)


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort any comparable values, strings included."""
    return _quick_sort(values, _partition_last)


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            hi = mid - 1
        else:
            lo = mid + 1
    return None