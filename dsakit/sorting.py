"""Elementary sorting algorithms; each returns a new ascending list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    size = len(result)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort integers by counting each value between the minimum and maximum."""
    values = list(items)
    if not all(isinstance(value, int) for value in values):
        raise TypeError("counting sort needs integers")
    if not values:
        return []
    counts = Counter(values)
    return [
        value
        for value in range(min(values), max(values) + 1)
        for _ in range(counts[value])
    ]


def builtin_sort(items: Iterable[int]) -> list[int]:
    """Sort with Python's own sort."""
    return sorted(items)


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    size = len(result)
    for i in range(size - 1):
        smallest = min(range(i, size), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result