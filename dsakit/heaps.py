"""Binary max-heap, heap sort and priority-queue problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from itertools import takewhile
from typing import Any


def min_rope_cost(ropes: Iterable[int]) -> int:
    """Return the least total cost of joining all ropes, each join costing the sum of both lengths."""
    heap = list(ropes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def _sift_down(items: MutableSequence[Any], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place using a max-heap."""
    size = len(items)
    for index in reversed(range(size // 2)):
        _sift_down(items, index, size)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)


class MaxHeap:
    """Binary max-heap kept in a list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Add ``value`` and restore the heap order."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not items[child] > items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent

    def pop(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        items[0], items[-1] = items[-1], items[0]
        value = items.pop()
        _sift_down(items, 0, len(items))
        return value

    def top(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("top of empty heap")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items


def _check_count(k: int, available: int) -> None:
    if not 0 <= k <= available:
        raise ValueError(f"k must be between 0 and {available}, got {k}")


def nearby_cars(positions: Sequence[tuple[int, int]], k: int) -> list[int]:
    """Return the indices of the ``k`` cars nearest the origin, nearest first."""
    _check_count(k, len(positions))
    by_distance = ((x * x + y * y, index) for index, (x, y) in enumerate(positions))
    return [index for _, index in heapq.nsmallest(k, by_distance)]


@dataclass(frozen=True)
class Student:
    name: str
    marks: int


def students_by_name(students: Iterable[Student]) -> list[Student]:
    """Return the students drawn from a min-heap keyed on name."""
    heap = [(student.name, order, student) for order, student in enumerate(students)]
    heapq.heapify(heap)
    return [heapq.heappop(heap)[2] for _ in range(len(heap))]


def sliding_window_max(items: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive items."""
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    heap = [(-value, index) for index, value in enumerate(items[:k])]
    heapq.heapify(heap)
    result = [-heap[0][0]]
    for index in range(k, len(items)):
        heapq.heappush(heap, (-items[index], index))
        while heap[0][1] <= index - k:
            heapq.heappop(heap)
        result.append(-heap[0][0])
    return result


def weakest_rows(matrix: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return the ``k`` weakest row indices: fewest leading 1s, then lowest index."""
    _check_count(k, len(matrix))
    strengths = [sum(1 for _ in takewhile(lambda cell: cell == 1, row)) for row in matrix]
    return heapq.nsmallest(k, range(len(matrix)), key=lambda i: (strengths[i], i))