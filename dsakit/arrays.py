"""Searching, subarray sums and other problems on sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterator, MutableSequence, Sequence
from itertools import accumulate


def binary_search(items: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in the ascending ``items``, or None if absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == key:
            return mid
        if value > key:
            end = mid - 1
        else:
            start = mid + 1
    return None


def linear_search(items: Sequence[int], key: int) -> int | None:
    """Return the index of the first ``key`` in ``items``, or None if absent."""
    return next((index for index, value in enumerate(items) if value == key), None)


def best_profit(prices: Sequence[int]) -> int:
    """Return the largest profit from one buy followed by a later sell, at least 0."""
    profit = 0
    lowest: float = math.inf
    for price in prices:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return int(profit)


def _require_items(items: Sequence[int]) -> None:
    if not items:
        raise ValueError("sequence must not be empty")


def max_subarray_sum(items: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    _require_items(items)
    best = -math.inf
    current = 0
    for value in items:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return int(best)


def max_subarray_sum_brute_force(items: Sequence[int]) -> int:
    """Return the largest contiguous sum by summing every subarray afresh."""
    _require_items(items)
    size = len(items)
    return max(
        sum(items[start:end + 1])
        for start in range(size)
        for end in range(start, size)
    )


def max_subarray_sum_prefix(items: Sequence[int]) -> int:
    """Return the largest contiguous sum using running sums from each start."""
    _require_items(items)
    return max(
        max(accumulate(items[start:]))
        for start in range(len(items))
    )


def largest(items: Sequence[int]) -> int:
    """Return the largest element of ``items``."""
    _require_items(items)
    return max(items)


def subarrays(items: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous subarray, ordered by start then by end."""
    size = len(items)
    for start in range(size):
        for end in range(start + 1, size + 1):
            yield list(items[start:end])


def reverse_in_place(items: MutableSequence[int]) -> None:
    """Reverse ``items`` in place by swapping from both ends."""
    left, right = 0, len(items) - 1
    while left < right:
        items[left], items[right] = items[right], items[left]
        left += 1
        right -= 1


def trapped_rainwater(heights: Sequence[int]) -> int:
    """Return the units of water trapped by an elevation map of unit-wide bars."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        max(0, min(left, right) - height)
        for left, right, height in zip(left_max, right_max, heights)
    )


def pair_sum(items: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find indices ``(i, j)``, ``i < j``, of an ascending sequence summing to ``target``."""
    start, end = 0, len(items) - 1
    while start < end:
        current = items[start] + items[end]
        if current == target:
            return start, end
        if current > target:
            end -= 1
        else:
            start += 1
    return None