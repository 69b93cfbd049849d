"""Classic small recursive problems."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise


def _require_at_least(n: int, minimum: int) -> None:
    if n < minimum:
        raise ValueError(f"n must be at least {minimum}, got {n}")


def binary_strings(n: int) -> list[str]:
    """Return every binary string of length ``n`` with no two adjacent 1s, in order."""
    _require_at_least(n, 0)

    def build(prefix: str, remaining: int, last_one: bool) -> Iterator[str]:
        if remaining == 0:
            yield prefix
            return
        yield from build(prefix + "0", remaining - 1, False)
        if not last_one:
            yield from build(prefix + "1", remaining - 1, True)

    return list(build("", n, False))


def is_sorted(items: Sequence[int]) -> bool:
    """Return True if ``items`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))


def first_occurrence(items: Sequence[int], key: int) -> int | None:
    """Return the index of the first ``key`` in ``items``, or None."""
    return next((i for i, value in enumerate(items) if value == key), None)


def last_occurrence(items: Sequence[int], key: int) -> int | None:
    """Return the index of the last ``key`` in ``items``, or None."""
    return next(
        (i for i in reversed(range(len(items))) if items[i] == key),
        None,
    )


def friends_pairing(n: int) -> int:
    """Return the number of ways ``n`` friends can stay single or pair up."""
    _require_at_least(n, 1)
    if n == 1:
        return 1
    prev, curr = 1, 2
    for k in range(3, n + 1):
        prev, curr = curr, curr + (k - 1) * prev
    return curr


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    _require_at_least(n, 0)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def decreasing(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    _require_at_least(n, 1)
    return list(range(n, 0, -1))


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of each character of ``text``."""
    return "".join(dict.fromkeys(text))


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + ``n``."""
    _require_at_least(n, 1)
    return n * (n + 1) // 2


def tiling_ways(n: int) -> int:
    """Return the number of ways to tile a 2 x ``n`` floor with 2 x 1 tiles."""
    _require_at_least(n, 0)
    prev, curr = 1, 1
    for _ in range(n - 1):
        prev, curr = curr, prev + curr
    return curr