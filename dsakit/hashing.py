"""Hash-based problems and a separately chained hash table."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Any


def count_distinct(items: Iterable[Hashable]) -> int:
    """Return how many different values ``items`` holds."""
    return len(set(items))


class HashTable:
    """String-keyed table with separate chaining that doubles when overloaded.

    A key's bucket is the sum of ``ord(c) ** 2 % capacity`` over its
    characters, taken modulo the capacity. Inserting a key that is already
    present adds a newer binding that shadows the older one; removing the
    key drops only the newest binding. The table doubles its capacity once
    it holds more entries than buckets.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        for bucket in self._buckets:
            yield from bucket

    def _index(self, key: str) -> int:
        size = len(self._buckets)
        return sum((ord(char) * ord(char)) % size for char in key) % size

    def insert(self, key: str, value: Any) -> None:
        """Bind ``key`` to ``value``, shadowing any earlier binding of ``key``."""
        self._buckets[self._index(key)].insert(0, (key, value))
        self._size += 1
        if self._size > len(self._buckets):
            self._rehash()

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for bucket in old:
            # Oldest first, so newer bindings end up in front again.
            for key, value in reversed(bucket):
                self._buckets[self._index(key)].insert(0, (key, value))

    def remove(self, key: str) -> bool:
        """Drop the newest binding of ``key``; return False if there was none."""
        bucket = self._buckets[self._index(key)]
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                self._size -= 1
                return True
        return False

    def exists(self, key: str) -> bool:
        """Return True if ``key`` is bound."""
        return any(stored == key for stored, _ in self._buckets[self._index(key)])

    def search(self, key: str) -> Any:
        """Return the value bound to ``key``; raise KeyError if it is absent."""
        for stored, value in self._buckets[self._index(key)]:
            if stored == key:
                return value
        raise KeyError(key)

    def format_table(self) -> str:
        """Render each bucket on its own line as ``idx i -> (key, value) -> ...``."""
        return "\n".join(
            f"idx {index} -> " + "".join(f"({key}, {value}) -> " for key, value in bucket)
            for index, bucket in enumerate(self._buckets)
        )


def itinerary(tickets: Mapping[str, str]) -> list[str]:
    """Return the cities visited by following one-way ``from -> to`` tickets.

    The journey starts at a city that no ticket leads to. Raises ValueError
    if there is no such city or the tickets run in a loop.
    """
    destinations = set(tickets.values())
    starts = [city for city in tickets if city not in destinations]
    if not starts:
        raise ValueError("every city is some ticket's destination; no start found")
    city = starts[-1]
    route = [city]
    while city in tickets:
        if len(route) > len(tickets):
            raise ValueError("tickets run in a loop")
        city = tickets[city]
        route.append(city)
    return route


def largest_zero_sum_subarray(items: Sequence[int]) -> int:
    """Return the length of the longest contiguous run summing to zero, or 0."""
    first_seen: dict[int, int] = {0: -1}
    total = 0
    best = 0
    for index, value in enumerate(items):
        total += value
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def majority_elements(nums: Sequence[Hashable]) -> list[Hashable]:
    """Return the values occurring more than ``len(nums) // 3`` times, in first-seen order."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def count_subarrays_with_sum(items: Iterable[int], k: int) -> int:
    """Return how many contiguous runs of ``items`` sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = 0
    found = 0
    for value in items:
        total += value
        found += prefix_counts[total - k]
        prefix_counts[total] += 1
    return found


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)