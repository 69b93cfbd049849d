"""Queues backed by a ring buffer, linked nodes and stacks, plus queue algorithms."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """First-in, first-out queue in a fixed-size ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._capacity = capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: T) -> None:
        """Add ``value`` at the rear; raise OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        rear = (self._front + self._size) % self._capacity
        self._slots[rear] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front value."""
        value = self.front()
        self._slots[self._front] = None
        self._front = (self._front + 1) % self._capacity
        self._size -= 1
        return value

    def front(self) -> T:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:
        return self._size


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue(Generic[T]):
    """First-in, first-out queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push(self, value: T) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front value."""
        if self._head is None:
            raise IndexError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        """Return the front value without removing it."""
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class TwoStackQueue(Generic[T]):
    """Queue kept in one stack whose top is the front, rebuilt through a second stack."""

    def __init__(self) -> None:
        self._stack: list[T] = []

    def push(self, value: T) -> None:
        """Add ``value`` at the rear by moving everything aside and back."""
        spill: list[T] = []
        while self._stack:
            spill.append(self._stack.pop())
        self._stack.append(value)
        while spill:
            self._stack.append(spill.pop())

    def pop(self) -> T:
        """Remove and return the front value."""
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack.pop()

    def front(self) -> T:
        """Return the front value without removing it."""
        if not self._stack:
            raise IndexError("queue is empty")
        return self._stack[-1]

    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)


class TwoQueueStack(Generic[T]):
    """Stack kept in one queue whose front is the top, rebuilt through a second queue."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def push(self, value: T) -> None:
        """Put ``value`` on top by moving everything aside and back."""
        spill: deque[T] = deque()
        while self._queue:
            spill.append(self._queue.popleft())
        self._queue.append(value)
        while spill:
            self._queue.append(spill.popleft())

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue.popleft()

    def top(self) -> T:
        """Return the top value without removing it."""
        if not self._queue:
            raise IndexError("stack is empty")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


def interleave(queue: Iterable[T]) -> deque[T]:
    """Return a queue alternating the first half of ``queue`` with the second half.

    The first ``len // 2`` elements are set aside; each is then appended
    after the queue, followed by the element taken from its front.
    """
    rest = deque(queue)
    first = deque(rest.popleft() for _ in range(len(rest) // 2))
    while first:
        rest.append(first.popleft())
        rest.append(rest.popleft())
    return rest


def reverse_queue(queue: Iterable[T]) -> deque[T]:
    """Return the elements of ``queue`` in reverse order, passed through a stack."""
    stack = list(queue)
    result: deque[T] = deque()
    while stack:
        result.append(stack.pop())
    return result


def first_non_repeating(text: str) -> list[str | None]:
    """For each prefix of ``text``, give its first character seen only once, or None."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    result: list[str | None] = []
    for char in text:
        counts[char] += 1
        pending.append(char)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else None)
    return result