"""Stacks backed by a list and by linked nodes, and algorithms over them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")


class _StackLike(Protocol):
    def push(self, value: Any) -> None: ...

    def pop(self) -> Any: ...

    def peek(self) -> Any: ...

    def is_empty(self) -> bool: ...


class Stack(Generic[T]):
    """Last-in, first-out stack backed by a list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedStack(Generic[T]):
    """Last-in, first-out stack built from singly linked nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, value: T) -> None:
        """Put ``value`` on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._head is None:
            raise IndexError("pop from empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self._head is None:
            raise IndexError("peek at empty stack")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


def push_at_bottom(stack: _StackLike, value: Any) -> None:
    """Place ``value`` beneath every element already on ``stack``."""
    if stack.is_empty():
        stack.push(value)
        return
    top = stack.pop()
    push_at_bottom(stack, value)
    stack.push(top)


def reverse_stack(stack: _StackLike) -> None:
    """Reverse the order of ``stack`` using only its own operations."""
    if stack.is_empty():
        return
    top = stack.pop()
    reverse_stack(stack)
    push_at_bottom(stack, top)


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters onto a stack and popping them."""
    stack: Stack[str] = Stack(text)
    return "".join(stack.pop() for _ in range(len(stack)))