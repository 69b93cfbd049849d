from collections import deque

import pytest
from hypothesis import given, strategies as st

from dsakit.queues import (
    CircularQueue,
    LinkedQueue,
    TwoQueueStack,
    TwoStackQueue,
    first_non_repeating,
    interleave,
    reverse_queue,
)


def _drain(container):
    values = []
    while not container.is_empty():
        values.append(container.pop())
    return values


def test_circular_queue_scenario():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.push(value)
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.push(4)
    assert queue.front() == 1
    assert queue.pop() == 1
    assert queue.front() == 2
    queue.push(5)
    assert _drain(queue) == [2, 3, 5]


def test_circular_queue_empty_raises():
    queue = CircularQueue(2)
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()


def test_circular_queue_zero_capacity_is_full():
    queue = CircularQueue(0)
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.push(1)


def test_circular_queue_negative_capacity():
    with pytest.raises(ValueError):
        CircularQueue(-1)


@given(
    st.integers(1, 5),
    st.lists(st.one_of(st.integers(0, 100), st.none()), max_size=40),
)
def test_circular_queue_matches_deque(capacity, operations):
    queue = CircularQueue(capacity)
    model = deque()
    for op in operations:
        if op is None:
            if model:
                assert queue.pop() == model.popleft()
            else:
                with pytest.raises(IndexError):
                    queue.pop()
        elif len(model) == capacity:
            with pytest.raises(OverflowError):
                queue.push(op)
        else:
            queue.push(op)
            model.append(op)
        assert len(queue) == len(model)
    assert _drain(queue) == list(model)


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
def test_fifo_queues(cls):
    queue = cls()
    for value in (1, 2, 3, 4):
        queue.push(value)
    assert queue.front() == 1
    assert len(queue) == 4
    assert _drain(queue) == [1, 2, 3, 4]


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
def test_fifo_queues_empty_raise(cls):
    queue = cls()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()


@pytest.mark.parametrize("cls", [LinkedQueue, TwoStackQueue])
@given(values=st.lists(st.integers()))
def test_fifo_order(cls, values):
    queue = cls()
    for value in values:
        queue.push(value)
    assert _drain(queue) == values


def test_linked_queue_reusable_after_emptied():
    queue = LinkedQueue()
    queue.push(1)
    assert queue.pop() == 1
    queue.push(2)
    assert queue.front() == 2


def test_two_queue_stack_lifo():
    stack = TwoQueueStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    assert _drain(stack) == [3, 2, 1]


def test_two_queue_stack_empty_raises():
    stack = TwoQueueStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


@given(st.lists(st.integers()))
def test_two_queue_stack_order(values):
    stack = TwoQueueStack()
    for value in values:
        stack.push(value)
    assert _drain(stack) == list(reversed(values))


def test_interleave_even():
    assert list(interleave(range(1, 11))) == [1, 6, 2, 7, 3, 8, 4, 9, 5, 10]


def test_interleave_odd():
    assert list(interleave([1, 2, 3, 4, 5])) == [5, 1, 3, 2, 4]


@given(st.lists(st.integers()))
def test_interleave_is_permutation(values):
    assert sorted(interleave(values)) == sorted(values)


def test_reverse_queue():
    assert list(reverse_queue(range(1, 6))) == [5, 4, 3, 2, 1]


@given(st.lists(st.integers()))
def test_reverse_queue_twice_restores(values):
    assert list(reverse_queue(reverse_queue(values))) == values


def test_first_non_repeating_example():
    assert first_non_repeating("aabccxb") == ["a", None, "b", "b", "b", "b", "x"]


@given(st.text(alphabet="abcd", max_size=20))
def test_first_non_repeating_invariants(text):
    answers = first_non_repeating(text)
    assert len(answers) == len(text)
    for end, answer in enumerate(answers, start=1):
        prefix = text[:end]
        if answer is None:
            assert all(prefix.count(char) > 1 for char in prefix)
        else:
            assert prefix.count(answer) == 1