import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.recursion import (
    binary_strings,
    decreasing,
    fibonacci,
    first_occurrence,
    friends_pairing,
    is_sorted,
    last_occurrence,
    remove_duplicates,
    sum_natural,
    tiling_ways,
)


@pytest.mark.parametrize("n", range(0, 9))
def test_binary_strings_invariants(n):
    result = binary_strings(n)
    assert all(len(s) == n for s in result)
    assert all("11" not in s for s in result)
    assert all(set(s) <= {"0", "1"} for s in result)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert len(result) == fibonacci(n + 2)


def test_binary_strings_zero_length():
    assert binary_strings(0) == [""]


def test_binary_strings_negative_raises():
    with pytest.raises(ValueError):
        binary_strings(-1)


@given(st.lists(st.integers(), max_size=20))
def test_is_sorted_agrees_with_sorted(items):
    assert is_sorted(items) == (items == sorted(items))


def test_is_sorted_unsorted_example():
    assert is_sorted([1, 2, 3, 4, 5]) is True
    assert is_sorted([1, 3, 2]) is False


@given(st.lists(st.integers(0, 5), max_size=20), st.integers(0, 5))
def test_first_occurrence(items, key):
    expected = items.index(key) if key in items else None
    assert first_occurrence(items, key) == expected


@given(st.lists(st.integers(0, 5), max_size=20), st.integers(0, 5))
def test_last_occurrence(items, key):
    result = last_occurrence(items, key)
    if key in items:
        assert items[result] == key
        assert key not in items[result + 1:]
    else:
        assert result is None


def test_friends_pairing_values():
    assert friends_pairing(1) == 1
    assert friends_pairing(2) == 2
    assert friends_pairing(3) == 4


@pytest.mark.parametrize("n", range(3, 12))
def test_friends_pairing_recurrence(n):
    assert friends_pairing(n) == friends_pairing(n - 1) + (n - 1) * friends_pairing(n - 2)


def test_friends_pairing_rejects_zero():
    with pytest.raises(ValueError):
        friends_pairing(0)


def test_fibonacci_values():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(7) == 13


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-3)


@given(st.integers(1, 200))
def test_decreasing(n):
    assert decreasing(n) == sorted(range(1, n + 1), reverse=True)


def test_decreasing_rejects_zero():
    with pytest.raises(ValueError):
        decreasing(0)


def test_remove_duplicates_source_example():
    assert remove_duplicates("apnnacollege") == "apncoleg"


@given(st.text(alphabet="abcdefg", max_size=30))
def test_remove_duplicates_invariants(text):
    result = remove_duplicates(text)
    assert set(result) == set(text)
    assert len(result) == len(set(text))
    position = 0
    for ch in result:
        position = text.index(ch, position)
        assert text.index(ch) == position


@given(st.integers(1, 500))
def test_sum_natural(n):
    assert sum_natural(n) == sum(range(1, n + 1))


def test_sum_natural_rejects_zero():
    with pytest.raises(ValueError):
        sum_natural(0)


@pytest.mark.parametrize("n", range(0, 25))
def test_tiling_ways_follows_fibonacci(n):
    assert tiling_ways(n) == fibonacci(n + 1)


def test_tiling_ways_negative_raises():
    with pytest.raises(ValueError):
        tiling_ways(-1)