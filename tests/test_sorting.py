import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    builtin_sort,
    counting_sort,
    insertion_sort,
    selection_sort,
)


def _all_results(items):
    return [
        bubble_sort(items),
        counting_sort(items),
        builtin_sort(items),
        insertion_sort(items),
        selection_sort(items),
    ]


@given(items=st.lists(st.integers(-100, 100), max_size=40))
def test_sorts_match_sorted(items):
    expected = sorted(items)
    assert bubble_sort(items) == expected
    assert counting_sort(items) == expected
    assert builtin_sort(items) == expected
    assert insertion_sort(items) == expected
    assert selection_sort(items) == expected


@given(items=st.lists(st.integers(0, 20), max_size=20))
def test_sorts_leave_input_alone(items):
    original = list(items)
    bubble_sort(items)
    assert items == original
    counting_sort(items)
    assert items == original
    builtin_sort(items)
    assert items == original
    insertion_sort(items)
    assert items == original
    selection_sort(items)
    assert items == original


@pytest.mark.parametrize(
    "items",
    [
        [3, 6, 2, 1, 8, 7, 4, 5, 3, 1],
        [1, 4, 1, 3, 2, 4, 3, 7],
        [4, 2, 6, 3, 7, 9, 4, 2, 6],
    ],
)
def test_source_examples(items):
    expected = sorted(items)
    assert bubble_sort(items) == expected
    assert counting_sort(items) == expected
    assert builtin_sort(items) == expected
    assert insertion_sort(items) == expected
    assert selection_sort(items) == expected


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert counting_sort([]) == []
    assert builtin_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([5]) == [5]
    assert counting_sort([5]) == [5]
    assert builtin_sort([5]) == [5]
    assert insertion_sort([5]) == [5]
    assert selection_sort([5]) == [5]


def test_accepts_iterables():
    expected = [1, 2, 3]
    assert bubble_sort(iter([3, 1, 2])) == expected
    assert counting_sort(iter([3, 1, 2])) == expected
    assert builtin_sort(iter([3, 1, 2])) == expected
    assert insertion_sort(iter([3, 1, 2])) == expected
    assert selection_sort(iter([3, 1, 2])) == expected


def test_all_sorts_agree_on_duplicates():
    results = _all_results([2, 2, 1, 1, 0])
    assert all(result == [0, 1, 1, 2, 2] for result in results)


def test_counting_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        counting_sort([1, "a", 2])


@given(st.lists(st.integers(-5, 5), max_size=30))
def test_counting_sort_preserves_counts(items):
    result = counting_sort(items)
    assert all(result.count(v) == items.count(v) for v in set(items))
    assert all(a <= b for a, b in zip(result, result[1:]))