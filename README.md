# dsakit

Classic data structures and algorithms in plain Python, with no runtime
dependencies. Every function returns its result; nothing is printed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `binary_search`, `linear_search`, `best_profit`, `max_subarray_sum` (Kadane), `max_subarray_sum_brute_force`, `max_subarray_sum_prefix`, `largest`, `subarrays`, `reverse_in_place`, `trapped_rainwater`, `pair_sum` |
| `dsakit.recursion` | `binary_strings`, `is_sorted`, `first_occurrence`, `last_occurrence`, `friends_pairing`, `fibonacci`, `decreasing`, `remove_duplicates`, `sum_natural`, `tiling_ways` |
| `dsakit.sorting` | `bubble_sort`, `counting_sort`, `builtin_sort`, `insertion_sort`, `selection_sort` |
| `dsakit.backtracking` | `permutations`, `grid_ways`, `n_queens`, `format_board`, `subsets`, `solve_sudoku`, `format_sudoku` |
| `dsakit.stacks` | `Stack`, `LinkedStack`, `push_at_bottom`, `reverse_stack`, `reverse_string` |
| `dsakit.queues` | `CircularQueue`, `LinkedQueue`, `TwoStackQueue`, `TwoQueueStack`, `interleave`, `reverse_queue`, `first_non_repeating` |
| `dsakit.graphs` | `Graph` (`add_edge`, `neighbours`, `bfs`, `dfs`, `has_path`, `all_paths`, `is_bipartite`, `has_cycle`, `topological_sort`), `Edge`, `bellman_ford`, `can_finish`, `DisjointSet` |
| `dsakit.hashing` | `count_distinct`, `HashTable`, `itinerary`, `largest_zero_sum_subarray`, `majority_elements`, `count_subarrays_with_sum`, `is_anagram` |
| `dsakit.heaps` | `min_rope_cost`, `heap_sort`, `MaxHeap`, `nearby_cars`, `Student`, `students_by_name`, `sliding_window_max`, `weakest_rows` |
| `dsakit.tries` | `Trie`, `longest_word`, `shortest_unique_prefixes`, `word_break` |

## Examples

```python
from dsakit.arrays import binary_search, trapped_rainwater
from dsakit.sorting import insertion_sort
from dsakit.tries import word_break

binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 7)        # 6
binary_search([1, 2, 3], 9)                              # None
trapped_rainwater([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
insertion_sort([3, 6, 2, 1, 8])                          # [1, 2, 3, 6, 8]
word_break(["i", "like", "sam", "samsung", "mobile", "ice"], "ilikesamsung")  # True
```

Working with graphs:

```python
from dsakit.graphs import Graph

g = Graph(7)
for u, v in [(0, 1), (0, 2), (1, 3), (2, 4), (3, 4), (3, 5), (4, 5), (5, 6)]:
    g.add_edge(u, v)

g.bfs(0)          # [0, 1, 2, 3, 4, 5, 6]
g.has_path(0, 6)  # True
```

Pass `directed=True` to `Graph` for a directed graph; `has_cycle` and
`topological_sort` then follow edge direction.

## Conventions

- Searches (`binary_search`, `linear_search`, `first_occurrence`,
  `last_occurrence`, `pair_sum`) return `None` when nothing is found.
- The sorting functions in `dsakit.sorting` return a new ascending list;
  `heaps.heap_sort` and `arrays.reverse_in_place` change the list they are given.
- Taking from an empty stack, queue or heap raises `IndexError`; pushing onto a
  full `CircularQueue` raises `OverflowError`.
- `HashTable.search` raises `KeyError` for a missing key, and
  `HashTable.remove` returns whether a binding was dropped.
- `solve_sudoku` returns a solved copy and raises `ValueError` for a malformed,
  clashing or unsolvable grid.
- Invalid sizes and counts (a negative `n`, a window larger than the input, an
  empty sequence where one element is needed) raise `ValueError`.

## What it does not do

This is a library only: it has no command-line program and reads no input of
its own. The `format_board`, `format_sudoku` and `HashTable.format_table`
helpers render results as text for callers that want to print them.