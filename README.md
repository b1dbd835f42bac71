# algopractice

A collection of well-known algorithm exercises written as plain Python
functions: array tricks, linked-list manipulation, binary search trees, greedy
selection, backtracking and string processing. It has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

Functions raise `ValueError` where an answer does not exist, for example the
maximum of an empty sequence or a `k` outside the valid range.

### `algopractice.arrays`

- `kth_smallest(values, k)` – the k-th smallest value, counting from 1.
- `max_element(values)`, `min_element(values)` – largest and smallest value.
- `is_palindrome_array(values)` – whether every number reads the same with its
  digits reversed (negative numbers never do, zero does).
- `max_subarray_sum(values)` – Kadane's maximum sum of a non-empty contiguous run.
- `longest_consecutive(values)` – length of the longest run of consecutive integers.
- `max_consecutive_ones(values)` – length of the longest run of ones.
- `merge_intervals(intervals)` – merge overlapping closed `[start, end]`
  intervals, sorted by start.
- `remove_duplicates(values)` – drop repeated neighbours of a sorted list in
  place and return the new length.
- `reverse_segment(values, start, end)` – reverse `values[start..end]`
  (both ends inclusive) in place.
- `sort012(values)` – single-pass in-place sort of a list holding only 0, 1 and 2.
- `majority_element(values)` – Boyer–Moore majority candidate.
- `majority_elements_third(values)` – values occurring more than `len(values) // 3` times.
- `three_sum(values)` – distinct triples summing to zero, in sorted order.
- `trap_rain_water(heights)` – water held by an elevation profile.

```python
from algopractice.arrays import merge_intervals, three_sum

merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
```

### `algopractice.matrix`

- `search_matrix(matrix, target)` – binary search in a matrix whose rows, read
  one after another, form a single sorted sequence.

### `algopractice.greedy`

- `Item(value, weight)` – an item that may be taken in part; `ratio` is value per weight.
- `fractional_knapsack(capacity, items)` – best total value that fits when
  items may be split.
- `Meeting(start, end, position)` and `max_meetings(starts, ends)` – the
  1-based positions of a largest set of meetings for one room, each starting
  strictly after the previous one ends.

### `algopractice.linked_list`

`ListNode(val, next, random)` is a singly linked node; iterating over a node
yields it and every node after it. `from_values` builds a chain from values
and `to_values` reads one back.

- `copy_random_list(head)` – deep copy, including the `random` links.
- `middle_node(head)` – the middle node (the second one of two middles).
- `is_palindrome(head)` – leaves the list as it was.
- `reverse_list(head)`, `remove_nth_from_end(head, n)`, `rotate_right(head, k)`
- `merge_two_lists(first, second)` – splice two sorted lists into one.
- `detect_cycle(head)` – the node where a cycle begins, or `None`.

```python
from algopractice.linked_list import from_values, rotate_right, to_values

to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2))   # [4, 5, 1, 2, 3]
```

### `algopractice.bst`

`TreeNode(data, left, right)` plus `inorder` (a generator of values),
`count_nodes`, `merge_sorted`, `sorted_to_bst` (height-balanced),
`merge_trees` (two BSTs into a new balanced one), `find_median` and
`min_value`.

### `algopractice.recursion`

- `permutations(values)` – every ordering, generated by successive swaps.
- `is_valid_placement(board, row, col, digit)` and `solve_sudoku(board)` –
  fills the `"."` cells of a 9×9 board of strings in place; raises
  `ValueError` if there is no solution.
- `find_paths(maze)` – every path from the top-left to the bottom-right of a
  square 0/1 maze, spelled with `D`, `L`, `R`, `U`, in lexicographic order.
- `subsets_with_dup(values)` – all distinct subsets, each sorted.

### `algopractice.strings`

- `duplicate_counts(text)` – characters occurring more than once, with their
  counts, sorted by character.
- `edit_distance(first, second)` – Levenshtein distance.
- `group_anagrams(words)` – groups in order of first appearance.
- `is_isomorphic(first, second)`, `longest_common_prefix(words)`,
  `is_palindrome(text)`

## Command line

`algopractice-kth` reads test cases from a file named on the command line, or
from standard input if none is given: first the number of cases, then for
each case the array length, the array values and `k`. It prints the k-th
smallest value of each array on its own line, and reports malformed input as
a usage error.

```
$ printf '1\n5\n7 10 4 3 20\n3\n' | algopractice-kth
7
```

This is the only command; the other algorithms are available as library
functions only.