# dsadrills

A collection of well-known algorithm exercises written as small, plain Python
functions. Each function solves one classic problem and can be called directly
from your own code or tests. There are no third-party dependencies.

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

### `dsadrills.basics`

Warm-up problems on lists and numbers:

- `missing_number(arr, n)` – the one value of `1..n+1` that is not in `arr`
- `move_zeroes(nums)` – move zeros to the end in place, keeping the order of the rest
- `odd_occurrence(arr)` – a value that occurs an odd number of times, or `None`
- `is_palindrome(x)` – whether an integer's digits read the same backwards
  (negative numbers are never palindromes)
- `reverse_array(arr)` – reverse a list in place
- `sort_colors(nums)` – sort a list of 0s, 1s and 2s in place; any other value
  raises `ValueError`
- `repeating_elements(arr)` – values occurring more than once, in order of first appearance
- `union_intersection(a, b)` – the sorted union of both lists, and the items of
  `a` that also occur in `b`

### `dsadrills.arrays`

Array and subarray problems:

- `two_sum(nums, target)` – indices `[i, j]` (with `j < i`) of two values adding
  to `target`, or `[]`
- `three_sum(nums)`, `four_sum(nums, target)` – distinct sorted triples and
  quadruples with the given sum
- `find_max_length(nums)` – longest subarray with equal numbers of 0s and 1s
- `increasing_triplet(nums)`
- `max_subarray(nums)`, `max_product(nums)` – best sum and product of a
  non-empty subarray; an empty list raises `ValueError`
- `max_ascending_sum(nums)` – best sum of a strictly ascending run
- `product_except_self(arr)`
- `rotate(nums, k)` – rotate right by `k` in place
- `row_and_maximum_ones(mat)` – `(row index, count)` of the first row with the most ones
- `subarray_sum(nums, k)` – number of subarrays summing to `k`
- `num_subarray_product_less_than_k(nums, k)`
- `zero_sum_subarray_exists(arr)`

```python
from dsadrills.arrays import max_subarray, three_sum

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
three_sum([-1, 0, 1, 2, -1, -4])                # [[-1, -1, 2], [-1, 0, 1]]
```

### `dsadrills.linked`

Singly linked lists built from `Node` objects (`data` and `next`). Use
`from_iterable` to build a list and `to_list` to read one back; iterating a
`Node` yields its values and stops if a node comes round again.

- `make_loop(head, position)` – link the last node back to the node at a
  1-based position (0 does nothing); `detect_loop(head)`
- `delete_node(head, x)` – remove the node at 1-based position `x`;
  `delete_alternate(head)` – remove every second node
- `intersect_point(head1, head2)`, `intersect_point_two_pointer(head1, head2)` –
  the first node shared by two lists; `sorted_intersection(head1, head2)` –
  a new list of the values two sorted lists have in common
- `get_middle(head)` – middle value, `-1` for an empty list
- `kth_from_last(head, k)` – `-1` when the list is shorter than `k`
- `merge_sorted(list1, list2)`
- `delete_duplicates(head)` – keep one of each run of equal values;
  `delete_all_duplicates(head)` – drop every repeated value entirely
- `reversed_values(head)`
- `segregate(head)` – relink a list of 0s, 1s and 2s into sorted order

```python
from dsadrills.linked import delete_node, from_iterable, get_middle, to_list

head = from_iterable([1, 2, 3, 4, 5])
get_middle(head)                  # 3
to_list(delete_node(head, 2))     # [1, 3, 4, 5]
```

### `dsadrills.contests`

Short contest problems:

- `add_twenty(n)`
- `increasing_marks(values)` – 1 for a new maximum, 0 for a value below it
  (a value equal to the maximum gets no mark)
- `binary_strings_verdict(s1, s2)`
- `max_product_equivalent_length(nums)`
- `mirror_score(s)`
- `two_frogs(n, a, b)`
- `can_craft(own, need)`
- `restore_trail(n, m, steps, grid)` – returns a new grid whose path cells are
  filled so every row and column sums to zero

## Command line

Two commands read their input from standard input and print answers to
standard output.

`dsadrills-basics` reads `n a1 .. an m b1 .. bm` and prints the sorted union of
the two lists on one line and their intersection on the next:

```
echo "4 1 2 3 4 3 3 4 5" | dsadrills-basics
```

`dsadrills-contests` takes the name of a problem – `binary`, `crafting`,
`frogs`, `marks`, `plus20` or `trail` – and reads that problem's test cases
(a count first, then each case):

```
echo "2 3 1 3 4 2 1" | dsadrills-contests frogs
```

## Limits

The array, linked-list and remaining contest functions (`mirror_score`,
`max_product_equivalent_length`) are available only from Python; the commands
cover just the problems listed above.