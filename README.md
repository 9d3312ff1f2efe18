# dsakit

A small library of classic data structures and algorithms. It is written in
plain Python and has no third-party dependencies.

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
| `dsakit.searching` | `binary_search`, `exponential_search`, `interpolation_search`, `fibonacci_search`, `contains_2d`, `two_sum`, `has_pair_with_sum` |
| `dsakit.sorting` | `bitonic_sort`, `heap_sort`, `pigeonhole_sort`, `radix_sort`, `bubble_sort`, `bubble_sort_passes`, `insertion_sort`, `sorted_merge`, `wave_sort`, `sort_012`, `count_sort_012` |
| `dsakit.trees` | `AVLTree`, `BinarySearchTree`, `TreeNode`, `Placement`, `morris_inorder` |
| `dsakit.strings` | `rabin_karp`, `lcs_length`, `most_frequent_letter`, `reverse_with_stack`, `infix_to_postfix`, `classify_case`, `CharCase`, `letter_square` |
| `dsakit.singly` | `SinglyLinkedList`, `Node`, `lists_equal`, `format_list`, `has_cycle`, `cycle_start` |
| `dsakit.circular` | `CircularLinkedList` |
| `dsakit.stack` | `BoundedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.diagonal` | `DiagonalMatrix` |
| `dsakit.arrays` | `repeating_and_missing`, `longest_consecutive`, `max_subarray_sum_brute`, `kadane`, `merge_intervals`, `next_permutation`, `pascal_triangle`, `permutations`, `subarray_with_sum`, `trapped_water`, `max_profit`, `max_profit_brute`, `majority_element`, `min_swaps`, `find_duplicate`, `top_three` |
| `dsakit.numbers` | `fib_recursive`, `fib_memo`, `fib_iterative`, `factorial`, `gcd`, `knapsack`, `kth_bit`, `kth_bit_by_scan`, `rectangle_area`, `circle_area`, `triangle_area`, `parity` |

The search functions return an index, or `None` when the value is absent.
The sorting functions take any iterable and return a new list. They leave
their input unchanged.

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import heap_sort
from dsakit.trees import AVLTree
from dsakit.strings import infix_to_postfix
from dsakit.arrays import merge_intervals

binary_search([10, 20, 30, 40, 50], 40)       # 3
heap_sort([12, 11, 13, 5, 6, 7])              # [5, 6, 7, 11, 12, 13]

tree = AVLTree()
for value in (10, 20, 30):
    tree.insert(value)
tree.preorder()                                # [20, 10, 30]

infix_to_postfix("A*B+C-D")                    # "AB*C+D-"
merge_intervals([[1, 3], [2, 6], [8, 10]])     # [(1, 6), (8, 10)]
```

The linked lists behave like ordinary Python containers. You can iterate
over them and take their `len()`:

```python
from dsakit.singly import SinglyLinkedList

items = SinglyLinkedList([3, 1, 2])
items.insert_end(0)
items.sort()
list(items)                                    # [0, 1, 2, 3]
```

Operations that cannot proceed raise exceptions instead of returning
sentinel values:

- Deleting from an empty list raises `IndexError`.
- Naming a value that is not in the list raises `ValueError`.
- `BoundedStack.push` on a full stack raises `StackOverflowError`.
- `BoundedStack.pop` and `BoundedStack.top` on an empty stack raise
  `StackUnderflowError`.
- `DiagonalMatrix` uses 1-based indices and raises `IndexError` for an
  index outside the matrix.

## Limits

- `bitonic_sort` accepts only inputs whose length is a power of two.
- `radix_sort` accepts only non-negative integers.
- `has_pair_with_sum` lets a value pair with itself.
- `lists_equal` compares only the common length of its two inputs.
- `circle_area` uses the formula `4 * 3.14 * r * r`.

## What it does not do

dsakit is a library only. It has no command-line program and no
interactive menus. Its linked lists are singly linked and circular. It has
no doubly linked list, and apart from `DiagonalMatrix` it has no
general matrix helpers.