# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
beyond the standard library. It covers array exercises, sorting and searching,
recursion, letter and subset enumerations, string manipulations, binary and
general trees, a binary search tree, graphs stored as adjacency matrices, a
trie, a fraction type, and small stack, queue and pair containers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `dsakit.arrays` | `arrange`, `duplicate_number`, `longest_arithmetic_run`, `intersection`, `largest`, `running_maxima`, `pair_sum_count`, `second_largest`, `array_sum`, `subarray_sums`, `swap_alternate`, `triple_sum_count`, `unique_elements`, `sorted_unique` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sorted`, `binary_search`, `linear_search`, `rotate`, `push_zeros_to_end`, `sort_012`, `sort_0_and_1`, `add_digit_arrays` |
| `dsakit.recursion` | `factorial`, `fibonacci`, `first_occurrence`, `last_occurrence`, `count_digits`, `power`, `count_down`, `count_up`, `sum_to`, `knapsack` |
| `dsakit.combinations` | `letter_codes`, `case_variants`, `keypad_letters`, `keypad_combinations`, `space_partitions`, `subsequences`, `subsets` |
| `dsakit.strings` | `is_palindrome`, `replace_char`, `reverse_each_word`, `reverse_string`, `reverse_word_order`, `remove_spaces` |
| `dsakit.binary_tree` | `BinaryTreeNode`, `read_level_order`, `read_preorder`, `format_tree`, `count_nodes`, `inorder`, `build_tree`, `height`, `diameter`, `height_and_diameter`, `find_node`, `values_between`, `maximum`, `minimum`, `is_bst`, `is_bst_bounded`, `root_to_node_path` |
| `dsakit.bst` | `BinarySearchTree` with `insert`, `delete`, `in`, `len`, iteration in sorted order and `format` |
| `dsakit.general_tree` | `TreeNode`, `read_level_order`, `read_preorder`, `format_tree` |
| `dsakit.graphs` | `adjacency_matrix`, `weighted_matrix`, `dfs_from`, `dfs`, `bfs_from`, `bfs`, `path_bfs`, `path_dfs`, `prim_mst` |
| `dsakit.trie` | `Trie` with `insert`, `remove` and `in` |
| `dsakit.fraction` | `Fraction` with `+`, `*`, `==`, `add`, `multiply`, `increment`, `simplify` |
| `dsakit.student` | `Student` with an independent `copy` |
| `dsakit.stack` | `Stack`, `StackEmptyError`, `StackFullError` |
| `dsakit.circular_queue` | `CircularQueue`, `QueueEmptyError` |
| `dsakit.pair` | `Pair` |

Functions in `arrays`, `sorting` and `combinations` return new lists and
leave their input untouched.

## Examples

```python
from dsakit.sorting import bubble_sort, binary_search
from dsakit.bst import BinarySearchTree
from dsakit.graphs import adjacency_matrix, bfs, path_bfs
from dsakit.trie import Trie
from dsakit.fraction import Fraction

print(bubble_sort([5, 1, 4, 2]))        # [1, 2, 4, 5]
print(binary_search([1, 3, 5, 7], 5))   # 2

tree = BinarySearchTree([10, 5, 20, 7, 3, 15])
tree.delete(10)
print(15 in tree, list(tree))           # True [3, 5, 7, 15, 20]
print(tree.format(), end="")            # one "value:Lleft Rright" line per node

graph = adjacency_matrix(4, [(0, 1), (1, 2), (2, 3)])
print(bfs(graph))                       # [0, 1, 2, 3]
print(path_bfs(graph, 0, 3))            # [3, 2, 1, 0]

words = Trie(["and", "are", "dot"])
words.remove("and")
print("and" in words, "are" in words)   # False True

print(Fraction(10, 2) + Fraction(15, 4))  # 35 / 4
```

## Behaviour worth knowing

- Paths from `path_bfs`, `path_dfs` and `root_to_node_path` are listed from
  the target back to the start; they return `None` when there is no path.
- `prim_mst` returns one `(smaller, larger, weight)` edge per vertex 1..n-1
  and raises `ValueError` when the graph is not connected.
- `BinarySearchTree` keeps duplicates, sending equal values to the right;
  deleting an absent value does nothing.
- `Trie` accepts only the letters a-z and raises `ValueError` otherwise.
- `Fraction` equality compares the stored numerator and denominator as they
  are, so `2 / 4` and `1 / 2` differ until simplified. `simplify` leaves a
  fraction alone when either part is below 1.
- `Stack(capacity=n)` raises `StackFullError` once full; without a capacity
  it grows. Reading from an empty stack raises `StackEmptyError`.
- `CircularQueue` doubles its ring of slots when full; reading from an empty
  queue raises `QueueEmptyError`.
- Invalid arguments, such as too few values for `second_largest` or a
  negative `n` for `factorial`, raise `ValueError`.

## What it does not do

dsakit is a library only: it has no command-line program and reads nothing
from standard input. Tree and graph builders take their values as Python
iterables rather than prompting for them.