# algokit

A pure-Python collection of well-known algorithms and small data structures,
grouped by topic. It has no runtime dependencies and needs Python 3.10 or
later.

## Installation

```
pip install .
```

The tests use pytest, which the `test` extra installs:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.nodes` | `TreeNode`, `ListNode` (dataclasses that compare by identity) and `tree_from_level_order`, `tree_to_level_order`, `list_from_values`, `list_to_values` |
| `algokit.linked_lists` | `delete_node`, `has_cycle`, `is_palindrome`, `reverse_k_group` |
| `algokit.traversal` | Iterative `preorder_traversal`, `inorder_traversal`, `postorder_traversal` |
| `algokit.bst` | `bst_from_preorder`, `sorted_array_to_bst`, `lowest_common_ancestor`, `is_valid_bst`, `recover_tree` |
| `algokit.tree_algorithms` | `recover_from_preorder`, `is_balanced`, `flatten`, `max_path_sum`, `reverse_odd_levels`, `rob`, `diameter_of_binary_tree`, `longest_univalue_path` |
| `algokit.containers` | `LRUCache`, `MinStack`, `Trie`, `MedianFinder`, `Encrypter` |
| `algokit.strings` | `count_and_say`, `group_anagrams`, `smallest_equivalent_string`, `ladder_length`, `letter_combinations`, `longest_palindrome_from_words`, `longest_valid_parentheses`, `longest_palindromic_substring`, `find_rotate_steps`, `edit_distance`, `most_common_word`, `number_of_arrays` |
| `algokit.arrays` | `two_sum`, `contains_nearby_duplicate`, `search_range`, `find_kth_largest`, `max_sliding_window`, `next_greater_element`, `find_closest_elements`, `four_sum` |
| `algokit.dynamic_programming` | `job_scheduling`, `paint_grid_ways`, `best_team_score`, `valid_partition`, `count_special_numbers`, `length_of_lis`, `max_envelopes`, `combination_sum4`, `count_arrangement`, `num_factored_binary_trees`, `max_two_events` |
| `algokit.greedy` | `min_taps`, `min_set_size`, `max_performance`, `minimum_replacement`, `min_refuel_stops`, `min_k_bit_flips`, `maximum_score` |
| `algokit.graphs` | `garden_no_adj`, `min_trio_degree`, `longest_cycle`, `trap_rain_water`, `largest_component_size`, `find_latest_step` |
| `algokit.bits` | `maximize_xor`, `find_maximum_xor`, `closest_to_target`, `check_powers_of_three`, `is_power_of_four` |
| `algokit.matrices` | `max_sum_submatrix`, `spiral_order` |
| `algokit.ordering` | `permute`, `find_relative_ranks` |

Functions that count large numbers of possibilities (`number_of_arrays`,
`paint_grid_ways`, `num_factored_binary_trees`, `max_performance`) return
their result modulo 10**9 + 7. Invalid input, such as a `k` out of range or
sequences of mismatched length, raises `ValueError`; empty containers raise
`IndexError` (`MinStack`) or `ValueError` (`MedianFinder`).

## Examples

Trees are easiest to build from a level-order list, with `None` for missing
children:

```python
from algokit.nodes import tree_from_level_order
from algokit.traversal import inorder_traversal
from algokit.tree_algorithms import max_path_sum

root = tree_from_level_order([-10, 9, 20, None, None, 15, 7])
inorder_traversal(root)   # [9, -10, 15, 20, 7]
max_path_sum(root)        # 42
```

Linked lists work the same way:

```python
from algokit.nodes import list_from_values, list_to_values
from algokit.linked_lists import reverse_k_group

head = reverse_k_group(list_from_values([1, 2, 3, 4, 5]), 2)
list_to_values(head)      # [2, 1, 4, 3, 5]
```

The containers are ordinary classes:

```python
from algokit.containers import LRUCache, MedianFinder

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)              # 1
cache.put(3, 3)           # evicts key 2
cache.get(2)              # -1

finder = MedianFinder()
for n in (1, 2, 3):
    finder.add_num(n)
finder.find_median()      # 2.0
```

Plain functions take and return built-in types:

```python
from algokit.strings import edit_distance
from algokit.dynamic_programming import length_of_lis

edit_distance("horse", "ros")             # 3
length_of_lis([10, 9, 2, 5, 3, 7, 101])   # 4
```

## What it does not do

algokit is a library only: it has no command-line tool, and every function
works on in-memory Python values.