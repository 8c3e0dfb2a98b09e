# algokit

Classic algorithms written as plain Python functions and a few small classes:
sums and pairs over sequences, array rearrangements, grid searches, graph
traversals and shortest paths, union-find, heaps, string and stack problems,
an LRU cache, and binary trees. It has no runtime dependencies and needs
Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `algokit.sums` | `three_sum`, `four_sum`, `two_sum`, `subarray_sum`, `subarrays_div_by_k`, `has_pair_with_difference`, `max_area`, `min_chocolate_difference`, `max_card_score`, `max_profit`, `max_profit_unlimited`, `can_pair_to_threshold` |
| `algokit.arrays` | `find_all_duplicates`, `find_duplicate`, `find_peak_element`, `majority_element`, `merge_sorted`, `move_zeroes`, `remove_duplicates`, `search_rotated`, `sort_colors`, `decode_string` |
| `algokit.grid` | `game_of_life`, `set_zeroes`, `spiral_order`, `word_exists`, `largest_rectangle_in_histogram`, `max_rectangle_area`, `count_distinct_islands`, `fill_surrounded`, `number_of_enclaves`, `find_maze_paths`, `min_knight_steps` |
| `algokit.disjoint_set` | `DisjointSet` (`find`, `union`), `largest_island`, `max_stones_removed`, `min_operations_to_connect` |
| `algokit.traversal` | `bfs_order`, `dfs_order`, `has_directed_cycle`, `has_undirected_cycle`, `is_bipartite`, `topological_sort`, `eventual_safe_nodes`, `can_finish_tasks`, `alien_order` |
| `algokit.shortest_paths` | `NegativeCycleError`, `bellman_ford`, `cheapest_price`, `find_city`, `floyd_warshall`, `minimum_spanning_tree_weight`, `time_to_inform`, `word_ladder_length` |
| `algokit.heaps` | `furthest_building`, `kth_largest`, `nth_ugly_number`, `top_k_frequent` |
| `algokit.mathematics` | `add_binary`, `maximum_product_of_three`, `product_except_self` |
| `algokit.strings` | `find_duplicate_chars`, `str_str`, `longest_common_prefix`, `valid_palindrome`, `is_valid_parentheses` |
| `algokit.stacks` | `backspace_compare`, `eval_rpn`, `evaluate_postfix`, `next_greater_element`, `celebrity` |
| `algokit.lru` | `LRUCache` (`get`, `put`, `len()`, `in`) |
| `algokit.tree` | `TreeNode`, `BSTIterator`, `tree_from_list`, `inorder_traversal`, `level_order`, `zigzag_level_order`, `right_side_view`, `serialize`, `deserialize` |
| `algokit.tree_algorithms` | `binary_tree_paths`, `lca_bst`, `lowest_common_ancestor`, `is_balanced`, `count_in_range`, `diameter`, `largest_bst_size`, `invert_tree`, `is_same_tree`, `max_depth`, `has_path_sum`, `max_path_sum`, `min_abs_difference`, `range_sum_bst`, `sum_of_left_leaves`, `is_symmetric` |

## Conventions

- Graphs are adjacency lists: item `i` holds the neighbours of vertex `i`.
  Weighted edges are `(u, v, weight)` triples.
- Grids and matrices are lists of lists. Functions such as `game_of_life`,
  `set_zeroes`, `move_zeroes` and `sort_colors` change their argument in
  place and return `None`; the others return new values.
- Invalid input (an empty sequence where a value is needed, an out-of-range
  `k`, a malformed expression) raises `ValueError`. `bellman_ford` raises
  `NegativeCycleError`, a subclass of `ValueError`, when a negative cycle is
  reachable from the source, and reports unreachable vertices as `math.inf`.
- Trees are built from `TreeNode(val, left, right)`; `tree_from_list` takes
  level-order values with `None` for a missing child.

## Examples

```python
from algokit.sums import three_sum
from algokit.lru import LRUCache
from algokit.tree import tree_from_list, level_order, serialize, deserialize
from algokit.shortest_paths import bellman_ford, NegativeCycleError

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                            # 1
cache.put(3, 3)                         # evicts key 2
cache.get(2)                            # None

root = tree_from_list([3, 9, 20, None, None, 15, 7])
level_order(root)                       # [[3], [9, 20], [15, 7]]
serialize(root)                         # '3,9,20,#,#,15,7,#,#,#,#,'
level_order(deserialize(serialize(root)))  # [[3], [9, 20], [15, 7]]

bellman_ford(3, [[0, 1, 4], [1, 2, -2]], 0)  # [0, 4, 2]
try:
    bellman_ford(2, [[0, 1, -1], [1, 0, -1]], 0)
except NegativeCycleError:
    ...
```

## What it does not do

algokit is a library only: it has no command-line program, reads no input
files and keeps no state between calls beyond the objects you create
(`LRUCache`, `DisjointSet`, `BSTIterator`).