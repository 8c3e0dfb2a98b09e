import pytest

from algokit.tree import (
    deserialize,
    inorder_traversal,
    level_order,
    serialize,
    tree_from_list,
)
from algokit.tree_algorithms import (
    binary_tree_paths,
    count_in_range,
    diameter,
    has_path_sum,
    invert_tree,
    is_balanced,
    is_same_tree,
    is_symmetric,
    largest_bst_size,
    lca_bst,
    lowest_common_ancestor,
    max_depth,
    max_path_sum,
    min_abs_difference,
    range_sum_bst,
    sum_of_left_leaves,
)


def _find(root, value):
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if node.val == value:
            return node
        stack.extend((node.left, node.right))
    raise LookupError(value)


BST_VALUES = [6, 2, 8, 0, 4, 7, 9, None, None, 3, 5]
TREE_VALUES = [3, 5, 1, 6, 2, 0, 8, None, None, 7, 4]


def test_binary_tree_paths():
    root = tree_from_list([1, 2, 3, None, 5])
    assert binary_tree_paths(root) == ["1->2->5", "1->3"]


def test_binary_tree_paths_empty():
    assert binary_tree_paths(None) == []


def test_binary_tree_paths_start_at_root_and_count_leaves():
    root = tree_from_list(TREE_VALUES)
    paths = binary_tree_paths(root)
    assert all(path.startswith("3->") for path in paths)
    assert [path.rsplit("->", 1)[1] for path in paths] == ["6", "7", "4", "0", "8"]


def test_lca_bst():
    root = tree_from_list(BST_VALUES)
    assert lca_bst(root, _find(root, 2), _find(root, 8)) is root
    two = _find(root, 2)
    assert lca_bst(root, two, _find(root, 4)) is two
    assert lca_bst(root, _find(root, 3), _find(root, 5)) is _find(root, 4)


def test_lca_bst_empty():
    root = tree_from_list(BST_VALUES)
    assert lca_bst(None, root, root) is None


def test_lowest_common_ancestor():
    root = tree_from_list(TREE_VALUES)
    assert lowest_common_ancestor(root, _find(root, 5), _find(root, 1)) is root
    five = _find(root, 5)
    assert lowest_common_ancestor(root, five, _find(root, 4)) is five
    assert lowest_common_ancestor(root, _find(root, 7), _find(root, 4)) is _find(root, 2)


def test_lowest_common_ancestor_empty():
    node = tree_from_list([1])
    assert lowest_common_ancestor(None, node, node) is None


def test_is_balanced():
    assert is_balanced(tree_from_list([3, 9, 20, None, None, 15, 7])) is True
    assert is_balanced(tree_from_list([1, 2, 2, 3, 3, None, None, 4, 4])) is False
    assert is_balanced(None) is True


def test_count_and_range_sum_agree_with_inorder():
    root = tree_from_list([10, 5, 15, 3, 7, None, 18])
    values = inorder_traversal(root)
    assert count_in_range(root, 7, 15) == len([v for v in values if 7 <= v <= 15])
    assert range_sum_bst(root, 7, 15) == 7 + 10 + 15
    assert count_in_range(root, 100, 200) == 0
    assert range_sum_bst(None, 0, 10) == 0


def test_diameter_of_chain_is_edge_count():
    chain = tree_from_list([1, 2, None, 3, None, 4])
    assert diameter(chain) == len(inorder_traversal(chain)) - 1
    assert diameter(None) == 0


def test_diameter_not_through_root_bounded_by_depth():
    root = tree_from_list(TREE_VALUES)
    assert diameter(root) <= 2 * (max_depth(root) - 1)
    assert diameter(root) >= max_depth(root) - 1


def test_largest_bst_whole_tree():
    root = tree_from_list(BST_VALUES)
    assert largest_bst_size(root) == len(inorder_traversal(root))
    assert largest_bst_size(None) == 0


def test_largest_bst_subtree():
    root = tree_from_list([1, 4, 5, 2, 6])
    # The subtree rooted at 4 with children 2 and 6 is a BST.
    assert largest_bst_size(root) == 3


def test_invert_tree_reverses_inorder_and_round_trips():
    root = tree_from_list(TREE_VALUES)
    original = inorder_traversal(root)
    inverted = invert_tree(root)
    assert inverted is root
    assert inorder_traversal(inverted) == original[::-1]
    assert inorder_traversal(invert_tree(inverted)) == original
    assert invert_tree(None) is None


def test_is_same_tree():
    root = tree_from_list(TREE_VALUES)
    assert is_same_tree(root, deserialize(serialize(root))) is True
    assert is_same_tree(tree_from_list([1, 2]), tree_from_list([1, None, 2])) is False
    assert is_same_tree(tree_from_list([1, 2, 1]), tree_from_list([1, 1, 2])) is False
    assert is_same_tree(None, None) is True


def test_max_depth_matches_level_count():
    root = tree_from_list([3, 9, 20, None, None, 15, 7])
    assert max_depth(root) == len(level_order(root))
    assert max_depth(None) == 0


def test_has_path_sum():
    root = tree_from_list([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1])
    assert has_path_sum(root, 22) is True
    assert has_path_sum(root, 5 + 4 + 11) is False
    assert has_path_sum(None, 0) is False


def test_max_path_sum():
    chain = tree_from_list([1, 2, None, 3])
    assert max_path_sum(chain) == sum(inorder_traversal(chain))
    negatives = tree_from_list([-3, -1, -7])
    assert max_path_sum(negatives) == max(inorder_traversal(negatives))
    assert max_path_sum(tree_from_list([-10, 9, 20, None, None, 15, 7])) == 15 + 20 + 7


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_min_abs_difference():
    assert min_abs_difference(tree_from_list([4, 2, 6, 1, 3])) == 1
    assert min_abs_difference(None) == 0
    with pytest.raises(ValueError):
        min_abs_difference(tree_from_list([7]))


def test_sum_of_left_leaves():
    assert sum_of_left_leaves(tree_from_list([3, 9, 20, None, None, 15, 7])) == 9 + 15
    assert sum_of_left_leaves(tree_from_list([1])) == 0
    assert sum_of_left_leaves(None) == 0


def test_is_symmetric():
    assert is_symmetric(tree_from_list([1, 2, 2, 3, 4, 4, 3])) is True
    assert is_symmetric(tree_from_list([1, 2, 2, None, 3, None, 3])) is False
    assert is_symmetric(None) is True