"""Queries and transformations on binary trees and binary search trees."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator
from itertools import pairwise

from algokit.tree import BSTIterator, TreeNode


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path as values joined by '->', left paths first."""
    paths: list[str] = []

    def walk(node: TreeNode | None, prefix: str) -> None:
        if node is None:
            return
        path = prefix + str(node.val)
        if node.left is None and node.right is None:
            paths.append(path)
            return
        walk(node.left, path + "->")
        walk(node.right, path + "->")

    walk(root, "")
    return paths


def lca_bst(root: TreeNode | None, p: TreeNode, q: TreeNode) -> TreeNode | None:
    """Return the lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    return None


def lowest_common_ancestor(root: TreeNode | None, p: TreeNode,
                           q: TreeNode) -> TreeNode | None:
    """Return the lowest common ancestor of nodes ``p`` and ``q`` in any binary tree."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left < 0 or right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return height(root) >= 0


def _inorder(root: TreeNode | None) -> Iterator[int]:
    return BSTIterator(root)


def count_in_range(root: TreeNode | None, low: int, high: int) -> int:
    """Count the nodes whose value lies in ``[low, high]``."""
    return sum(1 for value in _inorder(root) if low <= value <= high)


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    longest = 0

    def height(node: TreeNode | None) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        longest = max(longest, left + right)
        return 1 + max(left, right)

    height(root)
    return longest


def largest_bst_size(root: TreeNode | None) -> int:
    """Return the node count of the largest subtree that is a binary search tree."""

    def visit(node: TreeNode | None) -> tuple[float, float, int]:
        if node is None:
            return math.inf, -math.inf, 0
        left_lo, left_hi, left_size = visit(node.left)
        right_lo, right_hi, right_size = visit(node.right)
        if left_hi < node.val < right_lo:
            return (min(node.val, left_lo), max(node.val, right_hi),
                    1 + left_size + right_size)
        return -math.inf, math.inf, max(left_size, right_size)

    return visit(root)[2]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (p.val == q.val
            and is_same_tree(p.left, q.left)
            and is_same_tree(p.right, q.right))


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum along any non-empty path between two nodes."""
    if root is None:
        raise ValueError("tree is empty")
    best = -math.inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return int(best)


def min_abs_difference(root: TreeNode | None) -> int:
    """Return the smallest difference between values adjacent in order; 0 for an empty tree."""
    if root is None:
        return 0
    values = list(_inorder(root))
    if len(values) < 2:
        raise ValueError("at least two nodes are needed")
    return min(abs(a - b) for a, b in pairwise(values))


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Return the sum of the values lying in ``[low, high]``."""
    return sum(value for value in _inorder(root) if low <= value <= high)


def sum_of_left_leaves(root: TreeNode | None) -> int:
    """Return the sum of leaves that are the left child of their parent."""
    if root is None:
        return 0
    total = 0
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.right is not None:
            queue.append(node.right)
        left = node.left
        if left is not None:
            if left.left is None and left.right is None:
                total += left.val
            else:
                queue.append(left)
    return total


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""

    def mirrored(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return a.val == b.val and mirrored(a.left, b.right) and mirrored(a.right, b.left)

    return root is None or mirrored(root.left, root.right)