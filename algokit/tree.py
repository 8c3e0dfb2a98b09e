"""Binary tree nodes, traversals, a BST iterator and a text encoding of trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _attach(node: TreeNode, side: str, value: int | None,
            queue: deque[TreeNode]) -> None:
    if value is not None:
        child = TreeNode(value)
        setattr(node, side, child)
        queue.append(child)


def tree_from_list(values: Sequence[int | None]) -> TreeNode | None:
    """Build a tree from level-order values where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, _MISSING)
            if value is _MISSING:
                return root
            _attach(node, side, value, queue)
    return root


class BSTIterator:
    """Iterate over a binary search tree's values in ascending order."""

    def __init__(self, root: TreeNode | None) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: TreeNode | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val

    def has_next(self) -> bool:
        """Tell whether another value remains."""
        return bool(self._stack)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
    return list(BSTIterator(root))


def _levels(root: TreeNode | None) -> Iterator[list[int]]:
    if root is None:
        return
    level = [root]
    while level:
        yield [node.val for node in level]
        level = [child for node in level for child in (node.left, node.right) if child]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    return list(_levels(root))


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the levels alternately left to right and right to left, starting left to right."""
    return [level if depth % 2 == 0 else level[::-1]
            for depth, level in enumerate(_levels(root))]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level."""
    return [level[-1] for level in _levels(root)]


def serialize(root: TreeNode | None) -> str:
    """Encode a tree as comma-terminated level-order tokens, '#' for a missing child."""
    if root is None:
        return ""
    parts: list[str] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append("#,")
        else:
            parts.append(f"{node.val},")
            queue.append(node.left)
            queue.append(node.right)
    return "".join(parts)


def deserialize(data: str) -> TreeNode | None:
    """Decode a tree produced by :func:`serialize`."""
    if not data:
        return None
    tokens = data.split(",")
    if tokens[-1] == "":
        tokens.pop()
    items = iter(tokens)
    root = TreeNode(int(next(items)))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            token = next(items, None)
            if token is None:
                raise ValueError("encoded tree is truncated")
            _attach(node, side, None if token == "#" else int(token), queue)
    return root