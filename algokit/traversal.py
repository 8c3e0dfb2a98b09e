"""Traversals, cycle checks and orderings over adjacency-list graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import pairwise

Adjacency = Sequence[Sequence[int]]


def _kahn(adj: Adjacency) -> list[int]:
    """Return nodes in Kahn order; nodes on or behind a cycle are left out."""
    indegree = [0] * len(adj)
    for neighbours in adj:
        for node in neighbours:
            indegree[node] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    return order


def bfs_order(adj: Adjacency) -> list[int]:
    """Return the breadth-first visiting order of the nodes reachable from node 0."""
    if not adj:
        return []
    seen = {0}
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return order


def dfs_order(adj: Adjacency) -> list[int]:
    """Return the depth-first visiting order of the nodes reachable from node 0."""
    if not adj:
        return []
    seen = {0}
    order = [0]
    stack = [iter(adj[0])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()
    return order


def has_directed_cycle(adj: Adjacency) -> bool:
    """Tell whether a directed graph holds a cycle."""
    return len(_kahn(adj)) != len(adj)


def has_undirected_cycle(adj: Adjacency) -> bool:
    """Tell whether an undirected graph, given with both edge directions, holds a cycle."""
    seen: set[int] = set()
    for start in range(len(adj)):
        if start in seen:
            continue
        seen.add(start)
        queue = deque([(start, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def is_bipartite(adj: Adjacency) -> bool:
    """Tell whether the nodes can be two-coloured so that no edge joins equal colours."""
    colour: dict[int, int] = {}
    for start in range(len(adj)):
        if start in colour:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if nxt not in colour:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def topological_sort(adj: Adjacency) -> list[int]:
    """Return a topological order; on a cyclic graph only the orderable nodes appear."""
    return _kahn(adj)


def eventual_safe_nodes(graph: Adjacency) -> list[int]:
    """Return, ascending, the nodes from which every path ends at a terminal node."""
    reverse: list[list[int]] = [[] for _ in graph]
    for node, neighbours in enumerate(graph):
        for nxt in neighbours:
            reverse[nxt].append(node)
    return sorted(_kahn(reverse))


def can_finish_tasks(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether ``n`` tasks with the given ``(task, prerequisite)`` pairs can all be done."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for first, second in prerequisites:
        adj[first].append(second)
    return len(_kahn(adj)) == n


def alien_order(words: Sequence[str], k: int) -> str:
    """Return an order of the first ``k`` letters consistent with the sorted ``words``."""
    adj: list[list[int]] = [[] for _ in range(k)]

    def letter(char: str) -> int:
        index = ord(char) - ord("a")
        if not 0 <= index < k:
            raise ValueError(f"letter {char!r} is outside the first {k} letters")
        return index

    for first, second in pairwise(words):
        for a, b in zip(first, second):
            if a != b:
                adj[letter(a)].append(letter(b))
                break
    return "".join(chr(ord("a") + node) for node in _kahn(adj))