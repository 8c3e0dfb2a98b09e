"""Weighted shortest paths, spanning trees and breadth-first distance problems."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence
from string import ascii_lowercase

Distance = float | int


class NegativeCycleError(ValueError):
    """Raised when a cycle of negative total weight makes distances unbounded."""


def _relax_all_pairs(dist: list[list[Distance]]) -> None:
    """Shorten every entry of a distance matrix through every intermediate node, in place."""
    for via, through in enumerate(dist):
        for row in dist:
            to_via = row[via]
            if to_via == math.inf:
                continue
            for j, onward in enumerate(through):
                if to_via + onward < row[j]:
                    row[j] = to_via + onward


def bellman_ford(v: int, edges: Sequence[Sequence[int]], source: int) -> list[Distance]:
    """Return distances from ``source`` over directed ``(u, v, weight)`` edges.

    Unreachable nodes get ``math.inf``; a reachable negative cycle raises
    :class:`NegativeCycleError`.
    """
    if not 0 <= source < v:
        raise ValueError(f"source {source} is not a node of a {v}-node graph")
    dist: list[Distance] = [math.inf] * v
    dist[source] = 0
    for _ in range(v - 1):
        changed = False
        for u, w, weight in edges:
            if dist[u] + weight < dist[w]:
                dist[w] = dist[u] + weight
                changed = True
        if not changed:
            break
    if any(dist[u] + weight < dist[w] for u, w, weight in edges):
        raise NegativeCycleError("graph holds a negative cycle reachable from the source")
    return dist


def cheapest_price(n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int) -> int:
    """Return the cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for start, end, price in flights:
        adj[start].append((end, price))
    cost: list[Distance] = [math.inf] * n
    cost[src] = 0
    queue = deque([(0, 0, src)])
    while queue:
        stops, spent, node = queue.popleft()
        if stops > k:
            continue
        for nxt, price in adj[node]:
            if spent + price < cost[nxt]:
                cost[nxt] = spent + price
                queue.append((stops + 1, spent + price, nxt))
    return -1 if cost[dst] == math.inf else int(cost[dst])


def find_city(n: int, edges: Sequence[Sequence[int]], distance_threshold: int) -> int:
    """Return the city reaching the fewest others within the threshold; ties go to the highest.

    Edges are undirected ``(u, v, weight)`` triples. Returns -1 when there are no cities.
    """
    dist: list[list[Distance]] = [[math.inf] * n for _ in range(n)]
    for u, v, weight in edges:
        dist[u][v] = weight
        dist[v][u] = weight
    for i in range(n):
        dist[i][i] = 0
    _relax_all_pairs(dist)

    best_city, best_count = -1, n
    for city, row in enumerate(dist):
        reachable = sum(
            1 for other, d in enumerate(row) if other != city and d <= distance_threshold
        )
        if reachable <= best_count:
            best_city, best_count = city, reachable
    return best_city


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances of a square weight matrix.

    In both the input and the result, -1 stands for "no path".
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    dist: list[list[Distance]] = [
        [0 if i == j else (math.inf if weight == -1 else weight) for j, weight in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    _relax_all_pairs(dist)
    return [[-1 if d == math.inf else int(d) for d in row] for row in dist]


def minimum_spanning_tree_weight(v: int, adj: Sequence[Sequence[Sequence[int]]]) -> int:
    """Return the total weight of a minimum spanning tree grown from node 0 (Prim).

    ``adj[node]`` holds ``(neighbour, weight)`` pairs.
    """
    if v == 0:
        return 0
    visited: set[int] = set()
    heap: list[tuple[int, int]] = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if node in visited:
            continue
        visited.add(node)
        total += weight
        for nxt, edge_weight in adj[node]:
            if nxt not in visited:
                heapq.heappush(heap, (edge_weight, nxt))
    return total


def time_to_inform(n: int, head_id: int, manager: Sequence[int],
                   inform_time: Sequence[int]) -> int:
    """Return the minutes needed for news from ``head_id`` to reach every employee."""
    reports: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(manager):
        if employee != head_id:
            reports[boss].append(employee)
    longest = 0
    queue = deque([(head_id, 0)])
    while queue:
        employee, elapsed = queue.popleft()
        longest = max(longest, elapsed)
        for report in reports[employee]:
            queue.append((report, elapsed + inform_time[employee]))
    return longest


def word_ladder_length(start: str, target: str, word_list: Sequence[str]) -> int:
    """Return the word count of the shortest one-letter-change ladder to ``target``, or 0."""
    remaining = set(word_list)
    remaining.discard(start)
    queue = deque([(start, 1)])
    while queue:
        word, steps = queue.popleft()
        if word == target:
            return steps
        for i in range(len(word)):
            for letter in ascii_lowercase:
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in remaining:
                    remaining.discard(candidate)
                    queue.append((candidate, steps + 1))
    return 0