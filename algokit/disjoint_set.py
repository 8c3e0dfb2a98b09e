"""Union-find and the connectivity problems built on it."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_ORTHOGONAL: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class DisjointSet:
    """Union-find over the nodes ``0..n`` with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.parent = list(range(n + 1))
        self.size = [1] * (n + 1)

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        root = node
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[node] != root:
            self.parent[node], node = root, self.parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if they were already one set."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self.size[root_u] < self.size[root_v]:
            root_u, root_v = root_v, root_u
        self.parent[root_v] = root_u
        self.size[root_u] += self.size[root_v]
        return True


def _neighbours(r: int, c: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in _ORTHOGONAL:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest island of 1 cells obtainable by turning at most one 0 into 1."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if not cols:
        return 0
    ds = DisjointSet(rows * cols)

    def index(r: int, c: int) -> int:
        return r * cols + c

    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value != 1:
                continue
            for nr, nc in _neighbours(r, c, rows, cols):
                if grid[nr][nc] == 1:
                    ds.union(index(r, c), index(nr, nc))

    best = max(ds.size[ds.find(cell)] for cell in range(rows * cols))
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 1:
                continue
            roots = {
                ds.find(index(nr, nc))
                for nr, nc in _neighbours(r, c, rows, cols)
                if grid[nr][nc] == 1
            }
            best = max(best, 1 + sum(ds.size[root] for root in roots))
    return best


def max_stones_removed(stones: Sequence[Sequence[int]]) -> int:
    """Return how many stones can be removed when a stone sharing a row or column remains."""
    if not stones:
        return 0
    if any(row < 0 or col < 0 for row, col in stones):
        raise ValueError("stone coordinates must not be negative")
    max_row = max(row for row, _ in stones)
    max_col = max(col for _, col in stones)
    ds = DisjointSet(max_row + max_col + 1)
    used: set[int] = set()
    for row, col in stones:
        col_node = col + max_row + 1
        used.update((row, col_node))
        ds.union(row, col_node)
    components = sum(1 for node in used if ds.find(node) == node)
    return len(stones) - components


def min_operations_to_connect(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return how many cable moves connect all ``n`` nodes, or -1 if there are too few cables."""
    ds = DisjointSet(n)
    extra = sum(1 for u, v in edges if not ds.union(u, v))
    components = len({ds.find(node) for node in range(n)})
    needed = components - 1
    return needed if extra >= needed else -1