"""Problems on two-dimensional grids: simulation, flood fill, paths and rectangles."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import chain

Cell = tuple[int, int]

_ORTHOGONAL: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
_SURROUNDING: tuple[Cell, ...] = (
    (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1),
)
_KNIGHT_MOVES: tuple[Cell, ...] = (
    (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1), (-2, 1), (-2, -1),
)
_MAZE_MOVES: tuple[tuple[str, int, int], ...] = (
    ("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0),
)


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def _neighbours(cell: Cell, rows: int, cols: int,
                deltas: Iterable[Cell] = _ORTHOGONAL) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in deltas:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _border_cells(rows: int, cols: int) -> Iterator[Cell]:
    for r in range(rows):
        for c in range(cols):
            if r in (0, rows - 1) or c in (0, cols - 1):
                yield r, c


def _reachable(rows: int, cols: int, seeds: Iterable[Cell],
               passable: Callable[[Cell], bool]) -> set[Cell]:
    """Return every cell reachable orthogonally from ``seeds`` through passable cells."""
    seen = set(seeds)
    queue = deque(seen)
    while queue:
        for nxt in _neighbours(queue.popleft(), rows, cols):
            if nxt not in seen and passable(nxt):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def game_of_life(board: list[list[int]]) -> None:
    """Advance a board of 0 and 1 cells by one generation, in place."""
    rows, cols = _shape(board)
    if not cols:
        return

    def live_around(cell: Cell) -> int:
        return sum(
            1 for r, c in _neighbours(cell, rows, cols, _SURROUNDING) if board[r][c] == 1
        )

    following = []
    for r, row in enumerate(board):
        new_row = []
        for c, value in enumerate(row):
            live = live_around((r, c))
            alive = live == 3 if value == 0 else 2 <= live <= 3
            new_row.append(1 if alive else 0)
        following.append(new_row)
    for row, new_row in zip(board, following):
        row[:] = new_row


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` read clockwise from the top-left corner."""
    rows, cols = _shape(matrix)
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    order: list[int] = []
    while left <= right and top <= bottom:
        order.extend(matrix[top][left:right + 1])
        top += 1
        order.extend(matrix[r][right] for r in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            order.extend(matrix[bottom][c] for c in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            order.extend(matrix[r][left] for r in range(bottom, top - 1, -1))
            left += 1
    return order


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be spelled along orthogonally adjacent, unused cells."""
    rows, cols = _shape(board)
    if not word or not cols:
        return False
    used: set[Cell] = set()

    def search(cell: Cell, index: int) -> bool:
        if index == len(word):
            return True
        r, c = cell
        if not (0 <= r < rows and 0 <= c < cols) or cell in used:
            return False
        if board[r][c] != word[index]:
            return False
        used.add(cell)
        found = any(search((r + dr, c + dc), index + 1) for dr, dc in _ORTHOGONAL)
        used.discard(cell)
        return found

    return any(search((r, c), 0) for r in range(rows) for c in range(cols))


def largest_rectangle_in_histogram(heights: Sequence[int]) -> int:
    """Return the largest rectangle area that fits under the histogram bars."""
    stack: list[int] = []
    best = 0
    for i, height in enumerate(chain(heights, [None])):
        while stack and (height is None or heights[stack[-1]] >= height):
            bar = heights[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, width * bar)
        stack.append(i)
    return best


def max_rectangle_area(matrix: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest all-ones rectangle in a 0/1 matrix."""
    rows, cols = _shape(matrix)
    histogram = [0] * cols
    best = 0
    for row in matrix:
        histogram = [h + 1 if value == 1 else 0 for h, value in zip(histogram, row)]
        best = max(best, largest_rectangle_in_histogram(histogram))
    return best


def count_distinct_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count islands of 1 cells that differ in shape, ignoring translation."""
    rows, cols = _shape(grid)
    visited: set[Cell] = set()
    shapes: set[frozenset[Cell]] = set()
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != 1 or (r, c) in visited:
                continue
            island = _reachable(rows, cols, [(r, c)], lambda cell: grid[cell[0]][cell[1]] == 1)
            visited |= island
            shapes.add(frozenset((ir - r, ic - c) for ir, ic in island))
    return len(shapes)


def fill_surrounded(mat: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a copy where every 'O' region not touching the border becomes 'X'."""
    rows, cols = _shape(mat)

    def is_open(cell: Cell) -> bool:
        return mat[cell[0]][cell[1]] == "O"

    safe = _reachable(rows, cols, filter(is_open, _border_cells(rows, cols)), is_open)
    return [
        ["X" if value == "O" and (r, c) not in safe else value for c, value in enumerate(row)]
        for r, row in enumerate(mat)
    ]


def number_of_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count land cells from which the border cannot be reached."""
    rows, cols = _shape(grid)

    def is_land(cell: Cell) -> bool:
        return grid[cell[0]][cell[1]] == 1

    escaped = _reachable(rows, cols, filter(is_land, _border_cells(rows, cols)), is_land)
    return sum(
        1
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == 1 and (r, c) not in escaped
    )


def find_maze_paths(mat: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of D/L/R/U moves from the top-left to the bottom-right open cell."""
    rows, cols = _shape(mat)
    if not cols or mat[0][0] != 1:
        return []
    goal = (rows - 1, cols - 1)
    paths: list[str] = []
    path: list[str] = []
    visited: set[Cell] = set()

    def walk(cell: Cell) -> None:
        if cell == goal:
            paths.append("".join(path))
            return
        visited.add(cell)
        r, c = cell
        for step, dr, dc in _MAZE_MOVES:
            nxt = (r + dr, c + dc)
            if (0 <= nxt[0] < rows and 0 <= nxt[1] < cols
                    and mat[nxt[0]][nxt[1]] == 1 and nxt not in visited):
                path.append(step)
                walk(nxt)
                path.pop()
        visited.discard(cell)

    walk((0, 0))
    return paths


def min_knight_steps(knight_pos: Sequence[int], target_pos: Sequence[int], n: int) -> int:
    """Return the fewest knight moves between two 1-based squares of an n×n board, or -1."""
    start = tuple(knight_pos)
    goal = tuple(target_pos)
    for position in (start, goal):
        if len(position) != 2 or not all(1 <= v <= n for v in position):
            raise ValueError(f"position {position} is not on a {n}x{n} board")
    if start == goal:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (x, y), steps = queue.popleft()
        for dx, dy in _KNIGHT_MOVES:
            nxt = (x + dx, y + dy)
            if 1 <= nxt[0] <= n and 1 <= nxt[1] <= n and nxt not in seen:
                if nxt == goal:
                    return steps + 1
                seen.add(nxt)
                queue.append((nxt, steps + 1))
    return -1