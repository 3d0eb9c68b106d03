"""Dynamic programming on grids: paths, squares, block sums and region queries."""

from __future__ import annotations

from collections.abc import Sequence

_MODULUS = 1_000_000_007


def _require_grid(grid: Sequence[Sequence[object]], what: str) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError(f"{what} is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError(f"{what} rows differ in length")
    return len(grid), width


def _prefix_sums(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Table whose entry [y][x] is the sum of matrix[:y][:x]."""
    width = len(matrix[0]) if matrix else 0
    table = [[0] * (width + 1)]
    for row in matrix:
        above = table[-1]
        current = [0]
        running = 0
        for x, value in enumerate(row):
            running += value
            current.append(above[x + 1] + running)
        table.append(current)
    return table


class NumMatrix:
    """Answers sums over rectangular regions of a fixed matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self._rows, self._cols = _require_grid(matrix, "matrix")
        self._table = _prefix_sums(matrix)

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Sum of the cells from (row1, col1) to (row2, col2), both inclusive."""
        if not (0 <= row1 <= row2 < self._rows and 0 <= col1 <= col2 < self._cols):
            raise IndexError("region lies outside the matrix")
        table = self._table
        return (
            table[row2 + 1][col2 + 1]
            - table[row1][col2 + 1]
            - table[row2 + 1][col1]
            + table[row1][col1]
        )


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Least starting health to cross the dungeon from top left to bottom right.

    The knight moves only right or down and must keep at least 1 health.
    """
    rows, cols = _require_grid(dungeon, "dungeon")
    # deficit[x]: most negative running total forced on the rest of the path
    below: list[int] | None = None
    for y in range(rows - 1, -1, -1):
        current = [0] * cols
        for x in range(cols - 1, -1, -1):
            options = []
            if x + 1 < cols:
                options.append(current[x + 1])
            if below is not None:
                options.append(below[x])
            following = max(options) if options else 0
            current[x] = min(0, dungeon[y][x] + following)
        below = current
    return -below[0] + 1


def matrix_block_sum(mat: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Each cell replaced by the sum of the cells within ``k`` rows and columns."""
    rows, cols = _require_grid(mat, "matrix")
    table = _prefix_sums(mat)
    result: list[list[int]] = []
    for y in range(rows):
        top, bottom = max(0, y - k), min(rows - 1, y + k)
        line = []
        for x in range(cols):
            left, right = max(0, x - k), min(cols - 1, x + k)
            line.append(
                table[bottom + 1][right + 1]
                - table[bottom + 1][left]
                - table[top][right + 1]
                + table[top][left]
            )
        result.append(line)
    return result


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square made only of "1" cells."""
    rows, cols = _require_grid(matrix, "matrix")
    largest = 0
    below = [0] * (cols + 1)
    for y in range(rows - 1, -1, -1):
        current = [0] * (cols + 1)
        for x in range(cols - 1, -1, -1):
            cell = matrix[y][x]
            if cell not in ("0", "1"):
                raise ValueError(f"cell must be '0' or '1', not {cell!r}")
            if cell == "1":
                current[x] = 1 + min(below[x + 1], below[x], current[x + 1])
                largest = max(largest, current[x])
        below = current
    return largest * largest


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top left to bottom right, moving right or down."""
    _require_grid(grid, "grid")
    previous: list[int] | None = None
    for row in grid:
        current: list[int] = []
        for x, value in enumerate(row):
            candidates = []
            if x > 0:
                candidates.append(current[x - 1])
            if previous is not None:
                candidates.append(previous[x])
            current.append(value + (min(candidates) if candidates else 0))
        previous = current
    return previous[-1]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path from the apex to the base, stepping to adjacent entries."""
    if not triangle:
        raise ValueError("triangle is empty")
    if any(len(row) != level + 1 for level, row in enumerate(triangle)):
        raise ValueError("row i of the triangle must hold i + 1 entries")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(best[i], best[i + 1]) for i, value in enumerate(row)]
    return best[0]


def find_paths(m: int, n: int, max_move: int, start_row: int, start_column: int) -> int:
    """Ways to move the ball out of an ``m`` by ``n`` grid in at most ``max_move`` moves.

    The count is taken modulo 1,000,000,007. A start outside the grid counts
    as one way.
    """
    if not (0 <= start_row < m and 0 <= start_column < n):
        return 1
    if max_move < 0:
        raise ValueError("max_move must not be negative")
    counts = [[0] * n for _ in range(m)]
    counts[start_row][start_column] = 1
    escaped = 0
    for _ in range(max_move):
        following = [[0] * n for _ in range(m)]
        for r, row in enumerate(counts):
            for c, ways in enumerate(row):
                if not ways:
                    continue
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if 0 <= nr < m and 0 <= nc < n:
                        following[nr][nc] = (following[nr][nc] + ways) % _MODULUS
                    else:
                        escaped = (escaped + ways) % _MODULUS
        counts = following
    return escaped