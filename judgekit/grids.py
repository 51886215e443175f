"""Grid problems: flood fills and breadth-first searches over 2-D boards."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _neighbours(row: int, column: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for d_row, d_column in _STEPS:
        next_row, next_column = row + d_row, column + d_column
        if 0 <= next_row < height and 0 <= next_column < width:
            yield next_row, next_column


def _rectangular(rows: list[list], what: str) -> tuple[int, int]:
    if not rows or not rows[0]:
        raise ValueError(f"the {what} must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"every row of the {what} must have the same length")
    return len(rows), width


def _region_sizes(open_cells: set[tuple[int, int]], height: int, width: int) -> list[int]:
    remaining = set(open_cells)
    sizes = []
    for cell in sorted(open_cells):
        if cell not in remaining:
            continue
        remaining.discard(cell)
        pending = [cell]
        size = 0
        while pending:
            row, column = pending.pop()
            size += 1
            for neighbour in _neighbours(row, column, height, width):
                if neighbour in remaining:
                    remaining.discard(neighbour)
                    pending.append(neighbour)
        sizes.append(size)
    return sorted(sizes)


def longest_unique_path(board: Sequence[Sequence[str]]) -> int:
    """Most cells a path from the top-left corner covers without repeating a letter."""
    rows = [list(row) for row in board]
    height, width = _rectangular(rows, "board")
    seen: set[str] = set()
    best = 0

    def visit(row: int, column: int) -> None:
        nonlocal best
        letter = rows[row][column]
        if letter in seen:
            return
        seen.add(letter)
        best = max(best, len(seen))
        for next_row, next_column in _neighbours(row, column, height, width):
            visit(next_row, next_column)
        seen.remove(letter)

    visit(0, 0)
    return best


def maze_shortest_path(maze: Sequence[Sequence[int | str]]) -> int:
    """Cells on the shortest path from the top-left to the bottom-right, both counted."""
    cells = [[int(cell) for cell in row] for row in maze]
    height, width = _rectangular(cells, "maze")
    goal = (height - 1, width - 1)
    distance = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        row, column = queue.popleft()
        for neighbour in _neighbours(row, column, height, width):
            next_row, next_column = neighbour
            if cells[next_row][next_column] > 0 and neighbour not in distance:
                distance[neighbour] = distance[(row, column)] + 1
                queue.append(neighbour)
    if goal not in distance:
        raise ValueError("the maze exit cannot be reached")
    return distance[goal]


def empty_regions(m: int, n: int, rectangles: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Sizes, ascending, of the uncovered regions of an m-high, n-wide sheet.

    Each rectangle is (left x, bottom y, right x, top y) in grid coordinates.
    """
    if m < 1 or n < 1:
        raise ValueError(f"the sheet must be at least 1 x 1, got {m} x {n}")
    covered: set[tuple[int, int]] = set()
    for left, bottom, right, top in rectangles:
        if not (0 <= left <= right <= n and 0 <= bottom <= top <= m):
            raise ValueError(f"rectangle {(left, bottom, right, top)} lies outside the sheet")
        covered.update((x, y) for x in range(left, right) for y in range(bottom, top))
    open_cells = {(x, y) for x in range(n) for y in range(m)} - covered
    return _region_sizes(open_cells, n, m)


def housing_complexes(grid: Sequence[Sequence[int | str]]) -> list[int]:
    """Sizes, ascending, of the connected groups of houses (cells equal to 1)."""
    cells = [[int(cell) for cell in row] for row in grid]
    height, width = _rectangular(cells, "map")
    houses = {
        (row, column)
        for row, line in enumerate(cells)
        for column, cell in enumerate(line)
        if cell == 1
    }
    return _region_sizes(houses, height, width)


def ripening_days(box: Sequence[Sequence[int]]) -> int:
    """Days until every tomato ripens, or -1 if some never can.

    Cells hold 1 for ripe, 0 for unripe and -1 for empty.
    """
    cells = [list(row) for row in box]
    height, width = _rectangular(cells, "box")
    day = {
        (row, column): 0
        for row, line in enumerate(cells)
        for column, cell in enumerate(line)
        if cell == 1
    }
    queue = deque(day)
    days = 0
    while queue:
        row, column = queue.popleft()
        for neighbour in _neighbours(row, column, height, width):
            next_row, next_column = neighbour
            if cells[next_row][next_column] == 0 and neighbour not in day:
                day[neighbour] = day[(row, column)] + 1
                days = day[neighbour]
                queue.append(neighbour)
    for row, line in enumerate(cells):
        for column, cell in enumerate(line):
            if cell == 0 and (row, column) not in day:
                return -1
    return days