"""Minefield construction: mine placement, neighbour counts and text rendering."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator

MINE = -1

Position = tuple[int, int]

_OFFSETS: tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _check_dimensions(rows: int, columns: int) -> None:
    if rows <= 0 or columns <= 0:
        raise ValueError(f"board dimensions must be positive, got {rows}x{columns}")


@dataclass(frozen=True)
class Board:
    """An immutable minefield; each cell holds a neighbour count or MINE (-1)."""

    rows: int
    columns: int
    cells: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        _check_dimensions(self.rows, self.columns)
        if len(self.cells) != self.rows or any(len(line) != self.columns for line in self.cells):
            raise ValueError("cell grid does not match the board dimensions")

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"cell ({row}, {column}) is outside a {self.rows}x{self.columns} board")

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def is_mine(self, row: int, column: int) -> bool:
        """Whether the cell holds a mine."""
        return self.value(row, column) == MINE

    def value(self, row: int, column: int) -> int:
        """The cell's neighbour count, or MINE."""
        self._check(row, column)
        return self.cells[row][column]

    def neighbours(self, row: int, column: int) -> list[Position]:
        """The up-to-eight cells that touch the given one, in row-major order."""
        self._check(row, column)
        return [
            (row + dr, column + dc)
            for dr, dc in _OFFSETS
            if self.contains(row + dr, column + dc)
        ]

    def mines(self) -> list[Position]:
        """Positions of every mine, in row-major order."""
        return [
            (r, c)
            for r, line in enumerate(self.cells)
            for c, cell in enumerate(line)
            if cell == MINE
        ]

    def __iter__(self) -> Iterator[tuple[Position, int]]:
        for r, line in enumerate(self.cells):
            for c, cell in enumerate(line):
                yield (r, c), cell

    def render(self) -> str:
        """Text picture of the board: 'B' for a mine, blank for zero, else the digit."""

        def glyph(cell: int) -> str:
            if cell == MINE:
                return "B"
            if cell == 0:
                return " "
            return str(cell)

        return "\n".join("".join(glyph(cell) for cell in line) for line in self.cells)


def default_mine_count(rows: int, columns: int) -> int:
    """The number of mines a board of this size gets by default."""
    _check_dimensions(rows, columns)
    return (rows + columns) * 2


def choose_mine_positions(
    count: int, rows: int, columns: int, rng: random.Random | None = None
) -> list[int]:
    """Pick `count` distinct cell indices (row * columns + column) at random."""
    _check_dimensions(rows, columns)
    scope = rows * columns
    if count < 0:
        raise ValueError("mine count cannot be negative")
    if count > scope:
        raise ValueError(f"cannot place {count} mines on {scope} cells")
    rng = rng if rng is not None else random.Random()
    return rng.sample(range(scope), count)


def board_from_mines(rows: int, columns: int, mines: Iterable[Position]) -> Board:
    """Build a board with mines at the given positions and counts everywhere else."""
    _check_dimensions(rows, columns)
    mine_set: set[Position] = set()
    for row, column in mines:
        if not (0 <= row < rows and 0 <= column < columns):
            raise ValueError(f"mine ({row}, {column}) is outside a {rows}x{columns} board")
        if (row, column) in mine_set:
            raise ValueError(f"mine ({row}, {column}) is placed twice")
        mine_set.add((row, column))

    grid = [[0] * columns for _ in range(rows)]
    for row, column in mine_set:
        for dr, dc in _OFFSETS:
            r, c = row + dr, column + dc
            if 0 <= r < rows and 0 <= c < columns:
                grid[r][c] += 1
    for row, column in mine_set:
        grid[row][column] = MINE

    return Board(rows, columns, tuple(tuple(line) for line in grid))


def generate_board(
    rows: int,
    columns: int,
    mine_count: int | None = None,
    rng: random.Random | None = None,
) -> Board:
    """A randomly mined board; the mine count defaults to default_mine_count."""
    if mine_count is None:
        mine_count = default_mine_count(rows, columns)
    indices = choose_mine_positions(mine_count, rows, columns, rng)
    return board_from_mines(rows, columns, (divmod(index, columns) for index in indices))