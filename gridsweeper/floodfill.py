"""Breadth-first opening of cells after a click on the minefield."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import AbstractSet, Collection

from gridsweeper.board import Board, Position

MAX_OPEN = 15
"""How many empty cells a single click opens before the flood stops."""


@dataclass(frozen=True)
class RevealResult:
    """What a click opened.

    ``opened`` lists the newly opened cells in the order they were opened,
    ``hit_mine`` tells whether one of them was a mine, and ``truncated``
    tells whether the flood stopped because it reached its limit.
    """

    opened: tuple[Position, ...]
    hit_mine: bool = False
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.opened)

    def __contains__(self, position: object) -> bool:
        return position in self.opened


def _orthogonal(row: int, column: int) -> tuple[Position, ...]:
    # Left, up, right, down: the order in which the flood visits neighbours.
    return ((row, column - 1), (row - 1, column), (row, column + 1), (row + 1, column))


def flood_reveal(
    board: Board,
    row: int,
    column: int,
    opened: Collection[Position] = frozenset(),
    flagged: AbstractSet[Position] | Collection[Position] = frozenset(),
    limit: int | None = None,
) -> RevealResult:
    """Open cells starting from a click at (row, column).

    A clicked cell that holds a number or a mine is opened on its own.
    A clicked empty cell starts a flood through orthogonally adjacent empty
    cells; numbered cells around the flood stay closed. Cells already open
    or flagged are left alone. With ``limit`` set, at most that many empty
    cells are opened. The given collections are not modified.
    """
    if not board.contains(row, column):
        raise IndexError(
            f"cell ({row}, {column}) is outside a {board.rows}x{board.columns} board"
        )
    if limit is not None and limit <= 0:
        raise ValueError("limit must be a positive number of cells")

    is_open = set(opened)
    flags = set(flagged)
    newly_opened: list[Position] = []
    queue: deque[Position] = deque([(row, column)])
    clicked = True
    empty_opened = 0
    hit_mine = False
    truncated = False

    while queue:
        position = queue.popleft()
        r, c = position
        if not board.contains(r, c) or position in is_open or position in flags:
            continue

        value = board.value(r, c)
        if clicked and value != 0:
            is_open.add(position)
            newly_opened.append(position)
            hit_mine = board.is_mine(r, c)
            break

        if value != 0:
            continue

        clicked = False
        is_open.add(position)
        newly_opened.append(position)
        empty_opened += 1
        if limit is not None and empty_opened == limit:
            truncated = True
            break
        queue.extend(_orthogonal(r, c))

    return RevealResult(tuple(newly_opened), hit_mine, truncated)