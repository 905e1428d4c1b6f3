"""Window geometry: where the status strip, the board and overlays sit."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BUTTON_SIZE = 16
DEFAULT_DIV = 4
COUNTER_WIDTH_IN_CELLS = 6


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, px: int, py: int) -> bool:
        """Whether the point lies inside; the right and bottom edges are outside."""
        return self.x <= px < self.right and self.y <= py < self.bottom


@dataclass(frozen=True)
class WindowLayout:
    """Client-area geometry for a board of the given size.

    The window is a status strip on top of the game board. The strip is a
    ``div``-th of the board's height, and both span the full width.
    """

    rows: int
    columns: int
    button_size: int
    div: int
    state: Rect
    board: Rect

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height + self.state.height

    def cell_rect(self, row: int, column: int) -> Rect:
        """The rectangle of one cell button, relative to the game board."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"cell ({row}, {column}) is outside a {self.rows}x{self.columns} board"
            )
        size = self.button_size
        return Rect(column * size, row * size, size, size)


def compute_layout(
    rows: int,
    columns: int,
    button_size: int = DEFAULT_BUTTON_SIZE,
    div: int = DEFAULT_DIV,
) -> WindowLayout:
    """Lay out the status strip and the board for a rows x columns field."""
    if rows <= 0 or columns <= 0:
        raise ValueError(f"board dimensions must be positive, got {rows}x{columns}")
    if button_size <= 0:
        raise ValueError("button size must be positive")
    if div <= 0:
        raise ValueError("div must be positive")

    state_width = button_size * columns
    state_height = button_size * rows // div
    state = Rect(0, 0, state_width, state_height)
    board = Rect(0, state_height, state_width, state_height * div)
    return WindowLayout(rows, columns, button_size, div, state, board)


def state_button_rect(layout: WindowLayout) -> Rect:
    """The restart button, two cells square, centred in the status strip."""
    size = layout.button_size
    return Rect(
        layout.state.width // 2 - size,
        layout.state.height // 2 - size,
        size * 2,
        size * 2,
    )


def mine_counter_rect(layout: WindowLayout) -> Rect:
    """The remaining-mines counter, one cell in from the strip's left edge."""
    size = layout.button_size
    return Rect(
        layout.state.x + size,
        layout.state.height // 2 - size,
        size * COUNTER_WIDTH_IN_CELLS,
        size * 2,
    )


def game_over_rect(layout: WindowLayout) -> Rect:
    """The game-over banner: full width, middle half of the board's height.

    Coordinates are relative to the game board.
    """
    height = layout.board.height
    return Rect(0, height // 4, layout.board.width, height // 2)