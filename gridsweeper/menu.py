"""Menu data: board-size choices, command ids and small display helpers."""

from __future__ import annotations

from dataclasses import dataclass

BUTTON_ID_BASE = 100
"""Control id of the top-left cell button; ids grow row by row."""

ABOUT_COMMAND = 40000
RESTART_COMMAND = 40001
MAP_SIZE_COMMAND_BASE = 50001
"""Command id of the first map-size entry; later entries follow in order."""

ABOUT_TITLE = "About"
ABOUT_TEXT = "A minesweeper game."

_MAP_SIZE_LABELS = ("15 * 30", "20 * 30", "30 * 40", "40 * 50", "50 * 60")
DEFAULT_MAP_SIZE_INDEX = 1
"""The entry checked in the map-size menu when the window opens."""


@dataclass(frozen=True)
class MapSize:
    """A board size offered in the map-size menu."""

    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(
                f"map size must be positive, got {self.rows}x{self.columns}"
            )

    @property
    def label(self) -> str:
        """The menu text for this size, rows first."""
        return f"{self.rows} * {self.columns}"

    def __str__(self) -> str:
        return self.label


def _leading_number(part: str) -> int:
    digits = "".join(ch for ch in part if "0" <= ch <= "9")
    if not digits:
        raise ValueError(f"no number in {part!r}")
    return int(digits)


def parse_map_size(text: str) -> MapSize:
    """Read a size written as 'ROWS * COLUMNS'.

    Within each side of the '*' every decimal digit counts, in order, and
    anything else is ignored; text after a second '*' is ignored.
    """
    parts = text.split("*")
    if len(parts) < 2:
        raise ValueError(f"map size {text!r} has no '*' separator")
    return MapSize(_leading_number(parts[0]), _leading_number(parts[1]))


def map_size_options() -> tuple[MapSize, ...]:
    """The sizes the map-size menu offers, in menu order."""
    return tuple(parse_map_size(label) for label in _MAP_SIZE_LABELS)


def map_size_from_command(command_id: int) -> MapSize:
    """The size chosen by a map-size menu command."""
    options = map_size_options()
    index = command_id - MAP_SIZE_COMMAND_BASE
    if not 0 <= index < len(options):
        raise ValueError(f"{command_id} is not a map-size command")
    return options[index]


def format_mine_count(count: int) -> str:
    """The mine counter's text: at least three digits, zero padded."""
    return f"{count:03d}"


def control_id_for(row: int, column: int, columns: int) -> int:
    """The control id of the cell button at (row, column)."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    if row < 0 or not 0 <= column < columns:
        raise ValueError(f"cell ({row}, {column}) is not on a board {columns} wide")
    return BUTTON_ID_BASE + column + row * columns


def cell_from_id(control_id: int, rows: int, columns: int) -> tuple[int, int]:
    """The (row, column) of the cell button with the given control id."""
    if rows <= 0 or columns <= 0:
        raise ValueError(f"board dimensions must be positive, got {rows}x{columns}")
    index = control_id - BUTTON_ID_BASE
    if not 0 <= index < rows * columns:
        raise ValueError(
            f"control id {control_id} is not a cell of a {rows}x{columns} board"
        )
    return divmod(index, columns)