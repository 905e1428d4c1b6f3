# gridsweeper

Building blocks for a minesweeper game: a minefield generator, a
breadth-first reveal of cells after a click, window layout arithmetic for a
status strip above the board, and map-size menu data.

## Install

    pip install .

## Example

    import random
    from gridsweeper.board import generate_board
    from gridsweeper.floodfill import MAX_OPEN, flood_reveal

    board = generate_board(20, 30, rng=random.Random(1))
    print(board.render())

    result = flood_reveal(board, 5, 5, limit=MAX_OPEN)
    print(result.opened, result.hit_mine, result.truncated)

## Modules

- `gridsweeper.board`
  - `Board`: an immutable minefield of `rows` x `columns`; each cell holds a
    neighbour count or `MINE` (-1). Methods `value`, `is_mine`,
    `neighbours`, `mines`, `contains` and `render` (`B` for a mine, a blank
    for zero, otherwise the digit). Iterating yields `((row, column), value)`.
  - `default_mine_count(rows, columns)`: `(rows + columns) * 2`.
  - `choose_mine_positions(count, rows, columns, rng)`: distinct cell
    indices (`row * columns + column`) picked at random.
  - `board_from_mines(rows, columns, mines)`: a board with mines at the
    given positions and counts everywhere else.
  - `generate_board(rows, columns, mine_count, rng)`: a randomly mined
    board; the mine count defaults to `default_mine_count`.
- `gridsweeper.floodfill`
  - `flood_reveal(board, row, column, opened, flagged, limit)`: a clicked
    number or mine opens on its own; a clicked empty cell floods through
    orthogonally adjacent empty cells. Open and flagged cells are skipped,
    and at most `limit` empty cells are opened. `MAX_OPEN` is 15.
  - `RevealResult`: `opened` (in order), `hit_mine`, `truncated`.
- `gridsweeper.layout`
  - `compute_layout(rows, columns, button_size, div)` returns a
    `WindowLayout` with a `state` strip and a `board` area, each a `Rect`.
  - `state_button_rect`, `mine_counter_rect` and `game_over_rect` place the
    restart button, the mine counter and the game-over banner.
- `gridsweeper.menu`
  - `MapSize`, `parse_map_size("20 * 30")`, `map_size_options()` and
    `map_size_from_command(command_id)`.
  - `format_mine_count(count)`: zero padded to three digits.
  - `control_id_for(row, column, columns)` and
    `cell_from_id(control_id, rows, columns)` map between cells and button
    control ids.

## What it does not do

The package has no game session object and nothing to play with: it does
not track opened cells or flags between clicks, decide when a game is over,
or offer a console or graphical interface and installs no command. Callers
keep that state themselves and pass it to `flood_reveal`.

## Tests

    pip install .[test]
    pytest