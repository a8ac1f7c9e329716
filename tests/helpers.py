"""Shared builders for board-level tests."""

import numpy as np

from slidingtiles.core.colors import derive_colors
from slidingtiles.core.gameboard import Grid, empty_grid, place_tile
from slidingtiles.core.identifiers import TileIdAllocator
from slidingtiles.core.tile import Tile


def make_tile(tile_id: int, value: int, row: int, col: int, **kwargs) -> Tile:
    """Build a tile with the colors of its value."""
    colors = derive_colors(value)
    return Tile(
        id=tile_id,
        value=value,
        row=row,
        col=col,
        background_color=colors.background,
        text_color=colors.text,
        **kwargs,
    )


def grid_from_values(board, ids: TileIdAllocator | None = None) -> Grid:
    """
    Build a grid from a square matrix of values (0 for empty cells).

    Tile ids are allocated row-major from ``ids``, or numbered 0, 1, 2... when omitted.
    """
    board = np.asarray(board)
    grid = empty_grid(board.shape[0])
    next_id = 0
    for (row, col), value in np.ndenumerate(board):
        if not value:
            continue
        if ids is not None:
            tile_id = ids.allocate()
        else:
            tile_id, next_id = next_id, next_id + 1
        place_tile(grid, make_tile(tile_id, int(value), int(row), int(col)))
    return grid


def load_board(engine, board) -> None:
    """Replace the grid of an engine, with a fresh id pool. Score and win state are kept."""
    ids = TileIdAllocator(engine.config.id_pool_size)
    engine._grid = grid_from_values(board, ids)
    engine._ids = ids


def line_values(grid: Grid, row: int) -> list[int]:
    """Values of one row, 0 for empty cells."""
    return [cell.value if cell is not None else 0 for cell in grid[row]]
