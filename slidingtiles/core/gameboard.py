"""
Board primitives: grid creation, free slots, tile placement and move resolution.

A grid is a list of rows, each a list of ``Tile`` or ``None``. Tiles are immutable, so a move is
resolved on a copy of the rows and committed only when it changed something.
"""

from dataclasses import dataclass, field, replace

from numpy import int64, ndarray, zeros

from slidingtiles.core.colors import derive_colors
from slidingtiles.core.errors import SlotOccupiedError
from slidingtiles.core.tile import ConsumedTile, Direction, Tile

Grid = list[list[Tile | None]]


@dataclass
class Resolution:
    """
    Outcome of sliding a whole grid in one direction, before any spawn.

    Attributes
    ----------
    grid : Grid
        The resolved working copy.
    moved : bool
        Whether at least one tile changed slot.
    score : int
        Sum of the values produced by merges.
    freed_ids : list[int]
        Ids of the tiles absorbed by merges, in merge order.
    merged_values : list[int]
        Values produced by merges, in merge order.
    """

    grid: Grid
    moved: bool = False
    score: int = 0
    freed_ids: list[int] = field(default_factory=list)
    merged_values: list[int] = field(default_factory=list)


def empty_grid(size: int) -> Grid:
    """Create a grid without tiles."""
    return [[None] * size for _ in range(size)]


def free_slots(grid: Grid) -> list[tuple[int, int]]:
    """
    Compute the unoccupied slots of a grid.

    Returns
    -------
    list[tuple[int, int]]
        The (row, col) coordinates of empty cells, row-major.
    """
    return [(row, col) for row, cells in enumerate(grid) for col, cell in enumerate(cells) if cell is None]


def live_tiles(grid: Grid) -> tuple[Tile, ...]:
    """All tiles of a grid, row-major."""
    return tuple(cell for cells in grid for cell in cells if cell is not None)


def place_tile(grid: Grid, tile: Tile) -> None:
    """
    Put a tile on its own slot.

    Raises
    ------
    SlotOccupiedError
        If the slot is outside the grid or already holds a tile.
    """
    size = len(grid)
    if not (0 <= tile.row < size and 0 <= tile.col < size):
        raise SlotOccupiedError(f'Slot ({tile.row}, {tile.col}) is outside a {size}x{size} board')
    if grid[tile.row][tile.col] is not None:
        raise SlotOccupiedError(f'Slot ({tile.row}, {tile.col}) already holds tile {grid[tile.row][tile.col].id}')
    grid[tile.row][tile.col] = tile


def values(grid: Grid) -> ndarray:
    """
    Tile values of a grid as an array.

    Returns
    -------
    ndarray
        A square int64 array, 0 for empty cells.
    """
    board = zeros((len(grid), len(grid)), dtype=int64)
    for tile in live_tiles(grid):
        board[tile.row, tile.col] = tile.value
    return board


def merge_tiles(moving: Tile, absorbed: Tile) -> Tile:
    """
    Merge ``moving`` into the slot of ``absorbed``.

    The result keeps the id of the moving tile, doubles its value, refreshes its colors and
    records a copy of the absorbed tile at the merge destination.
    """
    value = moving.value * 2
    colors = derive_colors(value)
    return replace(
        moving,
        value=value,
        row=absorbed.row,
        col=absorbed.col,
        background_color=colors.background,
        text_color=colors.text,
        consumed=ConsumedTile(id=absorbed.id, value=absorbed.value, row=absorbed.row, col=absorbed.col),
    )


def slide_line(grid: Grid, cells: list[tuple[int, int]], resolution: Resolution) -> None:
    """
    Slide and merge the tiles of one line, in place.

    Parameters
    ----------
    grid : Grid
        Working grid. **Modified in-place.**
    cells : list[tuple[int, int]]
        The line's cells, starting from the edge the tiles travel towards.
    resolution : Resolution
        Accumulator for movement, score and freed ids.

    Notes
    -----
    - A tile stops at the edge, at a tile of another value or at a tile that already merged
      during this move, so ``[2, 2, 2, 2]`` gives ``[4, 4, _, _]``.
    - Tiles are expected to carry no consumed-tile record when the move starts.
    """
    for index in range(1, len(cells)):
        row, col = cells[index]
        tile = grid[row][col]
        if tile is None:
            continue
        grid[row][col] = None

        # ##: Scan towards the edge, skipping empty cells.
        target = index - 1
        while target >= 0 and grid[cells[target][0]][cells[target][1]] is None:
            target -= 1

        obstacle = grid[cells[target][0]][cells[target][1]] if target >= 0 else None
        if obstacle is not None and obstacle.value == tile.value and not obstacle.merged:
            merged = merge_tiles(tile, obstacle)
            grid[merged.row][merged.col] = merged
            resolution.moved = True
            resolution.score += merged.value
            resolution.freed_ids.append(obstacle.id)
            resolution.merged_values.append(merged.value)
        else:
            dest_row, dest_col = cells[target + 1]
            grid[dest_row][dest_col] = tile.moved_to(dest_row, dest_col)
            if target + 1 != index:
                resolution.moved = True


def resolve_move(grid: Grid, direction: Direction) -> Resolution:
    """
    Slide a copy of the grid in one direction.

    Parameters
    ----------
    grid : Grid
        Current grid. Left untouched.
    direction : Direction
        Direction of the move.

    Returns
    -------
    Resolution
        The resolved copy and what happened to it. No tile is spawned.

    Notes
    -----
    Consumed-tile records of the previous move are cleared on the copy before sliding.
    """
    working = [[cell.settled() if cell is not None else None for cell in cells] for cells in grid]
    resolution = Resolution(grid=working)
    for cells in direction.lines(len(grid)):
        slide_line(working, cells, resolution)
    return resolution


def can_move(grid: Grid, direction: Direction) -> bool:
    """Whether sliding the grid in ``direction`` would move at least one tile."""
    return resolve_move(grid, direction).moved
