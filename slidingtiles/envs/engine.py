"""Sliding-tile game engine: owns the board and the score, plays moves and spawns tiles."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from slidingtiles.config import WINNING_VALUE, GameConfiguration
from slidingtiles.core.gameboard import Grid, can_move, empty_grid, live_tiles, place_tile, resolve_move, values
from slidingtiles.core.identifiers import TileIdAllocator
from slidingtiles.core.spawner import TileSpawner
from slidingtiles.core.tile import Direction, InvalidMove, MoveOutcome, Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class BoardEngine:
    """
    Sliding-tile game.

    This class holds the grid, the score and the tile id pool. It plays one move at a time and
    is the only mutator of its state; callers must serialize their calls.
    """

    def __init__(self, config: GameConfiguration | None = None, seed: int | None = None):
        """
        Initialize a game ready to be played.

        Parameters
        ----------
        config : GameConfiguration, optional
            Board size and spawn table (default: 4x4 board, 2s and 4s weighted 4:1).
        seed : int, optional
            Random generator seed for reproducibility.
        """
        self.config = config if config is not None else GameConfiguration()
        self._grid: Grid = []
        self._score = 0
        self._won = False
        self.reset(seed=seed)

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def score(self) -> int:
        """Sum of all values produced by merges since the game started."""
        return self._score

    @property
    def won(self) -> bool:
        """Whether the winning value was reached during this game."""
        return self._won

    @property
    def observation(self) -> ndarray:
        """
        Get the tile values of the board.

        Returns
        -------
        ndarray
            A square int64 array, 0 for empty cells.
        """
        return values(self._grid)

    def reset(self, seed: int | None = None) -> tuple[Tile, ...]:
        """
        Start a new game with two tiles.

        Returns
        -------
        tuple[Tile, ...]
            The starting tiles.

        Notes
        -----
        - The first tile value is drawn from the spawn table. If it is not the base value, the
          second tile gets the base value, so a game never starts with two 4s.
        - Both tiles land on independently drawn free slots.
        """
        self._grid = empty_grid(self.size)
        self._score = 0
        self._won = False
        self._ids = TileIdAllocator(self.config.id_pool_size)
        self._spawner = TileSpawner(self.config.spawn_table, default_rng(seed))

        first_value = self._spawner.choose_value()
        if first_value != self._spawner.base_value:
            second_value = self._spawner.base_value
        else:
            second_value = self._spawner.choose_value()

        for value in (first_value, second_value):
            place_tile(self._grid, self._spawner.spawn(self._grid, self._ids, value=value))

        _logger.info('New %dx%d game started', self.size, self.size)
        return self.get_tiles()

    def get_tiles(self) -> tuple[Tile, ...]:
        """All live tiles, row-major."""
        return live_tiles(self._grid)

    def move(self, direction) -> MoveOutcome | InvalidMove:
        """
        Slide the tiles in the given direction and spawn a new tile.

        Parameters
        ----------
        direction : Direction, str or int
            The direction, or any token accepted by ``Direction.parse``.

        Returns
        -------
        MoveOutcome or InvalidMove
            The outcome when at least one tile moved. ``InvalidMove`` otherwise: the board,
            the score and the id pool are then left untouched.

        Notes
        -----
        - The new tile id is taken before the ids freed by this move's merges go back to the
          pool, so a freshly merged id is never reissued on the same turn.
        - ``won_this_move`` is set only the first time the winning value appears in a game.
        """
        parsed = Direction.parse(direction)
        if parsed is None:
            _logger.debug('Ignored unknown direction %r', direction)
            return InvalidMove(direction)

        resolution = resolve_move(self._grid, parsed)
        if not resolution.moved:
            _logger.debug('Move %s changes nothing', parsed.value)
            return InvalidMove(direction)

        # ##: Commit the slide.
        self._grid = resolution.grid
        self._score += resolution.score

        # ##: Spawn before recycling.
        new_tile = self._spawner.spawn(self._grid, self._ids)
        place_tile(self._grid, new_tile)
        self._ids.release(resolution.freed_ids)

        won_this_move = False
        if not self._won and WINNING_VALUE in resolution.merged_values:
            self._won = True
            won_this_move = True
            _logger.info('Winning tile %d reached with score %d', WINNING_VALUE, self._score)

        return MoveOutcome(
            direction=parsed,
            new_tile_id=new_tile.id,
            tiles=self.get_tiles(),
            score_gained=resolution.score,
            won_this_move=won_this_move,
        )

    def legal_actions(self) -> list[Direction]:
        """
        Determine the directions that would change the board.

        Each direction is resolved on a throwaway copy; the game itself is not touched.
        """
        return [direction for direction in Direction if can_move(self._grid, direction)]

    def game_over(self) -> bool:
        """
        Check if the game has ended.

        Returns
        -------
        bool
            True when no direction can move any tile.
        """
        return not any(can_move(self._grid, direction) for direction in Direction)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for cells in self._grid:
            print(''.join(f'{cell.value if cell is not None else "-":^10}' for cell in cells))
