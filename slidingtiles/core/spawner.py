"""Random selection of new tiles: weighted value, uniform free slot."""

import logging

from numpy.random import Generator, default_rng

from slidingtiles.config import SpawnTable
from slidingtiles.core.colors import derive_colors
from slidingtiles.core.errors import BoardFullError
from slidingtiles.core.gameboard import Grid, free_slots
from slidingtiles.core.identifiers import TileIdAllocator
from slidingtiles.core.tile import Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TileSpawner:
    """
    Draw the value and the slot of new tiles.

    Parameters
    ----------
    table : SpawnTable, optional
        Values and weights of new tiles (default: 2 and 4, weighted 4:1).
    generator : Generator, optional
        Random generator. A fresh, unseeded one is created when omitted.
    """

    def __init__(self, table: SpawnTable | None = None, generator: Generator | None = None):
        self.table = table if table is not None else SpawnTable()
        self._generator = generator if generator is not None else default_rng()
        self._values = list(self.table.values)
        self._probabilities = self.table.probabilities

    @property
    def base_value(self) -> int:
        return self.table.base_value

    def choose_value(self) -> int:
        """Draw a tile value according to the table weights."""
        return int(self._generator.choice(self._values, p=self._probabilities))

    def choose_slot(self, grid: Grid) -> tuple[int, int] | None:
        """
        Draw a free slot uniformly.

        The free slots are recomputed from ``grid`` on every call.

        Returns
        -------
        tuple[int, int] or None
            The chosen (row, col), None when the board is full.
        """
        slots = free_slots(grid)
        if not slots:
            return None
        return slots[int(self._generator.integers(len(slots)))]

    def spawn(self, grid: Grid, ids: TileIdAllocator, value: int | None = None) -> Tile:
        """
        Create a new tile on a free slot of ``grid``.

        Parameters
        ----------
        grid : Grid
            Board the tile is meant for. Not modified: the caller places the tile.
        ids : TileIdAllocator
            Pool the tile id is taken from.
        value : int, optional
            Forced value. Drawn from the table when omitted.

        Returns
        -------
        Tile
            The new tile, with its colors derived from its value.

        Raises
        ------
        BoardFullError
            If ``grid`` has no free slot.
        """
        slot = self.choose_slot(grid)
        if slot is None:
            raise BoardFullError('Cannot spawn a tile on a full board')

        if value is None:
            value = self.choose_value()
        colors = derive_colors(value)
        tile = Tile(
            id=ids.allocate(),
            value=value,
            row=slot[0],
            col=slot[1],
            background_color=colors.background,
            text_color=colors.text,
        )
        _logger.debug('Spawned tile %d with value %d at (%d, %d)', tile.id, tile.value, tile.row, tile.col)
        return tile
