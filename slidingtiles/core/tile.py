"""
Value types exchanged between the engine and its callers: tiles, directions and move results.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from numbers import Integral
from typing import Iterator


@dataclass(frozen=True)
class ConsumedTile:
    """
    Copy of a tile absorbed by a merge during the current move.

    ``row`` and ``col`` are the merge destination, so a renderer can slide the absorbed tile
    there before removing it.
    """

    id: int
    value: int
    row: int
    col: int


@dataclass(frozen=True)
class Tile:
    """
    A numbered piece occupying one board slot.

    Tiles are immutable: the engine replaces them when they move or merge, so any snapshot
    handed out stays valid.
    """

    id: int
    value: int
    row: int
    col: int
    background_color: str
    text_color: str
    consumed: ConsumedTile | None = None

    @property
    def merged(self) -> bool:
        """Whether this tile absorbed another one during the current move."""
        return self.consumed is not None

    def moved_to(self, row: int, col: int) -> Tile:
        """Return this tile placed at a new slot."""
        return replace(self, row=row, col=col)

    def settled(self) -> Tile:
        """Return this tile without its consumed-tile record."""
        return self if self.consumed is None else replace(self, consumed=None)


class Direction(str, Enum):
    """The four directions a move can slide the tiles to."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, token) -> Direction | None:
        """
        Translate an input token into a direction.

        Parameters
        ----------
        token : Direction, str or int
            A direction, its name, a browser key code (arrows, WASD or HJKL) or an action id
            (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        Direction or None
            The matching direction, None when the token is not recognized.
        """
        if isinstance(token, cls):
            return token
        if isinstance(token, Integral) and not isinstance(token, bool):
            return _ACTIONS.get(int(token))
        if isinstance(token, str):
            return _KEY_CODES.get(token) or _NAMES.get(token.lower())
        return None

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)

    @property
    def towards_origin(self) -> bool:
        """Whether tiles travel towards index 0 (up or left)."""
        return self in (Direction.UP, Direction.LEFT)

    def lines(self, size: int) -> Iterator[list[tuple[int, int]]]:
        """
        Yield the board lines this direction slides along.

        Each line lists its cells starting from the edge the tiles travel towards.
        """
        indexes = list(range(size)) if self.towards_origin else list(range(size - 1, -1, -1))
        for fixed in range(size):
            if self.is_vertical:
                yield [(index, fixed) for index in indexes]
            else:
                yield [(fixed, index) for index in indexes]


_NAMES = {direction.value: direction for direction in Direction}

_ACTIONS = {0: Direction.LEFT, 1: Direction.UP, 2: Direction.RIGHT, 3: Direction.DOWN}

_KEY_CODES = {
    'ArrowUp': Direction.UP,
    'KeyW': Direction.UP,
    'KeyK': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'KeyS': Direction.DOWN,
    'KeyJ': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'KeyA': Direction.LEFT,
    'KeyH': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'KeyD': Direction.RIGHT,
    'KeyL': Direction.RIGHT,
}


@dataclass(frozen=True)
class InvalidMove:
    """Returned when a requested move leaves the board unchanged."""

    token: object

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a move that changed the board.

    Attributes
    ----------
    direction : Direction
        The direction that was played.
    new_tile_id : int
        Id of the tile spawned after the move.
    tiles : tuple[Tile, ...]
        All live tiles, row-major, including the spawned one.
    score_gained : int
        Sum of the values produced by merges during this move.
    won_this_move : bool
        True only for the first move of the game that produced the winning value.
    """

    direction: Direction
    new_tile_id: int
    tiles: tuple[Tile, ...]
    score_gained: int
    won_this_move: bool

    def __bool__(self) -> bool:
        return True

    def tile(self, tile_id: int) -> Tile | None:
        """Return the live tile with the given id, if any."""
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        return None
