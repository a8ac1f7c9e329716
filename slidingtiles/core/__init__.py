# -*- coding: utf-8 -*-
"""
Core pieces of the sliding-tile game.

It includes the tile and direction types, the tile id pool, the color derivation, the tile
spawner and the board primitives that slide and merge tiles along each line.
"""

from .colors import THEME, TileColors, derive_colors
from .errors import (
    BoardFullError,
    IdPoolExhaustedError,
    IdPoolOverflowError,
    SlotOccupiedError,
    TileEngineError,
)
from .gameboard import Resolution, can_move, free_slots, resolve_move, slide_line
from .identifiers import TileIdAllocator
from .spawner import TileSpawner
from .tile import ConsumedTile, Direction, InvalidMove, MoveOutcome, Tile

__all__ = [
    "THEME",
    "TileColors",
    "derive_colors",
    "TileEngineError",
    "IdPoolExhaustedError",
    "IdPoolOverflowError",
    "SlotOccupiedError",
    "BoardFullError",
    "Resolution",
    "can_move",
    "free_slots",
    "resolve_move",
    "slide_line",
    "TileIdAllocator",
    "TileSpawner",
    "ConsumedTile",
    "Direction",
    "InvalidMove",
    "MoveOutcome",
    "Tile",
]
