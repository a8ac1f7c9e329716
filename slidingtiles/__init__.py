"""Sliding-tile puzzle engine: board, moves, spawns, score and tile colors."""

from .config import WINNING_VALUE, GameConfiguration, SpawnTable
from .core import ConsumedTile, Direction, InvalidMove, MoveOutcome, Tile, derive_colors
from .envs import BoardEngine

__all__ = [
    "WINNING_VALUE",
    "GameConfiguration",
    "SpawnTable",
    "ConsumedTile",
    "Direction",
    "InvalidMove",
    "MoveOutcome",
    "Tile",
    "derive_colors",
    "BoardEngine",
]
