"""
Configuration for a sliding-tile game.

Board dimension and spawn weights are chosen per game; the winning value is fixed.
"""

from dataclasses import dataclass, field
from numbers import Integral

from numpy import array, float64, ndarray

# ##>: Board constants.
BOARD_SIZE = 4

# ##>: First tile value that wins the game.
WINNING_VALUE = 2048


def is_tile_value(value: int) -> bool:
    """Return True when ``value`` is a power of two greater or equal to 2."""
    return isinstance(value, Integral) and value >= 2 and int(value) & (int(value) - 1) == 0


@dataclass(frozen=True)
class SpawnTable:
    """
    Values a new tile can take and their relative weights.

    The first value is the base choice: it is the value forced onto the second starting tile
    whenever the first starting tile is drawn with any other value.
    """

    values: tuple[int, ...] = (2, 4)
    weights: tuple[int, ...] = (4, 1)  # 2-tiles outnumber 4-tiles 4:1

    def __post_init__(self):
        if not self.values:
            raise ValueError('Spawn table needs at least one value')
        if len(self.values) != len(self.weights):
            raise ValueError(f'Got {len(self.values)} values for {len(self.weights)} weights')
        if any(weight <= 0 for weight in self.weights):
            raise ValueError(f'Spawn weights must be positive, got {self.weights}')
        for value in self.values:
            if not is_tile_value(value):
                raise ValueError(f'Spawn value must be a power of two >= 2, got {value}')

    @property
    def base_value(self) -> int:
        """The first, default choice of the table."""
        return self.values[0]

    @property
    def probabilities(self) -> ndarray:
        """Weights normalized to sum to one."""
        weights = array(self.weights, dtype=float64)
        return weights / weights.sum()


@dataclass(frozen=True)
class GameConfiguration:
    """Settings fixed for the whole life of a game."""

    size: int = BOARD_SIZE
    spawn_table: SpawnTable = field(default_factory=SpawnTable)

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'Board size must be at least 2, got {self.size}')

    @property
    def id_pool_size(self) -> int:
        """
        Number of tile ids in circulation.

        One more than the number of cells: on a full board where a merge is still possible, the
        tile spawned after the move must not reuse an id freed by that same move.
        """
        return self.size * self.size + 1
