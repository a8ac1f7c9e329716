"""
Errors raised when the engine's internal bookkeeping is broken.

None of these is expected while the board invariants hold: a rejected move is reported with
an ``InvalidMove`` value, not with an exception.
"""


class TileEngineError(RuntimeError):
    """Base class for internal consistency violations."""


class IdPoolExhaustedError(TileEngineError):
    """No tile id is left to allocate."""


class IdPoolOverflowError(TileEngineError):
    """An id was released that the pool cannot hold."""


class SlotOccupiedError(TileEngineError):
    """A tile was placed on an occupied or out-of-range slot."""


class BoardFullError(TileEngineError):
    """A tile was spawned on a board without free slot."""
