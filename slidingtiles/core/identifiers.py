"""Bounded FIFO pool of tile ids."""

from __future__ import annotations

import logging
from typing import Iterable

from numpy import arange, int64

from slidingtiles.core.errors import IdPoolExhaustedError, IdPoolOverflowError

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TileIdAllocator:
    """
    Issue and recycle tile ids.

    The pool is a fixed-capacity ring buffer: ids are taken from the head and released ids are
    appended at the tail, so recycled ids are reused in the order they were freed.

    Parameters
    ----------
    capacity : int
        Number of ids in circulation. All of them are available at creation.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f'capacity must be > 0, got {capacity}')
        self._capacity = capacity
        self._slots = arange(capacity, dtype=int64)
        self._head = 0
        self._count = capacity

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        """Number of ids that can still be allocated."""
        return self._count

    def allocate(self) -> int:
        """
        Remove and return the id at the front of the pool.

        Raises
        ------
        IdPoolExhaustedError
            If every id is in use.
        """
        if self._count == 0:
            raise IdPoolExhaustedError(f'All {self._capacity} tile ids are in use')

        tile_id = int(self._slots[self._head])
        self._head = (self._head + 1) % self._capacity
        self._count -= 1
        return tile_id

    def release(self, ids: Iterable[int]) -> None:
        """
        Append freed ids to the back of the pool.

        Raises
        ------
        IdPoolOverflowError
            If an id is out of range or the pool is already full.
        """
        for tile_id in ids:
            if not 0 <= tile_id < self._capacity:
                raise IdPoolOverflowError(f'Tile id {tile_id} is outside [0, {self._capacity})')
            if self._count == self._capacity:
                raise IdPoolOverflowError(f'Cannot release tile id {tile_id}: pool is full')

            self._slots[(self._head + self._count) % self._capacity] = tile_id
            self._count += 1
            _logger.debug('Recycled tile id %d (%d available)', tile_id, self._count)

    def copy(self) -> TileIdAllocator:
        """Return an independent allocator with the same queue."""
        clone = TileIdAllocator.__new__(TileIdAllocator)
        clone._capacity = self._capacity
        clone._slots = self._slots.copy()
        clone._head = self._head
        clone._count = self._count
        return clone

    def peek(self) -> list[int]:
        """Return the available ids, front first, without allocating them."""
        return [int(self._slots[(self._head + i) % self._capacity]) for i in range(self._count)]
