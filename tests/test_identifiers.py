"""
Tests for the tile id pool.
"""

from unittest import TestCase, main

from slidingtiles.config import GameConfiguration
from slidingtiles.core.errors import IdPoolExhaustedError, IdPoolOverflowError
from slidingtiles.core.identifiers import TileIdAllocator


class TestTileIdAllocator(TestCase):
    """Allocation order, recycling and bounds of the id pool."""

    def setUp(self):
        self.ids = TileIdAllocator(GameConfiguration().id_pool_size)

    def test_capacity_has_one_spare_id(self):
        """A 4x4 board circulates 17 ids."""
        self.assertEqual(self.ids.capacity, 17)
        self.assertEqual(len(self.ids), 17)

    def test_allocates_in_order(self):
        """Fresh pool hands out 0, 1, 2..."""
        allocated = [self.ids.allocate() for _ in range(17)]
        self.assertEqual(allocated, list(range(17)))
        self.assertEqual(self.ids.available, 0)

    def test_exhausted_pool_raises(self):
        """Allocating from an empty pool is a consistency error."""
        for _ in range(17):
            self.ids.allocate()
        with self.assertRaises(IdPoolExhaustedError):
            self.ids.allocate()

    def test_release_is_fifo(self):
        """Released ids go to the back and come out in release order."""
        first = [self.ids.allocate() for _ in range(3)]
        self.ids.release([first[1], first[0]])

        # ##>: The ids never used come first.
        self.assertEqual(self.ids.peek(), list(range(3, 17)) + [1, 0])

        rest = [self.ids.allocate() for _ in range(14)]
        self.assertEqual(rest, list(range(3, 17)))
        self.assertEqual(self.ids.allocate(), 1)
        self.assertEqual(self.ids.allocate(), 0)

    def test_wraps_around(self):
        """Head and tail wrap around the ring buffer."""
        for _ in range(40):
            tile_id = self.ids.allocate()
            self.ids.release([tile_id])
        self.assertEqual(self.ids.available, 17)
        self.assertEqual(sorted(self.ids.peek()), list(range(17)))

    def test_release_out_of_range_raises(self):
        """Ids outside the pool cannot be released."""
        self.ids.allocate()
        with self.assertRaises(IdPoolOverflowError):
            self.ids.release([17])
        with self.assertRaises(IdPoolOverflowError):
            self.ids.release([-1])

    def test_release_into_full_pool_raises(self):
        """A full pool cannot take one more id."""
        with self.assertRaises(IdPoolOverflowError):
            self.ids.release([0])

    def test_release_empty_batch(self):
        """Releasing nothing leaves the pool untouched."""
        self.ids.allocate()
        self.ids.release([])
        self.assertEqual(self.ids.available, 16)

    def test_copy_is_independent(self):
        """A copy keeps the queue but does not share it."""
        self.ids.allocate()
        clone = self.ids.copy()
        clone.allocate()
        self.assertEqual(self.ids.available, 16)
        self.assertEqual(clone.available, 15)
        self.assertEqual(self.ids.peek()[0], 1)
        self.assertEqual(clone.peek()[0], 2)

    def test_invalid_capacity(self):
        """Capacity must be positive."""
        with self.assertRaises(ValueError):
            TileIdAllocator(0)


if __name__ == '__main__':
    main()
