# -*- coding: utf-8 -*-
"""
Python implementation of a sliding-tile (2048-style) game.

This module provides the `BoardEngine` class, which owns the board, the score and the tile id pool
and plays moves for an external user interface.
"""

from .engine import BoardEngine

__all__ = ["BoardEngine"]
