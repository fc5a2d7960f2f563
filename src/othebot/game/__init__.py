"""
Othello game module.
This package contains the board, the turn state machine and notation helpers.
"""

from .disc import Disc
from .board import Board
from .game import Game
from .notation import parse_algebraic, to_algebraic, mask_to_coords, coords_to_mask

__all__ = [
    'Disc', 'Board', 'Game',
    'parse_algebraic', 'to_algebraic', 'mask_to_coords', 'coords_to_mask',
]
