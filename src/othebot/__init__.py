"""
Othebot: rules engine for an 8x8 Othello/Reversi board.
"""
from .game import Board, Disc, Game, parse_algebraic
from .game.errors import (
    OthebotError,
    IllegalMoveError,
    LegalMovesNotComputedError,
    OutOfBoundsError,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    'Board', 'Disc', 'Game', 'parse_algebraic',
    'OthebotError', 'IllegalMoveError', 'LegalMovesNotComputedError',
    'OutOfBoundsError', '__version__', '__license__',
]
