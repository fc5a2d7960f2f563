"""
Cell states for the Othello board.
"""
from enum import IntEnum


class Disc(IntEnum):
    """Content of one board cell."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Disc':
        """
        Return the opponent's disc.

        There is no opposite of EMPTY, so it is returned unchanged.
        """
        if self is Disc.EMPTY:
            return Disc.EMPTY
        return Disc(3 - self.value)  # Toggle between BLACK (1) and WHITE (2)

    def __invert__(self) -> 'Disc':
        return self.opposite()

    @property
    def symbol(self) -> str:
        """Single character used when rendering the board."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_SYMBOLS = {Disc.EMPTY: ' ', Disc.BLACK: 'B', Disc.WHITE: 'W'}
