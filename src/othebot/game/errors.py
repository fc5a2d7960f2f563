"""
Exceptions raised by the Othello rules engine.
"""


class OthebotError(Exception):
    """Base class for every error raised by othebot."""


class IllegalMoveError(OthebotError):
    """The requested cell is not a legal placement, or could not be parsed."""

    def __init__(self, message: str = "illegal move, you can't put your disc here"):
        super().__init__(message)


class LegalMovesNotComputedError(OthebotError):
    """A move-dependent operation ran before the legal moves were computed."""

    def __init__(self, message: str = (
            "legal moves were not computed before calling a function "
            "that depends on legal moves, call compute_legal_moves() first")):
        super().__init__(message)


class OutOfBoundsError(OthebotError, IndexError):
    """Coordinates fall outside the 8x8 board."""

    def __init__(self, col: int, row: int):
        super().__init__(f"coordinates ({col}, {row}) are outside the 8x8 board")
        self.col = col
        self.row = row
