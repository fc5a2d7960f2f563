"""
Algebraic notation for Othello cells.

Columns are lettered a..h from left to right and rows numbered 1..8 from
top to bottom, so "a1" is (0, 0) and "h8" is (7, 7).
"""
from typing import Iterable, List, Tuple

from .errors import IllegalMoveError, OutOfBoundsError

COLUMNS = 'abcdefgh'
ROWS = '12345678'


def parse_algebraic(text: str) -> Tuple[int, int]:
    """
    Convert algebraic notation like "a1", "g8" or "b7" to (col, row).

    Args:
        text: Two characters, a column letter then a row digit

    Returns:
        Tuple of (col, row), both 0-based

    Raises:
        IllegalMoveError: if the text is not a cell of the board
    """
    if len(text) != 2:
        raise IllegalMoveError()

    col, row = text[0], text[1]
    if col not in COLUMNS or row not in ROWS:
        raise IllegalMoveError()

    return COLUMNS.index(col), ROWS.index(row)


def to_algebraic(col: int, row: int) -> str:
    """Convert (col, row) to algebraic notation."""
    if not (0 <= col < 8 and 0 <= row < 8):
        raise OutOfBoundsError(col, row)
    return COLUMNS[col] + ROWS[row]


def mask_to_coords(mask: int) -> List[Tuple[int, int]]:
    """
    Convert a 64-bit cell mask to a list of (col, row) tuples.

    The list is ordered by cell index.
    """
    coords = []
    for i in range(64):
        if mask & (1 << i):
            row, col = divmod(i, 8)
            coords.append((col, row))
    return coords


def coords_to_mask(coords: Iterable[Tuple[int, int]]) -> int:
    """Convert (col, row) tuples to a 64-bit cell mask."""
    mask = 0
    for col, row in coords:
        if not (0 <= col < 8 and 0 <= row < 8):
            raise OutOfBoundsError(col, row)
        mask |= 1 << (row * 8 + col)
    return mask
