"""
Board module for Othello.
Handles the 64-cell board state, legal-move computation and captures.
Legal moves are reported as a 64-bit mask, bit i being cell i = row * 8 + col.
"""
import logging
from typing import Tuple

import numpy as np

from .disc import Disc
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)

# (dx, dy) steps: E, W, S, N, SE, NW, SW, NE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),    # East
    (-1, 0),   # West
    (0, 1),    # South
    (0, -1),   # North
    (1, 1),    # South-East
    (-1, -1),  # North-West
    (-1, 1),   # South-West
    (1, -1),   # North-East
)


class Board:
    """
    Represents the Othello board as a fixed array of 64 cells.
    Cells are addressed by (col, row) and stored at index row * 8 + col.
    """

    # Board dimensions
    SIZE = 8
    CELLS = SIZE * SIZE

    # Player constants
    EMPTY = Disc.EMPTY
    BLACK = Disc.BLACK
    WHITE = Disc.WHITE

    def __init__(self):
        """Initialize a board with the standard starting layout."""
        self._discs = np.full(self.CELLS, Disc.EMPTY, dtype=np.int8)
        self._discs[3 * 8 + 3] = Disc.WHITE
        self._discs[3 * 8 + 4] = Disc.BLACK
        self._discs[4 * 8 + 3] = Disc.BLACK
        self._discs[4 * 8 + 4] = Disc.WHITE

    @classmethod
    def check_bounds(cls, col: int, row: int) -> None:
        if not (0 <= col < cls.SIZE and 0 <= row < cls.SIZE):
            raise OutOfBoundsError(col, row)

    def get(self, col: int, row: int) -> Disc:
        """
        Get the disc at (col, row).

        Raises:
            OutOfBoundsError: if either coordinate is outside [0, 8)
        """
        self.check_bounds(col, row)
        return self.get_unchecked(col, row)

    def get_unchecked(self, col: int, row: int) -> Disc:
        """
        Get the disc at (col, row) without checking the coordinates.

        The caller must make sure both coordinates are in [0, 8), otherwise
        the wrong cell is read or an IndexError escapes.
        """
        return Disc(int(self._discs[row * self.SIZE + col]))

    def set(self, col: int, row: int, disc: Disc) -> None:
        """Overwrite the cell at (col, row). Does not check move legality."""
        self.check_bounds(col, row)
        self._discs[row * self.SIZE + col] = Disc(disc)

    def count(self, disc: Disc) -> int:
        """Number of cells holding the given disc."""
        return int(np.count_nonzero(self._discs == disc))

    def scores(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (white_score, black_score)
        """
        return self.count(Disc.WHITE), self.count(Disc.BLACK)

    def legal_moves(self, player: Disc) -> int:
        """
        Compute the legal moves of `player` as a bitmask.

        A cell is legal when it is empty and, in at least one direction, a
        run of one or more opponent discs is closed by one of the player's
        own discs.

        Args:
            player: Disc.BLACK or Disc.WHITE

        Returns:
            Integer whose bit i is set iff cell i is a legal placement

        Raises:
            ValueError: if player is Disc.EMPTY
        """
        if player == Disc.EMPTY:
            raise ValueError("The player should not be an empty disc")

        discs = self._discs.tolist()
        mask = 0
        for idx in range(self.CELLS):
            # The cell is already filled
            if discs[idx] != Disc.EMPTY:
                continue
            row, col = divmod(idx, self.SIZE)
            for dx, dy in DIRECTIONS:
                if self._run_length(discs, col, row, dx, dy, player):
                    mask |= 1 << idx
                    break

        logger.debug("Legal moves for %s: %#018x", player, mask)
        return mask

    def flips(self, col: int, row: int, player: Disc) -> int:
        """
        Get the opponent discs bounded by a placement at (col, row).

        Returns:
            Bitmask of every opponent disc lying between (col, row) and one
            of the player's discs, over all directions that qualify
        """
        self.check_bounds(col, row)
        if player == Disc.EMPTY:
            raise ValueError("The player should not be an empty disc")

        discs = self._discs.tolist()
        flip_mask = 0
        for dx, dy in DIRECTIONS:
            length = self._run_length(discs, col, row, dx, dy, player)
            x, y = col, row
            for _ in range(length):
                x += dx
                y += dy
                flip_mask |= 1 << (y * self.SIZE + x)
        return flip_mask

    def apply_flips(self, flip_mask: int, player: Disc) -> None:
        """Turn every cell set in flip_mask to the player's colour."""
        for idx in range(self.CELLS):
            if flip_mask & (1 << idx):
                self._discs[idx] = player

    def _run_length(self, discs, col: int, row: int, dx: int, dy: int, player: Disc) -> int:
        """
        Walk from (col, row) in direction (dx, dy).

        Returns the number of opponent discs crossed before reaching one of
        the player's discs, or 0 when the walk leaves the board, reaches an
        empty cell, or meets the player's disc immediately.
        """
        x, y = col + dx, row + dy
        crossed = 0
        while 0 <= x < self.SIZE and 0 <= y < self.SIZE:
            disc = discs[y * self.SIZE + x]
            if disc == Disc.EMPTY:
                return 0
            if disc == player:
                return crossed
            # Opponent disc, keep walking in this direction
            crossed += 1
            x += dx
            y += dy
        return 0

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._discs = self._discs.copy()
        return new_board

    def to_array(self) -> np.ndarray:
        """
        Get the board as an 8x8 numpy array indexed [row, col].

        Returns:
            2D numpy array of Disc values
        """
        return self._discs.reshape(self.SIZE, self.SIZE).copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._discs, other._discs))

    def __str__(self) -> str:
        """Return a compact string representation of the board."""
        symbols = {Disc.EMPTY: '.', Disc.BLACK: 'B', Disc.WHITE: 'W'}
        rows = []
        for row in range(self.SIZE):
            rows.append(' '.join(symbols[self.get_unchecked(col, row)] for col in range(self.SIZE)))

        white, black = self.scores()
        rows.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(rows)
