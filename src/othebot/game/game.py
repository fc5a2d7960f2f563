"""
Othello game module.
Handles turn order, the cached legal moves and rendering.
"""
import logging
from typing import List, Optional, Tuple

from .board import Board
from .disc import Disc
from .errors import IllegalMoveError, LegalMovesNotComputedError
from .notation import COLUMNS, mask_to_coords, parse_algebraic, to_algebraic

logger = logging.getLogger(__name__)

BORDER = "+---+---+---+---+---+---+---+---+"
LEGAL_MARKER = "•"


class Game:
    """
    A match between two named players.

    Legal moves are computed on demand and cached until the next accepted
    move. Every operation that depends on them requires a prior call to
    compute_legal_moves().
    """

    def __init__(self, white_name: str = "White", black_name: str = "Black",
                 capture: bool = False):
        """
        Initialize a new game.

        Args:
            white_name: Display name of the White player, "White" if empty
            black_name: Display name of the Black player, "Black" if empty
            capture: Flip the bounded opponent discs when a move is accepted
        """
        self.board = Board()
        self.white_name = white_name or str(Disc.WHITE)
        self.black_name = black_name or str(Disc.BLACK)
        self.capture = capture
        self._turn = Disc.BLACK  # Black moves first
        self._legal_moves: Optional[int] = None

    @property
    def turn(self) -> Disc:
        """Disc of the player to move, never Disc.EMPTY."""
        return self._turn

    @property
    def current_legal_moves(self) -> Optional[int]:
        """Cached legal-move mask, None until compute_legal_moves() runs."""
        return self._legal_moves

    def compute_legal_moves(self) -> int:
        """Compute and store the legal moves of the player to move."""
        self._legal_moves = self.board.legal_moves(self._turn)
        return self._legal_moves

    def _require_legal_moves(self) -> int:
        if self._legal_moves is None:
            raise LegalMovesNotComputedError()
        return self._legal_moves

    def legal_move_coords(self) -> List[Tuple[int, int]]:
        """Cached legal moves as (col, row) tuples."""
        return mask_to_coords(self._require_legal_moves())

    def attempt_move(self, col: int, row: int) -> None:
        """
        Place the current player's disc at (col, row).

        Raises:
            LegalMovesNotComputedError: if compute_legal_moves() was not called
                since the last accepted move
            IllegalMoveError: if the cell is not a legal move
            OutOfBoundsError: if the coordinates are off the board
        """
        legal_moves = self._require_legal_moves()
        Board.check_bounds(col, row)
        if not legal_moves & (1 << (row * Board.SIZE + col)):
            raise IllegalMoveError()

        player = self._turn
        flip_mask = self.board.flips(col, row, player) if self.capture else 0
        self.board.set(col, row, player)
        if flip_mask:
            self.board.apply_flips(flip_mask, player)

        logger.debug("%s played %s (%d discs flipped)",
                     player, to_algebraic(col, row), bin(flip_mask).count('1'))

        self._turn = player.opposite()
        self._legal_moves = None

    def play(self, text: str) -> Tuple[int, int]:
        """
        Play a move given in algebraic notation.

        Returns:
            The (col, row) that was played
        """
        col, row = parse_algebraic(text)
        self.attempt_move(col, row)
        return col, row

    def current_player_name(self) -> str:
        """Name of the player to move."""
        if self._turn == Disc.WHITE:
            return self.white_name
        return self.black_name

    def scores(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (white_score, black_score)
        """
        return self.board.scores()

    def render(self) -> str:
        """
        Render the board as text.

        Legal cells of the player to move are marked with a dot. The score
        is printed beside the last rows.

        Raises:
            LegalMovesNotComputedError: if compute_legal_moves() was not called
        """
        legal_moves = self._require_legal_moves()
        white_score, black_score = self.scores()

        lines = []
        for row in range(Board.SIZE):
            border = BORDER
            if row == Board.SIZE - 1:
                border += f"    {self.black_name}: {black_score}  {self.white_name}: {white_score}"
            lines.append(border)

            cells = []
            for col in range(Board.SIZE):
                disc = self.board.get_unchecked(col, row)
                if disc == Disc.EMPTY and legal_moves & (1 << (row * Board.SIZE + col)):
                    cells.append(f"| {LEGAL_MARKER} ")
                else:
                    cells.append(f"| {disc.symbol} ")
            line = "".join(cells) + f"| {row + 1}"
            if row == Board.SIZE - 2:
                line += "  SCORES:"
            lines.append(line)

        lines.append(BORDER)
        lines.append("  " + "   ".join(COLUMNS))
        return "\n".join(lines)

    def __str__(self) -> str:
        """Plain board dump with the player to move."""
        return f"{self.board}\nCurrent player: {self.current_player_name()} ({self._turn})"
