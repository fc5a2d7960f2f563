"""
Terminal front end for a two-player Othello match.
"""
import argparse
import os
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import Config, get_default_config
from .game import Game, to_algebraic
from .game.errors import IllegalMoveError
from .logger import setup_logger


QUIT_COMMANDS = ('quit', 'exit')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--white', type=str, default=None,
                        help='Name of the White player')
    parser.add_argument('--black', type=str, default=None,
                        help='Name of the Black player')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--capture', action='store_true',
                        help='Flip the bounded discs when a move is played')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    parser.add_argument('--log-file', action='store_true',
                        help='Also write logs to a file under the log directory')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from the config file and the command line."""
    if args.config is not None:
        if not os.path.exists(args.config):
            raise FileNotFoundError(f"Config file not found: {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.white is not None:
        config.game.white_name = args.white
    if args.black is not None:
        config.game.black_name = args.black
    if args.capture:
        config.game.capture = True
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    if args.log_file:
        config.logging.log_to_file = True
    return config


def play(game: Game, config: Config, stdin: TextIO, stdout: TextIO) -> int:
    """
    Run the prompt loop until a player quits or cannot move.

    Returns:
        Number of moves played
    """
    session_logger = setup_logger(config)
    moves_played = 0
    try:
        while True:
            legal_moves = game.compute_legal_moves()
            print(game.render(), file=stdout)

            if not legal_moves:
                print(f"{game.current_player_name()} has no legal move, game stopped.", file=stdout)
                break

            if config.game.show_legal_moves:
                moves = ' '.join(to_algebraic(col, row) for col, row in game.legal_move_coords())
                print(f"Legal moves: {moves}", file=stdout)

            while True:
                stdout.write(f"{game.current_player_name()} ({game.turn}) to move: ")
                stdout.flush()
                line = stdin.readline()
                if not line:
                    # EOF
                    text = 'quit'
                else:
                    text = line.strip().lower()

                if text in QUIT_COMMANDS:
                    print(file=stdout)
                    session_logger.log_scores(game.scores(), game.white_name, game.black_name)
                    return moves_played

                name = game.current_player_name()
                try:
                    game.play(text)
                except IllegalMoveError as e:
                    print(e, file=stdout)
                    continue

                moves_played += 1
                session_logger.log_move(name, text, moves_played)
                break

        session_logger.log_scores(game.scores(), game.white_name, game.black_name)
        return moves_played
    finally:
        session_logger.close()


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Entry point of the terminal game. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = load_config(args)
    except (OSError, ValueError, TypeError) as e:
        print(f"Could not load configuration: {e}", file=sys.stderr)
        return 2

    game = Game(config.game.white_name, config.game.black_name, capture=config.game.capture)
    play(game, config, stdin, stdout)

    white, black = game.scores()
    print(f"Final score - {game.black_name}: {black}, {game.white_name}: {white}", file=stdout)
    return 0
