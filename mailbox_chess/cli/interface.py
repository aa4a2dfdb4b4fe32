"""
Interactive Console Game

This module runs a game between a human, typing moves in long algebraic
notation, and the engine. It is a thin shell around the core: it parses
and validates the human's move, applies it, asks the root selector for a
reply and prints the resulting positions.

Game Flow:
    Engine → board + "Evaluation: 0"
    Human  → "e2e4"
    Engine → board + evaluation
    Engine → "Black plays: e7e5"
    Engine → board + evaluation, positions evaluated, search time
    ...
    Human  → "quit"

Error Handling:
    - Malformed move text and moves that are not in the generated move
      list are rejected; the position is left untouched and the human is
      prompted again.
    - A side without moves ends the game (checkmate and stalemate are not
      distinguished).

Logging:
    Diagnostics go to a log file (~/.mailbox_chess/engine.log by default);
    stdout carries only the game transcript.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import chess

from mailbox_chess import __version__
from mailbox_chess.board.notation import NotationError, to_algebraic, to_coordinates
from mailbox_chess.board.position import Move, Position
from mailbox_chess.board.render import render_board
from mailbox_chess.config import EngineConfig
from mailbox_chess.search.context import SearchResult
from mailbox_chess.search.minimax import select_best_move
from mailbox_chess.utils.timer import Timer, format_time

DEFAULT_LOG_FILE = Path.home() / ".mailbox_chess" / "engine.log"


class IllegalMoveError(ValueError):
    """Raised when a well-formed move is not among the generated moves."""


def setup_logger(debug=True, log_file: Optional[Path] = None):
    """
    Setup file-based logger for game debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination file (default ~/.mailbox_chess/engine.log)

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file) if log_file is not None else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("mailbox_chess")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


class GameSession:
    """
    One interactive game.

    Attributes:
        config: Engine configuration
        position: Current position
        ply: Plies played so far (drives the evaluator's opening hint)
        color: Use ANSI colors when drawing the board
        last_search_time: Seconds spent on the most recent engine reply
    """

    def __init__(self, config: Optional[EngineConfig] = None, color: bool = True):
        self.config = config if config is not None else EngineConfig()
        self.position = Position.initial()
        self.generator = self.config.make_generator()
        self.ply = 0
        self.color = color
        self.last_search_time = 0.0
        self.logger = logging.getLogger(__name__)

    @property
    def opening(self) -> bool:
        return self.ply < self.config.opening_plies

    def evaluation(self) -> int:
        """Static evaluation of the current position."""
        context = self.config.build_context(self.opening)
        return context.evaluator.evaluate(self.position, self.opening)

    def legal_moves(self, side: chess.Color) -> List[Move]:
        return self.generator.all_moves(self.position, side)

    def play_human_move(self, text: str) -> Move:
        """
        Validate and apply the human's move.

        Args:
            text: Long algebraic move text, e.g. "e2e4"

        Returns:
            The generated move that was applied (carries its castling tag)

        Raises:
            NotationError: If the text is malformed
            IllegalMoveError: If the move is not generated for the human's side
        """
        requested = to_coordinates(text)
        for move in self.legal_moves(self.config.human_side):
            if move.same_squares(requested):
                self.position.make_move(move)
                self.ply += 1
                self.logger.info(f"Human played {to_algebraic(move)}")
                return move

        self.logger.info(f"Rejected illegal move: {text}")
        raise IllegalMoveError(f"Illegal move: {text}")

    def engine_reply(self) -> SearchResult:
        """
        Search and apply the engine's reply.

        Returns:
            SearchResult; result.move is None if the engine has no moves
            (the position is then unchanged)
        """
        context = self.config.build_context(self.opening)
        reference = context.evaluator.evaluate(self.position, self.opening)

        with Timer() as timer:
            result = select_best_move(
                self.position,
                self.config.search_depth,
                self.config.engine_side,
                reference,
                context,
            )
        self.last_search_time = timer.elapsed

        if result.move is not None:
            self.position.make_move(result.move)
            self.ply += 1
            self.logger.info(
                f"Engine played {to_algebraic(result.move)} (score={result.score}, "
                f"positions={result.positions_evaluated}, time={timer.elapsed:.3f}s)"
            )
        return result

    def print_position(self):
        print()
        print(render_board(self.position, color=self.color))
        print()
        print(f"Evaluation: {self.evaluation()}")
        print()

    def _engine_turn(self) -> bool:
        """Play the engine's reply; False when the game is over."""
        engine_name = chess.COLOR_NAMES[self.config.engine_side].capitalize()
        result = self.engine_reply()
        if result.move is None:
            print(f"{engine_name} has no legal moves. Game over.")
            return False

        print(f"{engine_name} plays: {to_algebraic(result.move)}")
        self.print_position()
        print(f"Positions evaluated: {result.positions_evaluated}")
        print(f"Search time: {format_time(self.last_search_time)}")
        print()
        return True

    def run(self, input_fn: Optional[Callable[[str], str]] = None):
        """
        Main game loop.

        Reads moves until "quit", end of input, or a side without moves.

        Args:
            input_fn: Prompt reader (default: builtin input)
        """
        if input_fn is None:
            input_fn = input

        print(f"Welcome to Mailbox Chess {__version__}")
        self.logger.info(f"=== Game started: {self.config} ===")
        self.print_position()

        if self.config.engine_side == chess.WHITE and not self._engine_turn():
            return

        human_name = chess.COLOR_NAMES[self.config.human_side].capitalize()
        while True:
            if not self.legal_moves(self.config.human_side):
                print(f"{human_name} has no legal moves. Game over.")
                break

            print("Enter your move in Long Algebraic Notation or type quit to exit")
            try:
                text = input_fn("> ").strip()
            except EOFError:
                self.logger.info("EOF received, ending game")
                break

            if not text:
                continue
            if text.lower() == "quit":
                break

            try:
                self.play_human_move(text)
            except (NotationError, IllegalMoveError) as e:
                print(e)
                continue

            self.print_position()

            if not self._engine_turn():
                break

        self.logger.info("=== Game ended ===")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mailbox_chess",
        description="Play chess against a fixed-depth minimax engine",
    )
    parser.add_argument(
        "depth",
        nargs="?",
        type=int,
        default=EngineConfig.search_depth,
        help=f"Search depth in plies (default: {EngineConfig.search_depth})"
    )
    parser.add_argument("--castling", action="store_true", help="Enable castling for both sides")
    parser.add_argument("--exhaustive", action="store_true", help="Disable margin pruning")
    parser.add_argument("--workers", type=int, default=1, help="Threads for the root search")
    parser.add_argument("--play-black", action="store_true", help="Human plays Black")
    parser.add_argument("--no-color", action="store_true", help="Plain board output")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--log-file", type=Path, default=None, help="Log file path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = EngineConfig(
            search_depth=args.depth,
            castling=args.castling,
            exhaustive=args.exhaustive,
            workers=args.workers,
            human_side=chess.BLACK if args.play_black else chess.WHITE,
        )
    except ValueError as e:
        parser.error(str(e))

    setup_logger(debug=args.debug, log_file=args.log_file)

    session = GameSession(config, color=not args.no_color)
    try:
        session.run()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
