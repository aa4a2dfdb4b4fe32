"""
Unit Tests for the Console Game

Tests for the interactive loop, focusing on:
    - Human move validation: notation errors and illegal moves
    - Engine replies and game-over detection
    - Scripted game transcripts
    - Argument parsing and logging setup
"""

import logging

import chess
import pytest

from mailbox_chess.board import NotationError, Position
from mailbox_chess.board.position import EMPTY, Move
from mailbox_chess.cli import GameSession, IllegalMoveError, main, setup_logger
from mailbox_chess.config import EngineConfig


def _scripted(lines):
    """Input function returning the given lines, then EOF."""
    iterator = iter(lines)

    def read(prompt):
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return read


@pytest.fixture
def session():
    """Create a shallow game session for testing."""
    return GameSession(EngineConfig(search_depth=1), color=False)


class TestHumanMoves:
    """Tests for validating and applying the human's moves."""

    def test_legal_move_applied(self, session):
        move = session.play_human_move("e2e4")

        assert move == Move(6, 4, 4, 4)
        assert session.position.grid[4][4] == "P"
        assert session.position.grid[6][4] == EMPTY
        assert session.ply == 1

    def test_illegal_move_rejected(self, session):
        with pytest.raises(IllegalMoveError):
            session.play_human_move("e2e5")

        assert session.position == Position.initial()
        assert session.ply == 0

    def test_opponent_piece_rejected(self, session):
        with pytest.raises(IllegalMoveError):
            session.play_human_move("e7e5")

    def test_malformed_notation_rejected(self, session):
        with pytest.raises(NotationError):
            session.play_human_move("pawn to e4")

        assert session.position == Position.initial()

    def test_castling_applies_rook(self):
        session = GameSession(EngineConfig(search_depth=1, castling=True), color=False)
        session.position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")

        move = session.play_human_move("e1c1")

        assert move.is_castling
        assert "".join(session.position.grid[7]) == "..KR...R"
        assert session.position.has_castled

    def test_castling_rejected_when_disabled(self, session):
        session.position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")

        with pytest.raises(IllegalMoveError):
            session.play_human_move("e1g1")


class TestEngineReply:
    """Tests for the engine's turn."""

    def test_reply_applied(self, session):
        session.play_human_move("e2e4")
        before = session.position.copy()

        result = session.engine_reply()

        assert result.move is not None
        assert result.positions_evaluated >= 20
        assert session.position != before
        assert session.ply == 2
        assert session.last_search_time >= 0
        assert session.position.piece_at(*result.move.destination).islower()

    def test_no_reply_leaves_position(self, session):
        position = Position.empty()
        position.set_piece(1, 0, "p")
        position.set_piece(2, 0, "P")
        position.set_piece(7, 4, "K")
        session.position = position
        before = position.copy()

        result = session.engine_reply()

        assert result.move is None
        assert session.position == before

    def test_opening_hint_expires(self, session):
        assert session.opening
        session.ply = session.config.opening_plies

        assert not session.opening


class TestGameLoop:
    """Tests for scripted games."""

    def test_move_then_quit(self, session, capsys):
        session.run(_scripted(["e2e4", "quit"]))

        output = capsys.readouterr().out
        assert "Welcome to Mailbox Chess" in output
        assert "Evaluation: 0" in output
        assert "Black plays: " in output
        assert "Positions evaluated: 20" in output
        assert "Search time: " in output

    def test_bad_input_reprompts(self, session, capsys):
        session.run(_scripted(["e9e4", "e2e5", "", "quit"]))

        output = capsys.readouterr().out
        assert "Invalid move notation" in output
        assert "Illegal move: e2e5" in output
        assert "Black plays" not in output
        assert session.position == Position.initial()

    def test_end_of_input(self, session, capsys):
        session.run(_scripted([]))

        assert "Enter your move" in capsys.readouterr().out

    def test_engine_without_moves_ends_game(self, session, capsys):
        position = Position.empty()
        position.set_piece(1, 0, "p")
        position.set_piece(2, 0, "P")
        position.set_piece(7, 4, "K")
        session.position = position

        session.run(_scripted(["e1e2", "e2e3"]))

        output = capsys.readouterr().out
        assert "Black has no legal moves. Game over." in output
        assert session.position.grid[6][4] == "K"

    def test_engine_plays_white(self, capsys):
        session = GameSession(EngineConfig(search_depth=1, human_side=chess.BLACK), color=False)

        session.run(_scripted(["quit"]))

        output = capsys.readouterr().out
        assert "White plays: " in output
        assert session.ply == 1


class TestMain:
    """Tests for the command-line entry point."""

    def test_quit_immediately(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "quit")
        log_file = tmp_path / "engine.log"

        assert main(["2", "--no-color", "--log-file", str(log_file)]) == 0

        assert "Welcome to Mailbox Chess" in capsys.readouterr().out
        assert log_file.exists()

    def test_invalid_depth_exits(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["0", "--log-file", str(tmp_path / "engine.log")])

        assert excinfo.value.code == 2

    def test_invalid_workers_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--workers", "0", "--log-file", str(tmp_path / "engine.log")])


class TestLogging:
    """Tests for the file logger."""

    def test_setup_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"

        logger = setup_logger(debug=True, log_file=log_file)
        logging.getLogger("mailbox_chess.search.minimax").debug("probe message")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "probe message" in log_file.read_text()

    def test_info_level(self, tmp_path):
        logger = setup_logger(debug=False, log_file=tmp_path / "engine.log")

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
