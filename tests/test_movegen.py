"""
Unit Tests for Move Generation

Tests for the pseudo-legal move generator, focusing on:
    - Agreement with python-chess pseudo-legal moves (no castling rights,
      en passant or promotion in the test positions)
    - Per-piece rules: pawn pushes and captures, slider blocking
    - Generation order (row-major, it decides search tie-breaks)
    - The optional castling moves
    - Perft node counts
"""

import chess
import pytest

from mailbox_chess.board.position import EMPTY, KINGSIDE, QUEENSIDE, Move, Position, color_of
from mailbox_chess.board.position import square_to_coordinates
from mailbox_chess.movegen import CAPABILITIES, MoveGenerator, all_moves, moves_for
from mailbox_chess.utils.testing import perft

CROSS_CHECK_FENS = [
    chess.STARTING_FEN.replace("KQkq", "-"),
    "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w - - 2 3",
    "r3k2r/ppp2ppp/2n1bn2/3pp3/3PP3/2N1BN2/PPP2PPP/R3K2R w - - 0 1",
    "4k3/8/2n5/3pP3/1b6/5Q2/3R4/4K3 w - - 0 1",
    "r6k/1p4pp/8/3B4/8/2q5/PP3PPP/4R1K1 b - - 0 1",
]


def _reference_moves(fen, side):
    """(origin, destination) pairs of python-chess pseudo-legal moves."""
    board = chess.Board(fen)
    board.turn = side
    return {
        (square_to_coordinates(m.from_square), square_to_coordinates(m.to_square))
        for m in board.pseudo_legal_moves
    }


class TestCrossCheck:
    """Compare against python-chess on positions inside the generator's rule set."""

    @pytest.mark.parametrize("fen", CROSS_CHECK_FENS)
    @pytest.mark.parametrize("side", [chess.WHITE, chess.BLACK])
    def test_matches_python_chess(self, fen, side):
        position = Position.from_fen(fen)

        generated = all_moves(position, side)
        pairs = {(m.origin, m.destination) for m in generated}

        assert len(pairs) == len(generated), "Duplicate moves generated"
        assert pairs == _reference_moves(fen, side)

    @pytest.mark.parametrize("fen", CROSS_CHECK_FENS)
    def test_moves_respect_colors(self, fen):
        """Origin holds a piece of the mover, destination is empty or an enemy."""
        position = Position.from_fen(fen)

        for side in chess.COLORS:
            for move in all_moves(position, side):
                assert color_of(position.piece_at(*move.origin)) == side
                target = position.piece_at(*move.destination)
                assert target == EMPTY or color_of(target) != side


class TestPieceRules:
    """Tests for individual piece rules."""

    def test_starting_position_has_twenty_moves(self):
        position = Position.initial()

        assert len(all_moves(position, chess.WHITE)) == 20
        assert len(all_moves(position, chess.BLACK)) == 20

    def test_empty_square_has_no_moves(self):
        assert moves_for(Position.initial(), 4, 4) == []

    def test_pawn_double_push_blocked(self):
        position = Position.initial()
        position.set_piece(4, 4, "n")

        moves = moves_for(position, 6, 4)

        assert moves == [Move(6, 4, 5, 4)]

    def test_pawn_blocked_directly(self):
        position = Position.initial()
        position.set_piece(5, 4, "n")

        assert moves_for(position, 6, 4) == []

    def test_pawn_captures_only_enemies(self):
        position = Position.empty()
        position.set_piece(4, 4, "P")
        position.set_piece(3, 3, "p")
        position.set_piece(3, 5, "N")

        moves = moves_for(position, 4, 4)

        assert Move(4, 4, 3, 3) in moves
        assert Move(4, 4, 3, 5) not in moves
        assert Move(4, 4, 3, 4) in moves

    def test_pawn_on_last_rank_has_no_moves(self):
        """No promotion: a white pawn on row 0 has nowhere to go."""
        position = Position.empty()
        position.set_piece(0, 3, "P")

        assert moves_for(position, 0, 3) == []

    def test_black_pawn_moves_down(self):
        position = Position.initial()

        moves = moves_for(position, 1, 4)

        assert moves == [Move(1, 4, 2, 4), Move(1, 4, 3, 4)]

    def test_rook_stops_at_blockers(self):
        position = Position.empty()
        position.set_piece(4, 4, "R")
        position.set_piece(4, 6, "p")
        position.set_piece(2, 4, "P")

        destinations = {m.destination for m in moves_for(position, 4, 4)}

        assert (4, 5) in destinations
        assert (4, 6) in destinations
        assert (4, 7) not in destinations
        assert (3, 4) in destinations
        assert (2, 4) not in destinations
        assert len(destinations) == 3 + 2 + 4 + 1

    def test_knight_in_corner(self):
        position = Position.empty()
        position.set_piece(7, 0, "N")

        destinations = {m.destination for m in moves_for(position, 7, 0)}

        assert destinations == {(5, 1), (6, 2)}

    def test_king_adjacent_squares(self):
        position = Position.empty()
        position.set_piece(4, 4, "K")

        assert len(moves_for(position, 4, 4)) == 8

    def test_generation_order_is_row_major(self):
        position = Position.initial()

        moves = all_moves(position, chess.BLACK)

        # b8 knight is the first black piece with a move
        assert moves[0] == Move(0, 1, 2, 0)
        origins = [m.origin for m in moves]
        assert origins == sorted(origins)

    def test_kings_only_position(self):
        position = Position.from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")

        moves = all_moves(position, chess.BLACK)

        assert {m.destination for m in moves} == {(1, 4), (0, 5), (0, 3), (1, 5), (1, 3)}
        assert all(m.origin == (0, 4) for m in moves)

    def test_capabilities_declare_pseudo_legal(self):
        assert not CAPABILITIES.check_detection
        assert not CAPABILITIES.en_passant
        assert not CAPABILITIES.promotion
        assert not CAPABILITIES.terminal_detection
        assert MoveGenerator.CAPABILITIES is CAPABILITIES


class TestCastlingGeneration:
    """Tests for the optional castling moves."""

    CASTLE_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_disabled_by_default(self):
        position = Position.from_fen(self.CASTLE_FEN)

        moves = MoveGenerator().all_moves(position, chess.WHITE)

        assert not any(m.is_castling for m in moves)

    @pytest.mark.parametrize("side, row", [(chess.WHITE, 7), (chess.BLACK, 0)])
    def test_symmetric_when_enabled(self, side, row):
        position = Position.from_fen(self.CASTLE_FEN)

        moves = MoveGenerator(castling=True).moves_for(position, row, 4)

        assert Move(row, 4, row, 6, KINGSIDE) in moves
        assert Move(row, 4, row, 2, QUEENSIDE) in moves

    def test_requires_unmoved_pieces(self):
        position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Qk - 0 1")
        generator = MoveGenerator(castling=True)

        white = [m for m in generator.moves_for(position, 7, 4) if m.is_castling]
        black = [m for m in generator.moves_for(position, 0, 4) if m.is_castling]

        assert white == [Move(7, 4, 7, 2, QUEENSIDE)]
        assert black == [Move(0, 4, 0, 6, KINGSIDE)]

    def test_blocked_path(self):
        position = Position.from_fen("r3k2r/8/8/8/8/8/8/RN2K1NR w KQkq - 0 1")

        moves = MoveGenerator(castling=True).moves_for(position, 7, 4)

        assert not any(m.is_castling for m in moves)

    def test_missing_rook(self):
        position = Position.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        position.set_piece(7, 7, EMPTY)

        moves = MoveGenerator(castling=True).moves_for(position, 7, 4)

        assert [m for m in moves if m.is_castling] == [Move(7, 4, 7, 2, QUEENSIDE)]


class TestPerft:
    """Perft node counts from the initial position."""

    @pytest.mark.parametrize("depth, nodes", [(1, 20), (2, 400), (3, 8902)])
    def test_initial_position(self, depth, nodes):
        position = Position.initial()

        assert perft(position, depth) == nodes
        assert position == Position.initial()
