"""
Pseudo-Legal Move Generation

Moves are generated from piece-movement rules alone. The generator never
asks whether a move leaves the mover's own king attacked, and it knows
nothing about en passant or promotion (a pawn reaching the last rank stays
a pawn). These limits are published in CAPABILITIES so callers can see them.

Move Ordering:
    all_moves() walks the board in row-major order (a8, b8, ..., h1) and
    each piece emits its moves following the fixed direction tables below.
    The search uses this order unchanged, so it decides which move wins a
    tie between equal scores.

Castling:
    Optional and symmetric. When enabled, an unmoved king on its home square
    gets a two-square move tagged KINGSIDE/QUEENSIDE if the matching corner
    rook is present and unmoved and the squares between them are empty.
"""

from dataclasses import dataclass
from typing import List

import chess

from mailbox_chess.board.position import (
    EMPTY,
    KINGSIDE,
    QUEENSIDE,
    Move,
    Position,
    color_of,
    in_bounds,
)

KNIGHT_OFFSETS = ((2, -1), (2, 1), (-2, -1), (-2, 1), (1, -2), (1, 2), (-1, -2), (-1, 2))
BISHOP_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRECTIONS = ROOK_DIRECTIONS + BISHOP_DIRECTIONS
KING_OFFSETS = QUEEN_DIRECTIONS


@dataclass(frozen=True)
class Capabilities:
    """Rule coverage of the move generator."""

    check_detection: bool = False
    en_passant: bool = False
    promotion: bool = False
    terminal_detection: bool = False


CAPABILITIES = Capabilities()


def _is_enemy(token: str, side: chess.Color) -> bool:
    return token != EMPTY and color_of(token) != side


def pawn_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    grid = position.grid
    direction = -1 if side == chess.WHITE else 1
    start_row = 6 if side == chess.WHITE else 1
    moves = []

    ahead = row + direction
    if in_bounds(ahead, col) and grid[ahead][col] == EMPTY:
        moves.append(Move(row, col, ahead, col))
        two_ahead = row + 2 * direction
        if row == start_row and in_bounds(two_ahead, col) and grid[two_ahead][col] == EMPTY:
            moves.append(Move(row, col, two_ahead, col))

    for capture_col in (col - 1, col + 1):
        if in_bounds(ahead, capture_col) and _is_enemy(grid[ahead][capture_col], side):
            moves.append(Move(row, col, ahead, capture_col))

    return moves


def _step_moves(position, row, col, side, offsets) -> List[Move]:
    grid = position.grid
    moves = []
    for dr, dc in offsets:
        tr, tc = row + dr, col + dc
        if in_bounds(tr, tc):
            target = grid[tr][tc]
            if target == EMPTY or color_of(target) != side:
                moves.append(Move(row, col, tr, tc))
    return moves


def _slide_moves(position, row, col, side, directions) -> List[Move]:
    grid = position.grid
    moves = []
    for dr, dc in directions:
        tr, tc = row + dr, col + dc
        while in_bounds(tr, tc):
            target = grid[tr][tc]
            if target == EMPTY:
                moves.append(Move(row, col, tr, tc))
            else:
                # Blocked: capture if enemy, stop either way
                if color_of(target) != side:
                    moves.append(Move(row, col, tr, tc))
                break
            tr += dr
            tc += dc
    return moves


def knight_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    return _step_moves(position, row, col, side, KNIGHT_OFFSETS)


def bishop_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    return _slide_moves(position, row, col, side, BISHOP_DIRECTIONS)


def rook_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    return _slide_moves(position, row, col, side, ROOK_DIRECTIONS)


def queen_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    return _slide_moves(position, row, col, side, QUEEN_DIRECTIONS)


def king_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    return _step_moves(position, row, col, side, KING_OFFSETS)


def castling_moves(position: Position, row: int, col: int, side: chess.Color) -> List[Move]:
    """
    Two-square king moves for castling (no check tests).

    Args:
        position: Current position
        row, col: Square of the king
        side: Color of the king

    Returns:
        Zero, one or two tagged king moves
    """
    if side == chess.WHITE:
        home_row, king_moved = 7, position.white_king_moved
        rook = "R"
        rook_h_moved, rook_a_moved = position.white_rook_h_moved, position.white_rook_a_moved
    else:
        home_row, king_moved = 0, position.black_king_moved
        rook = "r"
        rook_h_moved, rook_a_moved = position.black_rook_h_moved, position.black_rook_a_moved

    if king_moved or (row, col) != (home_row, 4):
        return []

    grid = position.grid[home_row]
    moves = []
    if not rook_h_moved and grid[7] == rook and grid[5] == EMPTY and grid[6] == EMPTY:
        moves.append(Move(home_row, 4, home_row, 6, KINGSIDE))
    if (
        not rook_a_moved
        and grid[0] == rook
        and grid[1] == EMPTY
        and grid[2] == EMPTY
        and grid[3] == EMPTY
    ):
        moves.append(Move(home_row, 4, home_row, 2, QUEENSIDE))
    return moves


PIECE_GENERATORS = {
    "p": pawn_moves,
    "n": knight_moves,
    "b": bishop_moves,
    "r": rook_moves,
    "q": queen_moves,
    "k": king_moves,
}


class MoveGenerator:
    """
    Pseudo-legal move generator.

    Attributes:
        castling: Generate tagged castling moves for unmoved kings
    """

    CAPABILITIES = CAPABILITIES

    def __init__(self, castling: bool = False):
        self.castling = castling

    def moves_for(self, position: Position, row: int, col: int) -> List[Move]:
        """
        Pseudo-legal moves for the piece on (row, col).

        Returns:
            List of moves, empty if the square is empty
        """
        token = position.piece_at(row, col)
        if token == EMPTY:
            return []

        side = color_of(token)
        kind = token.lower()
        moves = PIECE_GENERATORS[kind](position, row, col, side)
        if kind == "k" and self.castling:
            moves.extend(castling_moves(position, row, col, side))
        return moves

    def all_moves(self, position: Position, side: chess.Color) -> List[Move]:
        """All pseudo-legal moves for side, in row-major square order."""
        moves = []
        for row, col, _ in position.pieces(side):
            moves.extend(self.moves_for(position, row, col))
        return moves

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(castling={self.castling})"


_DEFAULT_GENERATOR = MoveGenerator()


def moves_for(position: Position, row: int, col: int) -> List[Move]:
    return _DEFAULT_GENERATOR.moves_for(position, row, col)


def all_moves(position: Position, side: chess.Color) -> List[Move]:
    return _DEFAULT_GENERATOR.all_moves(position, side)
