"""
Board Representation Module

This module holds the mailbox position and the boundary helpers that
translate it to and from text.

Key Components:
    - Position: 8x8 grid of piece tokens plus castling bookkeeping
    - Move: origin/destination pair with an optional castling tag
    - to_coordinates / to_algebraic: long algebraic notation conversion
    - render_board: console drawing

Data Flow:
    "e2e4" → to_coordinates() → Move → Position.make_move() → UndoInfo
"""

from mailbox_chess.board.notation import NotationError, to_algebraic, to_coordinates
from mailbox_chess.board.position import EMPTY, KINGSIDE, QUEENSIDE, Move, Position, UndoInfo
from mailbox_chess.board.render import render_board

__all__ = [
    'EMPTY',
    'KINGSIDE',
    'QUEENSIDE',
    'Move',
    'NotationError',
    'Position',
    'UndoInfo',
    'render_board',
    'to_algebraic',
    'to_coordinates',
]
