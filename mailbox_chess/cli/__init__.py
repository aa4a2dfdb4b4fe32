"""
Console Interface

Interactive play against the engine from a terminal.

Usage:
    python -m mailbox_chess [depth] [--castling] [--exhaustive] [--workers N]
"""

from mailbox_chess.cli.interface import GameSession, IllegalMoveError, main, setup_logger

__all__ = ['GameSession', 'IllegalMoveError', 'main', 'setup_logger']
