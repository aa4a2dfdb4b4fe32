"""
Move Generation Module

Per-piece pseudo-legal move enumeration and the aggregator that collects
every move for one side.

Key Components:
    - MoveGenerator: configurable generator (castling on/off)
    - moves_for / all_moves: module-level shortcuts without castling
    - CAPABILITIES: which chess rules the generator does NOT cover
"""

from mailbox_chess.movegen.generator import (
    CAPABILITIES,
    Capabilities,
    MoveGenerator,
    all_moves,
    moves_for,
)

__all__ = ['CAPABILITIES', 'Capabilities', 'MoveGenerator', 'all_moves', 'moves_for']
