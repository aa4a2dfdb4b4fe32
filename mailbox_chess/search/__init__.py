"""
Search Module

This module implements the engine's search: fixed-depth minimax over the
pseudo-legal move tree with a swappable early-cutoff strategy.

Key Components:
    - search_value: recursive minimax value of a position
    - select_best_move: root-level search returning the best move
    - SearchContext / SearchStats / SearchResult: explicit search state
    - PruningStrategy: MarginPruning (default) or ExhaustiveSearch
"""

from mailbox_chess.search.context import SCORE_INFINITY, SearchContext, SearchResult, SearchStats
from mailbox_chess.search.minimax import search_value, select_best_move
from mailbox_chess.search.pruning import ExhaustiveSearch, MarginPruning, PruningStrategy

__all__ = [
    'SCORE_INFINITY',
    'ExhaustiveSearch',
    'MarginPruning',
    'PruningStrategy',
    'SearchContext',
    'SearchResult',
    'SearchStats',
    'search_value',
    'select_best_move',
]
