"""
Evaluation Module

This module provides position evaluation functions for the chess engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm works with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - PositionalEvaluator: material plus positional terms
    - EvalWeights: the evaluator's tunable weights

Data Flow:
    Position → evaluator.evaluate() → int
                                      Positive = White advantage
                                      Negative = Black advantage
"""

from mailbox_chess.evaluation.base import Evaluator
from mailbox_chess.evaluation.positional import PIECE_VALUES, EvalWeights, PositionalEvaluator

__all__ = ['Evaluator', 'EvalWeights', 'PIECE_VALUES', 'PositionalEvaluator']
