"""
Positional Evaluation

Material counting plus a handful of hand-tuned positional terms, computed
with numpy masks over the 8x8 token grid.

Evaluation Components:
    - Material: P=10, N=30, B=30, R=50, Q=90, K=100000
    - Development: minor pieces that have left their back rank
    - Knight centralisation: knights inside the central 4x4 block
    - Defended pawns: one bonus per diagonal same-color pawn pair
    - Advanced pawns: pawns past a rank threshold
    - Center occupancy: pawns/bishops on d4, e4, d5, e5 (doubled in the opening)
    - Castling: flat bonus while the game-global has_castled flag is set

The thresholds are asymmetric between colors (white pawns count as
advanced from row 5, black ones from row 3). This is existing engine
behavior and the scores depend on it.
"""

from dataclasses import dataclass, field
from typing import Dict

import numpy as np

from mailbox_chess.board.position import Position
from mailbox_chess.evaluation.base import Evaluator

PIECE_VALUES = {
    "p": 10,
    "n": 30,
    "b": 30,
    "r": 50,
    "q": 90,
    "k": 100000,
}

#fmt: off
# Rows 2-5, columns 2-5
CENTRAL_BLOCK = np.zeros((8, 8), dtype=bool)
CENTRAL_BLOCK[2:6, 2:6] = True

# d5, e5, d4, e4
CENTER_SQUARES = np.zeros((8, 8), dtype=bool)
CENTER_SQUARES[3:5, 3:5] = True
#fmt: on


@dataclass
class EvalWeights:
    """Tunable weights of the positional evaluator."""

    material: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    """Value per lowercase piece letter"""

    development: int = 5
    """Per knight/bishop off its back rank"""

    central_knight: int = 3
    """Per knight on the central 4x4 block"""

    defended_pawn: int = 4
    """Per diagonal same-color pawn pair"""

    advanced_pawn: int = 3
    """Per pawn past the advancement threshold"""

    white_advanced_row: int = 6
    """White pawns on rows below this count as advanced"""

    black_advanced_row: int = 2
    """Black pawns on rows above this count as advanced"""

    center: int = 4
    """Per pawn/bishop on a center square"""

    center_opening_multiplier: int = 2
    """Applied to the center term when the opening hint is set"""

    castled_bonus: int = 10
    """Added whenever has_castled is set, whichever side castled"""


class PositionalEvaluator(Evaluator):
    """
    Material plus positional terms.

    Attributes:
        weights: EvalWeights used for every term
    """

    def __init__(self, weights: EvalWeights = None):
        self.weights = weights if weights is not None else EvalWeights()

    def score(self, position: Position, opening: bool) -> int:
        """
        Evaluate position using material + positional terms.

        Args:
            position: Position to evaluate
            opening: Amplify the center occupancy term

        Returns:
            int: Evaluation (White's perspective)
        """
        w = self.weights
        grid = np.array(position.grid)

        score = 0

        # Material
        tokens, counts = np.unique(grid, return_counts=True)
        for token, count in zip(tokens, counts):
            value = w.material.get(token.lower())
            if value is None:
                continue
            score += value * int(count) if token.isupper() else -value * int(count)

        white_pawns = grid == "P"
        black_pawns = grid == "p"
        white_knights = grid == "N"
        black_knights = grid == "n"
        white_bishops = grid == "B"
        black_bishops = grid == "b"

        # Minor piece development
        white_minors = white_knights | white_bishops
        black_minors = black_knights | black_bishops
        score += w.development * int(white_minors[:7].sum())
        score -= w.development * int(black_minors[1:].sum())

        # Centralized knights
        score += w.central_knight * int((white_knights & CENTRAL_BLOCK).sum())
        score -= w.central_knight * int((black_knights & CENTRAL_BLOCK).sum())

        # Defended pawns: white looks one row up, black one row down
        white_pairs = (white_pawns[1:, 1:] & white_pawns[:-1, :-1]).sum() + (
            white_pawns[1:, :-1] & white_pawns[:-1, 1:]
        ).sum()
        black_pairs = (black_pawns[:-1, 1:] & black_pawns[1:, :-1]).sum() + (
            black_pawns[:-1, :-1] & black_pawns[1:, 1:]
        ).sum()
        score += w.defended_pawn * int(white_pairs)
        score -= w.defended_pawn * int(black_pairs)

        # Advanced pawns
        score += w.advanced_pawn * int(white_pawns[: w.white_advanced_row].sum())
        score -= w.advanced_pawn * int(black_pawns[w.black_advanced_row + 1 :].sum())

        # Center control
        center = w.center * (w.center_opening_multiplier if opening else 1)
        score += center * int(((white_pawns | white_bishops) & CENTER_SQUARES).sum())
        score -= center * int(((black_pawns | black_bishops) & CENTER_SQUARES).sum())

        if position.has_castled:
            score += w.castled_bonus

        return score
