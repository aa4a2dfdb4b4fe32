"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless and never modify the Position
    2. evaluate() returns an integer score from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. There is no terminal scoring: a missing king simply shows up as a
       huge material swing (the king is worth 100000)

Counting:
    Searches report how many positions they evaluated. Instead of a global
    counter, evaluate() takes an optional SearchStats and increments its
    positions_evaluated field.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from mailbox_chess.board.position import Position

if TYPE_CHECKING:
    from mailbox_chess.search.context import SearchStats


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Subclasses implement score(); callers use evaluate(), which adds the
    evaluation counting shared by every evaluator.
    """

    def evaluate(
        self,
        position: Position,
        opening: bool = False,
        stats: Optional["SearchStats"] = None,
    ) -> int:
        """
        Evaluate a position from White's perspective.

        Args:
            position: Position to evaluate (left unchanged)
            opening: Opening-phase hint, amplifies center occupancy terms
            stats: Optional counters; positions_evaluated is incremented

        Returns:
            int: Evaluation score
        """
        if stats is not None:
            stats.positions_evaluated += 1
        return self.score(position, opening)

    @abstractmethod
    def score(self, position: Position, opening: bool) -> int:
        """
        Compute the static score of a position.

        Raises:
            NotImplementedError: If subclass doesn't implement this method
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
