"""
Early-Cutoff Strategies

The search asks its PruningStrategy, at every interior node, whether the
node can be answered by its static score alone. Swapping the strategy
changes how much of the tree is explored without touching the search.

MarginPruning is a heuristic in the spirit of futility pruning, not an
alpha-beta bound: once the static score beats the reference score by more
than the margin, the node returns that static score. It can discard moves
that a full search would have preferred, so results are not exhaustive.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from mailbox_chess.board.position import Position

if TYPE_CHECKING:
    from mailbox_chess.search.context import SearchContext


class PruningStrategy(ABC):
    """Decides whether an interior node is cut off."""

    @abstractmethod
    def cutoff(
        self,
        position: Position,
        depth: int,
        reference_score: int,
        context: "SearchContext",
    ) -> Optional[int]:
        """
        Args:
            position: Position at the node
            depth: Remaining depth (> 0)
            reference_score: Score captured before the root move was tried
            context: Search context (max depth, evaluator, stats)

        Returns:
            The score to return for the node, or None to search it
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ExhaustiveSearch(PruningStrategy):
    """Never cuts off: plain fixed-depth minimax."""

    def cutoff(self, position, depth, reference_score, context):
        return None


class MarginPruning(PruningStrategy):
    """
    Static-score cutoff away from the root.

    Applies only when the node is more than depth_offset plies below the
    root depth. The static score is returned when
    reference_score - static < -margin.

    Attributes:
        margin: Score margin (default 10)
        depth_offset: Plies below the root that are never pruned (default 2)
    """

    def __init__(self, margin: int = 10, depth_offset: int = 2):
        self.margin = margin
        self.depth_offset = depth_offset

    def cutoff(self, position, depth, reference_score, context):
        if context.max_depth - depth <= self.depth_offset:
            return None

        static = context.evaluate(position)
        if reference_score - static < -self.margin:
            return static
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(margin={self.margin}, depth_offset={self.depth_offset})"
