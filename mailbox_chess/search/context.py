"""
Search State

Everything a search needs besides the Position is carried explicitly in
a SearchContext, so independent searches never share counters or flags.
"""

from dataclasses import dataclass, field
from typing import Optional

from mailbox_chess.board.position import Move
from mailbox_chess.evaluation.base import Evaluator
from mailbox_chess.evaluation.positional import PositionalEvaluator
from mailbox_chess.movegen.generator import MoveGenerator
from mailbox_chess.search.pruning import MarginPruning, PruningStrategy

# Extremum identity: returned unchanged when a side has no moves
SCORE_INFINITY = 10_000_000


@dataclass
class SearchStats:
    """Counters accumulated during one search."""

    positions_evaluated: int = 0


@dataclass
class SearchContext:
    """
    Collaborators and settings of a search.

    Attributes:
        max_depth: Root depth of the current search (pruning is relative to it)
        evaluator: Static evaluation function
        generator: Move generator
        pruning: Early-cutoff strategy
        opening: Opening hint passed to every evaluation
        workers: Thread pool size for the root fan-out (1 = sequential)
        stats: Counters, reset by the root selector
    """

    max_depth: int = 5
    evaluator: Evaluator = field(default_factory=PositionalEvaluator)
    generator: MoveGenerator = field(default_factory=MoveGenerator)
    pruning: PruningStrategy = field(default_factory=MarginPruning)
    opening: bool = False
    workers: int = 1
    stats: SearchStats = field(default_factory=SearchStats)

    def evaluate(self, position) -> int:
        return self.evaluator.evaluate(position, self.opening, self.stats)

    def fork(self) -> "SearchContext":
        """Copy sharing collaborators but with fresh stats, for a parallel task."""
        return SearchContext(
            max_depth=self.max_depth,
            evaluator=self.evaluator,
            generator=self.generator,
            pruning=self.pruning,
            opening=self.opening,
            workers=1,
        )


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Best move, None if the side to move had no moves
        score: Score of the best move (extremum identity if move is None)
        positions_evaluated: Number of evaluate() calls made
    """

    move: Optional[Move]
    score: int
    positions_evaluated: int = 0

    @property
    def has_move(self) -> bool:
        return self.move is not None
