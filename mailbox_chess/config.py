"""
Engine configuration.
"""

from dataclasses import dataclass, field

import chess

from mailbox_chess.evaluation.positional import EvalWeights, PositionalEvaluator
from mailbox_chess.movegen.generator import MoveGenerator
from mailbox_chess.search.context import SearchContext
from mailbox_chess.search.pruning import ExhaustiveSearch, MarginPruning, PruningStrategy


@dataclass
class EngineConfig:
    """Configuration for an interactive game.

    Collects the search depth, rule toggles and evaluation weights in one
    place; build_context() turns it into a SearchContext.
    """

    search_depth: int = 5
    """Plies searched for every engine reply"""

    castling: bool = False
    """Generate castling moves for both sides"""

    exhaustive: bool = False
    """Disable margin pruning (plain minimax)"""

    pruning_margin: int = 10
    """Score margin of the early cutoff"""

    pruning_depth_offset: int = 2
    """Plies below the root that are never cut off"""

    workers: int = 1
    """Threads for the root fan-out (1 = sequential)"""

    opening_plies: int = 20
    """Plies during which the evaluator's opening hint is set"""

    human_side: chess.Color = chess.WHITE
    """Color played by the human"""

    weights: EvalWeights = field(default_factory=EvalWeights)
    """Evaluator weights"""

    def __post_init__(self):
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be at least 1, got {self.search_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @property
    def engine_side(self) -> chess.Color:
        return not self.human_side

    def make_pruning(self) -> PruningStrategy:
        if self.exhaustive:
            return ExhaustiveSearch()
        return MarginPruning(margin=self.pruning_margin, depth_offset=self.pruning_depth_offset)

    def make_generator(self) -> MoveGenerator:
        return MoveGenerator(castling=self.castling)

    def build_context(self, opening: bool = False) -> SearchContext:
        """Create a SearchContext for one engine reply."""
        return SearchContext(
            max_depth=self.search_depth,
            evaluator=PositionalEvaluator(self.weights),
            generator=self.make_generator(),
            pruning=self.make_pruning(),
            opening=opening,
            workers=self.workers,
        )
