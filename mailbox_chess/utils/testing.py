"""
Move Generation Verification and Search Benchmarking

Tools:
    1. Perft: counts leaf nodes of the pseudo-legal move tree. Comparing
       the counts with known values catches move generation bugs, and
       walking the tree exercises make/unmake on every move.

    2. Search benchmark: runs the root selector over a fixed set of
       positions and records the chosen move, score, evaluation count and
       time for each.

Known perft values from the initial position (pseudo-legal, no castling):
    depth 1: 20, depth 2: 400, depth 3: 8902

References:
    - Perft: https://www.chessprogramming.org/Perft
"""

from dataclasses import dataclass
from typing import List, Optional

import chess
from tqdm import tqdm

from mailbox_chess.board.notation import to_algebraic
from mailbox_chess.board.position import Position
from mailbox_chess.config import EngineConfig
from mailbox_chess.movegen.generator import MoveGenerator
from mailbox_chess.search.minimax import select_best_move
from mailbox_chess.utils.timer import Timer


def perft(position: Position, depth: int, side: chess.Color = chess.WHITE,
          generator: Optional[MoveGenerator] = None) -> int:
    """
    Count leaf nodes of the pseudo-legal move tree.

    Args:
        position: Start position (restored on return)
        depth: Plies to expand
        side: Side to move at the root
        generator: Move generator (default: no castling)

    Returns:
        Number of positions reached at exactly depth plies
    """
    if generator is None:
        generator = MoveGenerator()
    if depth == 0:
        return 1

    nodes = 0
    for move in generator.all_moves(position, side):
        undo = position.make_move(move)
        nodes += perft(position, depth - 1, not side, generator)
        position.unmake_move(move, undo)
    return nodes


@dataclass
class BenchmarkPosition:
    """
    A benchmark position.

    Attributes:
        id: Position identifier
        fen: Board position in FEN notation (side to move is taken from it)
        description: Human-readable description
    """
    id: str
    fen: str
    description: str = ""


@dataclass
class BenchmarkResult:
    """
    Result of searching a single benchmark position.

    Attributes:
        position: The benchmark position
        found_move: Move the engine chose (long algebraic, "" if none)
        score: Score of that move
        positions_evaluated: Evaluation count of the search
        time_taken: Seconds spent searching
        depth: Search depth used
    """
    position: BenchmarkPosition
    found_move: str
    score: int
    positions_evaluated: int
    time_taken: float
    depth: int


BENCHMARK_POSITIONS = [
    BenchmarkPosition(
        id="BM.01",
        fen="rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b - - 0 1",
        description="Reply to 1.e4",
    ),
    BenchmarkPosition(
        id="BM.02",
        fen="r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w - - 2 3",
        description="Open game, white to move",
    ),
    BenchmarkPosition(
        id="BM.03",
        fen="q6k/8/8/8/8/8/8/R3K3 w - - 0 1",
        description="Rook wins the undefended queen",
    ),
    BenchmarkPosition(
        id="BM.04",
        fen="4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1",
        description="Pawn capture in a bare ending",
    ),
    BenchmarkPosition(
        id="BM.05",
        fen="r3k2r/ppp2ppp/2n1bn2/3pp3/3PP3/2N1BN2/PPP2PPP/R3K2R b - - 0 1",
        description="Symmetrical middlegame",
    ),
]


def run_search_benchmark(
    positions: List[BenchmarkPosition],
    depth: int,
    config: Optional[EngineConfig] = None,
    show_progress: bool = False,
) -> List[BenchmarkResult]:
    """
    Search every benchmark position at a fixed depth.

    Args:
        positions: Positions to search
        depth: Search depth
        config: Engine configuration (default EngineConfig())
        show_progress: Display a tqdm progress bar

    Returns:
        One BenchmarkResult per position, in input order
    """
    if config is None:
        config = EngineConfig()

    results = []
    for test_position in tqdm(positions, desc=f"depth {depth}", disable=not show_progress):
        board = chess.Board(test_position.fen)
        position = Position.from_board(board)
        context = config.build_context()

        with Timer() as timer:
            result = select_best_move(position, depth, board.turn, context=context)

        results.append(BenchmarkResult(
            position=test_position,
            found_move=to_algebraic(result.move) if result.move else "",
            score=result.score,
            positions_evaluated=result.positions_evaluated,
            time_taken=timer.elapsed,
            depth=depth,
        ))

    return results
