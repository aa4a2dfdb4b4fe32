"""
Fixed-Depth Minimax Search

This module implements the engine's search: a recursive minimax over the
pseudo-legal move tree, played out on one Position with make/unmake.

Key Concepts:
    - Minimax: White nodes take the maximum child score, Black nodes the minimum
    - Make/Unmake: each child is explored by mutating the Position in place
      and reversing the mutation afterwards
    - Early cutoff: the context's PruningStrategy may answer an interior node
      with its static score (see search/pruning.py)
    - No terminal detection: a side without moves returns the extremum
      identity (+/-SCORE_INFINITY) rather than a mate or draw score

Parallel Root:
    With context.workers > 1 the root moves are scored on a thread pool.
    Each task searches a private copy of the Position with private stats;
    results are merged in generation order, so the chosen move, score and
    evaluation count match the sequential search exactly.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Futility Pruning: https://www.chessprogramming.org/Futility_Pruning
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import chess

from mailbox_chess.board.notation import to_algebraic
from mailbox_chess.board.position import Move, Position
from mailbox_chess.search.context import SCORE_INFINITY, SearchContext, SearchResult, SearchStats

logger = logging.getLogger(__name__)


def search_value(
    position: Position,
    depth: int,
    side: chess.Color,
    reference_score: int,
    context: SearchContext,
) -> int:
    """
    Minimax value of a position.

    Args:
        position: Position to search (mutated during the call, restored on return)
        depth: Remaining search depth
        side: Side to move (chess.WHITE maximises, chess.BLACK minimises)
        reference_score: Baseline for the pruning strategy
        context: Search collaborators and counters

    Returns:
        int: Evaluation of the best line found, or the extremum identity
        (-SCORE_INFINITY for White, +SCORE_INFINITY for Black) if the side
        to move has no moves

    Algorithm:
        1. depth = 0 → static evaluation
        2. Ask the pruning strategy for a cutoff
        3. For each move: make, recurse (depth - 1, other side), unmake
        4. Return the extremum over children
    """
    if depth == 0:
        return context.evaluate(position)

    cutoff = context.pruning.cutoff(position, depth, reference_score, context)
    if cutoff is not None:
        return cutoff

    moves = context.generator.all_moves(position, side)

    if side == chess.WHITE:
        best = -SCORE_INFINITY
        for move in moves:
            undo = position.make_move(move)
            score = search_value(position, depth - 1, chess.BLACK, reference_score, context)
            position.unmake_move(move, undo)
            best = max(best, score)
    else:
        best = SCORE_INFINITY
        for move in moves:
            undo = position.make_move(move)
            score = search_value(position, depth - 1, chess.WHITE, reference_score, context)
            position.unmake_move(move, undo)
            best = min(best, score)

    return best


def _score_root_move(
    position: Position,
    move: Move,
    depth: int,
    side: chess.Color,
    reference_score: int,
    context: SearchContext,
) -> Tuple[int, int]:
    """Score one root move; returns (score, positions evaluated)."""
    undo = position.make_move(move)
    score = search_value(position, depth - 1, not side, reference_score, context)
    position.unmake_move(move, undo)
    return score, context.stats.positions_evaluated


def _score_sequential(position, moves, depth, side, reference_score, context) -> List[int]:
    scores = []
    for move in moves:
        score, _ = _score_root_move(position, move, depth, side, reference_score, context)
        scores.append(score)
    return scores


def _score_parallel(position, moves, depth, side, reference_score, context) -> List[int]:
    with ThreadPoolExecutor(max_workers=context.workers) as pool:
        futures = [
            pool.submit(
                _score_root_move,
                position.copy(),
                move,
                depth,
                side,
                reference_score,
                context.fork(),
            )
            for move in moves
        ]
        results = [future.result() for future in futures]

    scores = []
    for score, evaluated in results:
        scores.append(score)
        context.stats.positions_evaluated += evaluated
    return scores


def select_best_move(
    position: Position,
    depth: int,
    side: chess.Color,
    reference_score: Optional[int] = None,
    context: Optional[SearchContext] = None,
) -> SearchResult:
    """
    Find the best move for side in the current position.

    Args:
        position: Current position (restored to its exact prior state on return)
        depth: Search depth, >= 1
        side: Side to move
        reference_score: Pruning baseline; None means the static score of
            the root position
        context: Search context; a default one is created if omitted. Its
            max_depth is set to depth and its stats are reset.

    Returns:
        SearchResult(move, score, positions_evaluated). move is None when
        side has no moves at all (checkmate and stalemate are not
        distinguished).

    Raises:
        ValueError: If depth < 1

    A full snapshot of the position is taken before searching. If anything
    raises mid-search, the position is restored from it before the
    exception propagates.
    """
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    if context is None:
        context = SearchContext()
    context.max_depth = depth
    context.stats = SearchStats()

    if reference_score is None:
        reference_score = context.evaluator.evaluate(position, context.opening)

    maximizing = side == chess.WHITE
    best_move = None
    best_score = -SCORE_INFINITY if maximizing else SCORE_INFINITY

    moves = context.generator.all_moves(position, side)
    if not moves:
        logger.info("No moves available for %s", chess.COLOR_NAMES[side])
        return SearchResult(move=None, score=best_score)

    logger.debug(
        f"Search started: depth={depth}, side={chess.COLOR_NAMES[side]}, "
        f"moves={len(moves)}, reference={reference_score}, workers={context.workers}"
    )

    snapshot = position.copy()
    try:
        if context.workers > 1 and len(moves) > 1:
            scores = _score_parallel(position, moves, depth, side, reference_score, context)
        else:
            scores = _score_sequential(position, moves, depth, side, reference_score, context)
    except BaseException:
        position.restore(snapshot)
        logger.warning("Search aborted, position restored from snapshot")
        raise

    for move, score in zip(moves, scores):
        logger.debug(f"Move: {to_algebraic(move)}, Score: {score}")
        # The first move is always taken, even if it scores the extremum identity
        if best_move is None or (score > best_score if maximizing else score < best_score):
            best_score = score
            best_move = move

    logger.info(
        f"Search complete: best_move={to_algebraic(best_move) if best_move else 'None'}, "
        f"score={best_score}, positions={context.stats.positions_evaluated}"
    )

    return SearchResult(
        move=best_move,
        score=best_score,
        positions_evaluated=context.stats.positions_evaluated,
    )
