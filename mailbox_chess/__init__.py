"""
Mailbox Chess Engine

A small console chess engine: a human plays one side in long algebraic
notation, the engine answers with a fixed-depth minimax search.

## Architecture

The engine is organized into several key modules:

1. **board**: Position representation and boundary helpers
   - 8x8 mailbox grid of piece tokens with castling bookkeeping
   - Make/unmake of moves, snapshots, python-chess/FEN bridge
   - Long algebraic notation conversion and console rendering

2. **movegen**: Pseudo-legal move generation
   - One enumerator per piece type, optional symmetric castling
   - No check detection, en passant or promotion (see CAPABILITIES)

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - PositionalEvaluator: material plus positional terms

4. **search**: Search algorithms
   - Fixed-depth minimax over the move tree
   - Swappable early-cutoff strategy (margin pruning or exhaustive)
   - Optional thread-pool fan-out of root moves on private board copies

5. **cli**: Interactive console game

6. **utils**: Timer, perft and search benchmarking

## Quick Start

### As a Python Library

```python
import chess
from mailbox_chess.board import Position, to_algebraic, to_coordinates
from mailbox_chess.search import SearchContext, select_best_move

position = Position.initial()
position.make_move(to_coordinates("e2e4"))

result = select_best_move(position, depth=3, side=chess.BLACK, context=SearchContext())
print(f"Best move: {to_algebraic(result.move)} (score: {result.score})")
```

### As a Console Game

```bash
python -m mailbox_chess 4
```

## Version

0.2.0
"""

__version__ = "0.2.0"
__license__ = "MIT"

from mailbox_chess.board import Move, Position
from mailbox_chess.evaluation import Evaluator, PositionalEvaluator
from mailbox_chess.search import SearchContext, SearchResult, search_value, select_best_move

__all__ = [
    'Evaluator',
    'Move',
    'Position',
    'PositionalEvaluator',
    'SearchContext',
    'SearchResult',
    'search_value',
    'select_best_move',
]
