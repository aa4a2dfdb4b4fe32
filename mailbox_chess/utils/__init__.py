"""
Utilities Module

This module provides timing, move generation verification and search
benchmarking helpers.

Key Components:
    - Timer: wall-clock timer used to report search time
    - perft: pseudo-legal leaf node counting
    - run_search_benchmark: root search over a fixed position set
"""

from mailbox_chess.utils.testing import (
    BENCHMARK_POSITIONS,
    BenchmarkPosition,
    BenchmarkResult,
    perft,
    run_search_benchmark,
)
from mailbox_chess.utils.timer import Timer, format_time

__all__ = [
    'BENCHMARK_POSITIONS',
    'BenchmarkPosition',
    'BenchmarkResult',
    'Timer',
    'format_time',
    'perft',
    'run_search_benchmark',
]
