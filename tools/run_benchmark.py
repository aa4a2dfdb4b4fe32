#!/usr/bin/env python3
"""
Search Benchmark Runner

Runs the root selector over the benchmark positions at multiple depths
to compare move choice, evaluation counts and speed, optionally against
plain minimax without margin pruning.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3] [--exhaustive] [--workers 4] [--verbose]
"""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from mailbox_chess.config import EngineConfig
from mailbox_chess.utils.testing import BENCHMARK_POSITIONS, run_search_benchmark
from mailbox_chess.utils.timer import format_time


def run_benchmark(depths: list[int], exhaustive: bool = False, workers: int = 1,
                  verbose: bool = False):
    """
    Run the search benchmark at multiple depths.

    Args:
        depths: List of depths to test
        exhaustive: Disable margin pruning
        workers: Threads for the root search
        verbose: If True, print detailed results for each position
    """
    config = EngineConfig(exhaustive=exhaustive, workers=workers)

    print("=" * 80)
    print("SEARCH BENCHMARK - Mailbox Chess")
    print("=" * 80)
    print(f"Pruning: {config.make_pruning()!r}")
    print(f"Workers: {workers}")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        results = run_search_benchmark(BENCHMARK_POSITIONS, depth, config, show_progress=True)

        total_time = sum(r.time_taken for r in results)
        total_positions = sum(r.positions_evaluated for r in results)
        positions_per_sec = total_positions / total_time if total_time > 0 else 0

        all_results.append({
            'depth': depth,
            'total_time': total_time,
            'total_positions': total_positions,
            'positions_per_sec': positions_per_sec,
            'results': results,
        })

        if verbose:
            print(f"\nResults at depth {depth}:")
            for r in results:
                print(f"  {r.position.id}: {r.found_move or '-':<6} score {r.score:>8} "
                      f"positions {r.positions_evaluated:>10,} time {format_time(r.time_taken)}"
                      f"  ({r.position.description})")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Positions':<15} {'Time':<12} {'Positions/sec':<15}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['depth']:<8} {r['total_positions']:<15,} {format_time(r['total_time']):<12} "
              f"{r['positions_per_sec']:>12,.0f}")

    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the search benchmark at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3",
        help="Comma-separated list of depths to test (default: 1,2,3)"
    )
    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="Disable margin pruning"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads for the root search (default: 1)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, exhaustive=args.exhaustive, workers=args.workers,
                      verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
