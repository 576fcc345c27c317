#!/usr/bin/env python
"""Measure fan-out time across a range of worker counts.

Runs the all-vertices BFS on one graph for each worker count from 1 to
--max-workers and prints total time, workers used and speedup relative
to the single-worker run.

Usage:
    python scripts/sweep_workers.py [OPTIONS]

Options:
    --vertices INT      Size of the generated graph (default: 300)
    --input PATH        Use a graph file instead of generating one
    --max-workers INT   Largest worker count to try (default: 8)
    --repeat INT        Runs per worker count; the fastest is kept (default: 3)
    --seed INT          Random seed for the generated graph (default: 42)

Example:
    python scripts/sweep_workers.py --vertices 500 --max-workers 16
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from parabfs.common.config import get_settings
from parabfs.common.logging import setup_logging
from parabfs.graph.generator import random_graph
from parabfs.graph.io import load_graph
from parabfs.tasks.executor import FanOutExecutor


def main() -> int:
    """Run the sweep."""
    parser = argparse.ArgumentParser(
        description="Measure BFS fan-out time across worker counts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--vertices",
        type=int,
        default=300,
        help="Number of vertices in the generated graph (default: 300)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Graph file to use instead of a generated graph",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=8,
        help="Largest worker count to try (default: 8)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=3,
        help="Runs per worker count; the fastest is reported (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    args = parser.parse_args()

    if args.max_workers < 1 or args.repeat < 1:
        parser.error("--max-workers and --repeat must be at least 1")

    setup_logging(get_settings().logging.model_copy(update={"level": "WARNING"}))

    if args.input is not None:
        graph = load_graph(args.input)
    else:
        graph = random_graph(args.vertices, seed=args.seed)

    print(f"Graph: {graph.vertex_count()} vertices")
    print(f"{'workers':>8} {'used':>6} {'time_ms':>12} {'speedup':>8}")

    executor = FanOutExecutor()
    baseline_ms: float | None = None

    for workers in range(1, args.max_workers + 1):
        runs = [
            executor.traverse_from_all_vertices(graph, workers)
            for _ in range(args.repeat)
        ]
        best = min(runs, key=lambda r: r.total_elapsed)

        if baseline_ms is None:
            baseline_ms = best.total_elapsed_ms
        speedup = baseline_ms / best.total_elapsed_ms if best.total_elapsed_ms else 0.0

        print(
            f"{workers:>8} {best.workers_used:>6} "
            f"{best.total_elapsed_ms:>12.3f} {speedup:>8.2f}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
