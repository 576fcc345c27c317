"""Traversal runner entry point.

Usage:
    parabfs -n 500 -t 8
    parabfs -i graph.txt -t 4 -q
    parabfs -n 200 --seed 7 -o graph.txt

Loads or generates a graph, runs a BFS from every vertex on a bounded
worker pool, and prints the run summary.
"""

import argparse
import sys
from typing import NoReturn, TextIO

from parabfs.common.config import get_settings
from parabfs.common.exceptions import ParaBFSError
from parabfs.common.logging import get_logger, setup_logging
from parabfs.common.metrics import set_app_info
from parabfs.graph.generator import random_graph
from parabfs.graph.io import load_graph, save_graph
from parabfs.graph.model import Graph
from parabfs.tasks.executor import AllVerticesResult, FanOutExecutor

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="parabfs",
        description="Run a breadth-first traversal from every vertex of a graph in parallel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    parabfs -n 500 -t 8
    parabfs -i graph.txt -t 4 -q
    parabfs -n 200 --seed 7 -o graph.txt
        """,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-n", "--vertices",
        type=int,
        help="Generate a random graph with this many vertices (default: GENERATOR_DEFAULT_VERTEX_COUNT)",
    )
    source.add_argument(
        "-i", "--input",
        help="Read the graph from this file",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the graph used for the run to this file",
    )
    parser.add_argument(
        "-t", "--tasks",
        type=int,
        default=None,
        help="Number of parallel workers (default: TRAVERSAL_WORKER_COUNT)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random graph generation",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and skip the per-vertex traversal listing",
    )
    return parser


def print_summary(
    graph: Graph,
    result: AllVerticesResult,
    quiet: bool = False,
    out: TextIO | None = None,
) -> None:
    """Print a fan-out result in human-readable form."""
    out = out or sys.stdout

    if not quiet:
        for item in result.results:
            traversal = " ".join(str(v) for v in item.traversal)
            print(
                f"[{item.start_vertex}] worker={item.worker_id} "
                f"time={item.elapsed_ms:.3f}ms: {traversal}",
                file=out,
            )

    print(f"Vertices: {graph.vertex_count()}", file=out)
    print(f"Workers configured: {result.worker_count}", file=out)
    print(f"Workers used: {result.workers_used}", file=out)
    print(f"Total time elapsed: {result.total_elapsed_ms:.3f} ms", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run the traversal runner.

    Args:
        argv: Command-line arguments, excluding the program name.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()

    log_settings = settings.logging
    if args.quiet:
        log_settings = log_settings.model_copy(update={"level": "WARNING"})
    setup_logging(log_settings)

    set_app_info(
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        if args.input is not None:
            graph = load_graph(args.input)
        else:
            vertices = args.vertices
            if vertices is None:
                vertices = settings.generator.default_vertex_count
            graph = random_graph(vertices, seed=args.seed)

        if args.output is not None:
            save_graph(args.output, graph)

        executor = FanOutExecutor(settings=settings.traversal)
        result = executor.traverse_from_all_vertices(graph, args.tasks)
    except ParaBFSError as e:
        logger.error("Run failed", error_code=e.error_code, error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("Run failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(graph, result, quiet=args.quiet)
    return 0


def run() -> NoReturn:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
