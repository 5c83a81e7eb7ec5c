#!/usr/bin/env python3
"""
Graph Walk CLI - Step through a graph traversal from the console.

Usage:
    python scripts/walk.py
    python scripts/walk.py --scene data/scenes/branching.json --algorithm dfs
    python scripts/walk.py --algorithm greedy --auto
    python scripts/walk.py --scene my_scene.msgpack --auto --max-steps 20

Algorithms:
    bfs          - Breadth-first (FIFO queue)
    priority-bfs - Highest declared priority first
    dfs          - Depth-first (LIFO stack)
    greedy       - Nearest-to-goal first; stops on the goal (needs start/goal)

Controls (interactive mode):
    Enter / s    - Advance one step
    r            - Reset colors and restart the search
    a / Tab      - Switch to the next algorithm
    q            - Quit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from graphwalk.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_SCENE_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_AUTO_STEPS,
)
from graphwalk.scene import SceneError, load_scene  # noqa: E402
from graphwalk.search import Algorithm, SearchState, get_algorithm  # noqa: E402
from graphwalk.session import HELP_TEXT, TraversalEngine, parse_command  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Step through a graph traversal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--scene",
        type=Path,
        default=DEFAULT_SCENE_PATH,
        help=f"Scene file (.json or .msgpack) (default: {DEFAULT_SCENE_PATH.name})",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=[a.value for a in Algorithm],
        help=f"Traversal algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Run to completion instead of prompting for each step",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=MAX_AUTO_STEPS,
        help=f"Maximum steps in --auto mode (default: {MAX_AUTO_STEPS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def print_status(engine: TraversalEngine) -> None:
    """Print the current traversal status."""
    traversal = engine.traversal
    print("\n" + "=" * 60)
    print(f"Algorithm: {engine.algorithm.label}")
    print(f"State:     {engine.state.value}")
    print(f"Visited:   {', '.join(traversal.visited_names()) or '-'}")
    print(f"{engine.view.status}")
    print("=" * 60)


def interactive_loop(engine: TraversalEngine) -> None:
    """Prompt for commands until the user quits."""
    print(HELP_TEXT)
    print_status(engine)

    while True:
        try:
            text = input("> ")
        except EOFError:
            return

        try:
            event = parse_command(text)
        except ValueError as e:
            print(e)
            continue

        if event is None:
            return

        result = engine.handle(event)
        if result is not None and result.vertex is not None:
            print(f"{result.outcome.value}: {engine.graph.name_of(result.vertex)}")
        print_status(engine)

        if engine.state is SearchState.FINISHED:
            print("Search finished. [r] to restart, [a] to switch algorithm, [q] to quit.")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        graph = load_scene(args.scene)
        algorithm = get_algorithm(args.algorithm)
    except (FileNotFoundError, SceneError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = TraversalEngine(graph, algorithm)
    if not engine.start():
        print(f"Warning: {algorithm.label} could not start on this scene", file=sys.stderr)

    print("\n" + "=" * 60)
    print("Graph Walk")
    print("=" * 60)
    print(f"  Scene:     {args.scene}")
    print(f"  Vertices:  {len(graph)}")
    print(f"  Edges:     {len(graph.edges)}")
    print(f"  Algorithm: {algorithm.label}")
    print("=" * 60 + "\n")

    if args.auto:
        result = engine.run_to_completion(max_steps=args.max_steps)
    else:
        try:
            interactive_loop(engine)
        except KeyboardInterrupt:
            print("\n\nInterrupted by user")
            return 130  # Standard exit code for Ctrl+C
        result = engine.result()

    print("\nVisit order:")
    for i, name in enumerate(result.visit_order, 1):
        print(f"  {i}. {name}")
    print(f"\nSteps: {result.total_steps}  Finished: {result.finished}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
