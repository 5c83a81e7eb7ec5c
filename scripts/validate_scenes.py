#!/usr/bin/env python3
"""
Validate authored scene files.

Loads every scene in data/scenes (or the files given on the command line),
prints statistics, runs the graph consistency checks, and traverses each
scene once per algorithm.

Usage:
    python scripts/validate_scenes.py
    python scripts/validate_scenes.py data/scenes/example.json
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graphwalk.config import get_scene_files  # noqa: E402 - must be after sys.path modification
from graphwalk.scene import SceneError, load_scene  # noqa: E402
from graphwalk.search import Algorithm  # noqa: E402
from graphwalk.session import TraversalEngine  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def validate_scene(path: Path) -> bool:
    """Load one scene and run all checks against it."""
    print(f"\n=== {path.name} ===\n")

    try:
        graph = load_scene(path)
    except (FileNotFoundError, SceneError) as e:
        print(f"  ✗ load failed: {e}")
        return False

    graph.initialize()

    for key, value in graph.stats().items():
        print(f"  {key}: {value}")

    all_valid = True
    print()
    for check, passed in graph.validate().items():
        print(f"  {'✓' if passed else '✗'} {check}")
        all_valid = all_valid and passed

    print()
    for algorithm in Algorithm:
        engine = TraversalEngine(graph, algorithm)
        if not engine.start():
            print(f"  - {algorithm.label}: not startable (needs start/goal)")
            continue
        result = engine.run_to_completion()
        status = "✓" if result.finished else "✗"
        print(f"  {status} {algorithm.label}: {' -> '.join(result.visit_order)}")
        all_valid = all_valid and result.finished

    return all_valid


def main() -> int:
    paths = [Path(p) for p in sys.argv[1:]] or get_scene_files()
    if not paths:
        print("No scene files found.")
        return 1

    results = [validate_scene(path) for path in paths]

    print("\n" + "=" * 40)
    print(f"{sum(results)}/{len(results)} scenes valid")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
