"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graphwalk.graph import Graph, Vertex


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def scenes_dir(project_root: Path) -> Path:
    """Return the authored scenes directory."""
    return project_root / "data" / "scenes"


@pytest.fixture
def path_graph() -> Graph:
    """A - B - C - D, declared symmetrically, start at A."""
    return Graph(
        [
            Vertex("A", (0, 0, 0), neighbors=[1]),
            Vertex("B", (10, 0, 0), neighbors=[0, 2]),
            Vertex("C", (20, 0, 0), neighbors=[1, 3]),
            Vertex("D", (30, 0, 0), neighbors=[2]),
        ],
        start=0,
    )


@pytest.fixture
def branching_graph() -> Graph:
    """A lists [B, C]; B lists [D]; C and D list nothing."""
    return Graph([
        Vertex("A", neighbors=[1, 2]),
        Vertex("B", neighbors=[3]),
        Vertex("C"),
        Vertex("D"),
    ])


@pytest.fixture
def disconnected_graph() -> Graph:
    """A - B and an isolated C."""
    return Graph([
        Vertex("A", neighbors=[1]),
        Vertex("B", neighbors=[0]),
        Vertex("C"),
    ])


@pytest.fixture
def goal_graph() -> Graph:
    """
    Start A, goal D.

    From A, C is nearer the goal than B; D also links on to E, which must
    never be discovered because the search stops on D.
    """
    return Graph(
        [
            Vertex("A", (0, 0, 0), neighbors=[1, 2]),
            Vertex("B", (2, 5, 0), neighbors=[0, 3]),
            Vertex("C", (6, 0, 0), neighbors=[0, 3]),
            Vertex("D", (10, 0, 0), neighbors=[1, 2, 4]),
            Vertex("E", (12, 0, 0), neighbors=[3]),
        ],
        start=0,
        goal=3,
    )


@pytest.fixture
def priority_graph() -> Graph:
    """A lists [B, C, D, E] with priorities 1, 5, 3, 5."""
    return Graph([
        Vertex("A", priority=0, neighbors=[1, 2, 3, 4]),
        Vertex("B", priority=1),
        Vertex("C", priority=5),
        Vertex("D", priority=3),
        Vertex("E", priority=5),
    ])
