"""
Scene graph dataclasses: vertices, derived edges, and the graph arena.

Vertices are addressed by their index in the graph's vertex list. Adjacency
lists, the start/goal designation, and edges all refer to vertices by index,
so the model carries no rendering state of its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)

Position = tuple[float, float, float]


@dataclass
class Vertex:
    """
    A hand-authored scene vertex.

    Attributes:
        name: Display name (blank names get an ordinal on initialization)
        position: Scene position (x, y, z)
        priority: Optional priority used by priority BFS
        neighbors: Indices of adjacent vertices, in authored order
    """

    name: str | None = None
    position: Position = (0.0, 0.0, 0.0)
    priority: int | None = None
    neighbors: list[int] = field(default_factory=list)

    @property
    def has_name(self) -> bool:
        """Whether an authored (non-blank) name is present."""
        return bool(self.name and self.name.strip())


@dataclass(frozen=True)
class Edge:
    """
    An undirected edge synthesized from adjacency lists.

    Only used for rendering; traversal reads adjacency lists directly.
    """

    name: str
    first: int
    second: int

    @property
    def pair(self) -> frozenset[int]:
        """Unordered endpoint pair."""
        return frozenset((self.first, self.second))


class Graph:
    """
    Arena of scene vertices with an optional start/goal designation.

    Attributes:
        vertices: All vertices, in declaration order
        start: Index of the designated start vertex (or None)
        goal: Index of the designated goal vertex (or None)
        edges: Edges synthesized by build_edges()
    """

    def __init__(
        self,
        vertices: list[Vertex] | None = None,
        start: int | None = None,
        goal: int | None = None,
    ) -> None:
        self.vertices: list[Vertex] = list(vertices or [])
        self.start = start
        self.goal = goal
        self.edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __getitem__(self, index: int) -> Vertex:
        return self.vertices[index]

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)})"

    def initialize(self) -> None:
        """Name unnamed vertices, then synthesize edges."""
        self.assign_names()
        self.build_edges()
        logger.info("Vertices initialized.")

    def assign_names(self) -> None:
        """Give every unnamed vertex an ordinal name ("Vertex N", 1-based)."""
        for i, vertex in enumerate(self.vertices):
            if not vertex.has_name:
                vertex.name = f"Vertex {i + 1}"

    def build_edges(self) -> list[Edge]:
        """
        Create one edge per connected unordered pair.

        An edge between A and B is created once even when both list the
        other as a neighbor. Self-references produce no edge.

        Returns:
            The synthesized edges (also stored on the graph)
        """
        self.edges = []
        seen: set[frozenset[int]] = set()

        for i in range(len(self.vertices)):
            for j in self.neighbors(i):
                if i == j:
                    logger.debug(f"Skipping self-reference on '{self.name_of(i)}'")
                    continue
                pair = frozenset((i, j))
                if pair in seen:
                    continue
                seen.add(pair)
                self.edges.append(
                    Edge(f"Edge {self.name_of(i)}-{self.name_of(j)}", i, j)
                )

        logger.debug(f"Built {len(self.edges)} edges")
        return self.edges

    def neighbors(self, index: int) -> list[int]:
        """Adjacency list of a vertex; missing lists mean no neighbors."""
        return self.vertices[index].neighbors or []

    def name_of(self, index: int) -> str:
        """Display name of a vertex (falls back to its ordinal)."""
        vertex = self.vertices[index]
        return vertex.name if vertex.has_name else f"Vertex {index + 1}"

    def find(self, name: str) -> int | None:
        """Return the index of the first vertex with this name, or None."""
        for i, vertex in enumerate(self.vertices):
            if vertex.name == name:
                return i
        return None

    def rename(self, index: int, name: str) -> None:
        """Change a vertex name. Blank names are ignored."""
        if name and name.strip():
            self.vertices[index].name = name

    def asymmetric_links(self) -> list[tuple[int, int]]:
        """Links (a, b) where a lists b but b does not list a."""
        return [
            (i, j)
            for i in range(len(self.vertices))
            for j in self.neighbors(i)
            if i != j and i not in self.neighbors(j)
        ]

    def stats(self) -> dict[str, int]:
        """Summary counts for the scene."""
        return {
            "vertices": len(self.vertices),
            "edges": len(self.edges),
            "named_vertices": sum(1 for v in self.vertices if v.has_name),
            "prioritized_vertices": sum(1 for v in self.vertices if v.priority is not None),
            "asymmetric_links": len(self.asymmetric_links()),
        }

    def validate(self) -> dict[str, bool]:
        """Run consistency checks; each entry is True when the check passes."""
        count = len(self.vertices)

        def in_range(index: int | None) -> bool:
            return index is None or 0 <= index < count

        return {
            "neighbors_in_range": all(
                in_range(j) for i in range(count) for j in self.neighbors(i)
            ),
            "start_in_range": in_range(self.start),
            "goal_in_range": in_range(self.goal),
            "all_vertices_named": all(v.has_name for v in self.vertices),
        }

    def distance(self, a: int, b: int) -> float:
        """Euclidean distance between two vertex positions."""
        pa = np.asarray(self.vertices[a].position, dtype=float)
        pb = np.asarray(self.vertices[b].position, dtype=float)
        return float(np.linalg.norm(pa - pb))
