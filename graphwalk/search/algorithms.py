"""
Traversal algorithm identifiers and the switch cycle.
"""

from __future__ import annotations

from enum import Enum


class Algorithm(str, Enum):
    """
    Available traversal modes.

    The value is the CLI/config identifier. Switching cycles through the
    members in declaration order.
    """

    BFS = "bfs"
    PRIORITY_BFS = "priority-bfs"
    DFS = "dfs"
    GREEDY = "greedy"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return _LABELS[self]

    @property
    def frontier_label(self) -> str:
        """'Stack' for DFS, 'Queue' for the BFS family."""
        return "Stack" if self is Algorithm.DFS else "Queue"

    @property
    def is_goal_directed(self) -> bool:
        """Whether this mode needs a start/goal pair and halts on the goal."""
        return self is Algorithm.GREEDY

    def next(self) -> Algorithm:
        """The algorithm that follows this one in the switch cycle."""
        members = list(Algorithm)
        return members[(members.index(self) + 1) % len(members)]


_LABELS = {
    Algorithm.BFS: "BFS",
    Algorithm.PRIORITY_BFS: "Priority BFS",
    Algorithm.DFS: "DFS",
    Algorithm.GREEDY: "Greedy best-first",
}


def get_algorithm(name: str | Algorithm) -> Algorithm:
    """
    Get an algorithm by identifier.

    Args:
        name: Algorithm identifier (bfs, priority-bfs, dfs, greedy)

    Returns:
        The matching Algorithm

    Raises:
        ValueError: If the identifier is unknown
    """
    if isinstance(name, Algorithm):
        return name

    try:
        return Algorithm(name.strip().lower())
    except ValueError:
        available = ", ".join(a.value for a in Algorithm)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}") from None
