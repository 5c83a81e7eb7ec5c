"""
Ordering keys for priority frontiers.

A key function maps a vertex index to a sortable value; the frontier pops
the smallest key first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from graphwalk.config import DEFAULT_PRIORITY

if TYPE_CHECKING:
    from graphwalk.graph import Graph

KeyFunc = Callable[[int], float]


def priority_key(graph: Graph) -> KeyFunc:
    """Key that pops the highest declared priority first."""

    def key(index: int) -> float:
        priority = graph[index].priority
        return -(DEFAULT_PRIORITY if priority is None else priority)

    return key


def goal_distance_key(graph: Graph, goal: int) -> KeyFunc:
    """
    Key that pops the vertex nearest to the goal first.

    This is straight-line distance only, with no path cost, so the search
    it drives is greedy best-first rather than A*.
    """

    def key(index: int) -> float:
        return graph.distance(index, goal)

    return key
