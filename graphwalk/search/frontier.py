"""
Frontier containers for the open set of discovered-but-unvisited vertices.

All frontiers hold vertex indices and iterate in insertion order, which is
the order shown in the status text. They differ only in which member
pop() removes.
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING

from graphwalk.heuristics import goal_distance_key, priority_key
from graphwalk.search.algorithms import Algorithm

if TYPE_CHECKING:
    from graphwalk.graph import Graph
    from graphwalk.heuristics.keys import KeyFunc


class Frontier(ABC):
    """
    Abstract base class for traversal frontiers.

    Subclasses decide the pop order; membership and insertion-order
    iteration are shared.
    """

    label: str = "Queue"

    @abstractmethod
    def push(self, index: int) -> None:
        """Add a vertex to the frontier."""
        ...

    @abstractmethod
    def pop(self) -> int:
        """
        Remove and return the next vertex.

        Raises:
            IndexError: If the frontier is empty
        """
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    def __contains__(self, index: object) -> bool:
        return any(member == index for member in self)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"


class FifoFrontier(Frontier):
    """First-in first-out queue (plain BFS)."""

    label = "Queue"

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, index: int) -> None:
        self._items.append(index)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty frontier")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


class LifoFrontier(Frontier):
    """Last-in first-out stack (DFS)."""

    label = "Stack"

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, index: int) -> None:
        self._items.append(index)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty frontier")
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


class PriorityFrontier(Frontier):
    """
    Binary-heap frontier ordered by a key function (smallest key first).

    Equal keys pop in insertion order. Keys are computed once, on push.
    """

    label = "Queue"

    def __init__(self, key: KeyFunc) -> None:
        self._key = key
        self._heap: list[tuple[float, int, int]] = []
        self._members: dict[int, int] = {}  # index -> insertion sequence
        self._counter = itertools.count()

    def push(self, index: int) -> None:
        seq = next(self._counter)
        heapq.heappush(self._heap, (self._key(index), seq, index))
        self._members[index] = seq

    def pop(self) -> int:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        _, seq, index = heapq.heappop(self._heap)
        if self._members.get(index) == seq:
            del self._members[index]
        return index

    def __contains__(self, index: object) -> bool:
        return index in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members, key=self._members.__getitem__))

    def __len__(self) -> int:
        return len(self._heap)

    def clear(self) -> None:
        self._heap.clear()
        self._members.clear()


def create_frontier(algorithm: Algorithm, graph: Graph) -> Frontier:
    """
    Build the frontier matching an algorithm's ordering rule.

    Args:
        algorithm: Active traversal mode
        graph: Graph whose priorities/positions drive priority ordering

    Returns:
        An empty frontier

    Raises:
        ValueError: If a goal-directed frontier is requested without a goal
    """
    if algorithm is Algorithm.BFS:
        return FifoFrontier()
    if algorithm is Algorithm.DFS:
        return LifoFrontier()
    if algorithm is Algorithm.PRIORITY_BFS:
        return PriorityFrontier(priority_key(graph))
    if algorithm is Algorithm.GREEDY:
        if graph.goal is None:
            raise ValueError("Greedy search requires a goal vertex")
        return PriorityFrontier(goal_distance_key(graph, graph.goal))
    raise ValueError(f"Unsupported algorithm: {algorithm!r}")
