"""
Single-step traversal state machine.

Each call to Traversal.step() performs exactly one pop-visit-expand cycle,
so an external driver (console loop, UI button, test) can advance the
search one click at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from graphwalk.search.algorithms import Algorithm, get_algorithm
from graphwalk.search.frontier import FifoFrontier, Frontier, create_frontier

if TYPE_CHECKING:
    from graphwalk.graph import Graph

logger = logging.getLogger(__name__)


class SearchState(str, Enum):
    """Lifecycle of a traversal run."""

    IDLE = "idle"
    SEARCHING = "searching"
    FINISHED = "finished"


class StepOutcome(str, Enum):
    """What a single step did."""

    NONE = "none"                  # Not searching; nothing happened
    VISITED = "visited"            # Vertex visited and expanded
    ALREADY_SEEN = "already_seen"  # Popped vertex was already visited
    GOAL_REACHED = "goal_reached"  # Goal visited; search halted


@dataclass
class StepResult:
    """
    Outcome of one Traversal.step() call.

    Attributes:
        outcome: What the step did
        vertex: Index of the popped vertex (None if nothing was popped)
        discovered: Neighbors pushed onto the frontier by this step
        restarted_from: Vertex pushed to continue into a new component
        state: Search state after the step
    """

    outcome: StepOutcome
    vertex: int | None = None
    discovered: list[int] = field(default_factory=list)
    restarted_from: int | None = None
    state: SearchState = SearchState.IDLE


class Traversal:
    """
    Explicit traversal state: frontier, visited set, and search state.

    The traversal never touches rendering; callers read the returned
    StepResult and recolor whatever they render.
    """

    def __init__(self, graph: Graph, algorithm: Algorithm | str = Algorithm.BFS) -> None:
        """
        Initialize the traversal in the idle state.

        Args:
            graph: Graph to traverse (names/edges need not be built)
            algorithm: Active traversal mode
        """
        self._graph = graph
        self._algorithm = get_algorithm(algorithm)
        self._frontier: Frontier = FifoFrontier()
        self._visited: dict[int, None] = {}  # insertion-ordered set
        self._state = SearchState.IDLE

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def frontier(self) -> Frontier:
        return self._frontier

    @property
    def visited(self) -> tuple[int, ...]:
        """Visited vertex indices in visit order."""
        return tuple(self._visited)

    def is_visited(self, index: int) -> bool:
        return index in self._visited

    def visited_names(self) -> list[str]:
        return [self._graph.name_of(i) for i in self._visited]

    def frontier_names(self) -> list[str]:
        return [self._graph.name_of(i) for i in self._frontier]

    def describe_frontier(self) -> str:
        """Status line such as 'Queue: A, B' or 'Stack: C'."""
        return f"{self._algorithm.frontier_label}: {', '.join(self.frontier_names())}"

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(self) -> bool:
        """
        Clear state and push the start vertex.

        Non-goal modes start from the designated start vertex, or the first
        vertex when none is designated. Greedy search needs both a start and
        a goal; without them the traversal stays idle.

        Returns:
            True if the search started
        """
        self.reset(quiet=True)

        start = self._choose_start()
        if start is None:
            return False

        self._frontier = create_frontier(self._algorithm, self._graph)
        self._frontier.push(start)
        self._state = SearchState.SEARCHING
        logger.info(f"Search started ({self._algorithm.label}) from '{self._graph.name_of(start)}'.")
        return True

    def step(self) -> StepResult:
        """
        Perform one pop-visit-expand cycle.

        Returns:
            StepResult describing the cycle (outcome NONE when not searching)
        """
        if self._state is not SearchState.SEARCHING:
            return StepResult(StepOutcome.NONE, state=self._state)

        if not self._frontier:
            restarted = self._continue_or_finish()
            return StepResult(StepOutcome.NONE, restarted_from=restarted, state=self._state)

        current = self._frontier.pop()
        name = self._graph.name_of(current)

        if current in self._visited:
            logger.debug(f"Already visited: {name}")
            result = StepResult(StepOutcome.ALREADY_SEEN, vertex=current)
        else:
            self._visited[current] = None
            logger.info(f"Visiting: {name}")

            if self._algorithm.is_goal_directed and current == self._graph.goal:
                logger.info(f"Goal reached: {name}")
                self._finish()
                return StepResult(StepOutcome.GOAL_REACHED, vertex=current, state=self._state)

            result = StepResult(StepOutcome.VISITED, vertex=current, discovered=self._expand(current))

        if not self._frontier:
            result.restarted_from = self._continue_or_finish()
        result.state = self._state
        return result

    def reset(self, quiet: bool = False) -> None:
        """Clear frontier and visited set and return to idle."""
        self._frontier.clear()
        self._visited.clear()
        self._state = SearchState.IDLE
        if not quiet:
            logger.info("Graph reset.")

    def switch_algorithm(self, algorithm: Algorithm | str | None = None) -> Algorithm:
        """
        Switch to another algorithm and restart the search under it.

        Args:
            algorithm: Algorithm to switch to (default: next in the cycle)

        Returns:
            The newly active algorithm
        """
        self._algorithm = (
            self._algorithm.next() if algorithm is None else get_algorithm(algorithm)
        )
        logger.info(f"Switching to {self._algorithm.label}")
        self.initialize()
        return self._algorithm

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _choose_start(self) -> int | None:
        graph = self._graph
        if len(graph) == 0:
            logger.debug("Empty graph; nothing to search")
            return None

        if self._algorithm.is_goal_directed:
            if graph.start is None or graph.goal is None:
                logger.debug("Goal-directed search needs a start and a goal; staying idle")
                return None
            return graph.start

        return graph.start if graph.start is not None else 0

    def _expand(self, index: int) -> list[int]:
        discovered = []
        for neighbor in self._graph.neighbors(index):
            if neighbor in self._visited or neighbor in self._frontier:
                continue
            self._frontier.push(neighbor)
            discovered.append(neighbor)
        return discovered

    def _continue_or_finish(self) -> int | None:
        """Restart from the next unvisited vertex, or finish."""
        if not self._algorithm.is_goal_directed:
            for i in range(len(self._graph)):
                if i not in self._visited:
                    logger.info(
                        f"Found unvisited vertex: {self._graph.name_of(i)}. Continuing search..."
                    )
                    self._frontier.push(i)
                    return i
        else:
            logger.info("Goal not reachable from start.")

        self._finish()
        return None

    def _finish(self) -> None:
        self._state = SearchState.FINISHED
        logger.info("Search finished.")
