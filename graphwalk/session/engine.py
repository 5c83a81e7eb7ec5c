"""
Session engine driving a traversal from discrete input events.

Replaces a per-frame update loop: a driver (console prompt, UI button,
test) feeds STEP / RESET / SWITCH events and the engine keeps the
traversal, the scene view, and the step log in sync.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from graphwalk.config import MAX_AUTO_STEPS
from graphwalk.graph import Graph
from graphwalk.search import Algorithm, SearchState, StepOutcome, StepResult, Traversal
from graphwalk.session.state import SessionResult, SessionState
from graphwalk.view import SceneView, VertexColor

logger = logging.getLogger(__name__)


class InputEvent(str, Enum):
    """Discrete driver inputs."""

    STEP = "step"      # Mouse click: advance one step
    RESET = "reset"    # Reset colors and restart the search
    SWITCH = "switch"  # Cycle to the next algorithm


class TraversalEngine:
    """
    Runs a step-by-step traversal over a scene graph.

    The engine handles:
    - Graph initialization (names, edges) and view setup (labels, lines)
    - Recoloring vertices from each step's outcome
    - Refreshing the frontier status text
    - Recording steps for the current run
    """

    def __init__(
        self,
        graph: Graph,
        algorithm: Algorithm | str = Algorithm.BFS,
        view: SceneView | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            graph: Scene graph to traverse
            algorithm: Initial traversal mode
            view: Rendering side table (a fresh SceneView by default)
        """
        self._graph = graph
        self._traversal = Traversal(graph, algorithm)
        self._view = view if view is not None else SceneView()
        self._session = SessionState(algorithm=self._traversal.algorithm.value)
        self._last_visited: int | None = None
        self._started = False

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def traversal(self) -> Traversal:
        return self._traversal

    @property
    def view(self) -> SceneView:
        return self._view

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def algorithm(self) -> Algorithm:
        return self._traversal.algorithm

    @property
    def state(self) -> SearchState:
        return self._traversal.state

    def start(self) -> bool:
        """
        Build the scene and start the first search.

        Returns:
            True if a search started
        """
        self._graph.initialize()
        self._view.attach_labels(self._graph)
        self._view.place_edges(self._graph)
        self._started = True
        return self._restart()

    def step(self) -> StepResult:
        """Advance one traversal step and update the view."""
        self._ensure_started()
        result = self._traversal.step()

        if result.vertex is not None:
            if result.outcome is StepOutcome.ALREADY_SEEN:
                self._view.set_color(result.vertex, VertexColor.ALREADY_SEEN)
            else:
                if self._last_visited is not None:
                    self._view.set_color(self._last_visited, VertexColor.VISITED)
                self._view.set_color(result.vertex, VertexColor.VISITING)
                self._last_visited = result.vertex

        if result.outcome is not StepOutcome.NONE or result.restarted_from is not None:
            self._session.record_step(
                outcome=result.outcome.value,
                vertex=None if result.vertex is None else self._graph.name_of(result.vertex),
                frontier=self._traversal.frontier_names(),
                restarted_from=(
                    None if result.restarted_from is None
                    else self._graph.name_of(result.restarted_from)
                ),
            )

        self._refresh_status()
        return result

    def reset(self) -> bool:
        """Restore neutral colors and restart the search."""
        self._ensure_started()
        self._traversal.reset()
        return self._restart()

    def switch_algorithm(self, algorithm: Algorithm | str | None = None) -> Algorithm:
        """Cycle (or set) the algorithm and restart the search under it."""
        self._ensure_started()
        self._traversal.switch_algorithm(algorithm)
        self._restart(initialize=False)
        return self._traversal.algorithm

    def rename_vertex(self, index: int, name: str) -> None:
        """Rename a vertex and refresh its label (blank names are ignored)."""
        self._graph.rename(index, name)
        self._view.refresh_label(index, self._graph.name_of(index))
        self._refresh_status()

    def handle(self, event: InputEvent | str) -> StepResult | None:
        """
        Dispatch one input event.

        Returns:
            The StepResult for STEP events, otherwise None
        """
        event = InputEvent(event)
        if event is InputEvent.STEP:
            return self.step()
        if event is InputEvent.RESET:
            self.reset()
        elif event is InputEvent.SWITCH:
            self.switch_algorithm()
        return None

    def run(self, events: Iterable[InputEvent | str]) -> SessionResult:
        """Dispatch a sequence of events and return the resulting run summary."""
        for event in events:
            self.handle(event)
        return self.result()

    def run_to_completion(self, max_steps: int = MAX_AUTO_STEPS) -> SessionResult:
        """
        Step until the search finishes or max_steps is reached.

        Args:
            max_steps: Maximum number of steps to take

        Returns:
            SessionResult for the current run
        """
        self._ensure_started()
        steps = 0
        while self.state is SearchState.SEARCHING and steps < max_steps:
            self.step()
            steps += 1

        if self.state is SearchState.SEARCHING:
            logger.warning(f"Stopped after {steps} steps without finishing")
        return self.result()

    def result(self) -> SessionResult:
        """Snapshot of the current run."""
        return self._session.to_result(
            visit_order=self._traversal.visited_names(),
            finished=self.state is SearchState.FINISHED,
        )

    def _ensure_started(self) -> None:
        if not self._started:
            self.start()

    def _restart(self, initialize: bool = True) -> bool:
        self._view.reset_colors()
        self._last_visited = None
        self._session = SessionState(algorithm=self._traversal.algorithm.value)
        if initialize:
            self._traversal.initialize()
        self._refresh_status()
        return self.state is SearchState.SEARCHING

    def _refresh_status(self) -> None:
        self._view.set_status(self._traversal.describe_frontier())
