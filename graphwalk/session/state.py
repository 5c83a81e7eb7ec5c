"""
Session record dataclasses for tracking traversal progress.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class StepRecord:
    """
    Records a single step (click) of a traversal.

    Attributes:
        step_number: 1-indexed step number within the current run
        outcome: StepOutcome value ("visited", "already_seen", ...)
        vertex: Name of the popped vertex (None if nothing was popped)
        frontier: Frontier member names after the step, in display order
        restarted_from: Vertex pushed to continue into another component
    """

    step_number: int
    outcome: str
    vertex: str | None
    frontier: list[str]
    restarted_from: str | None = None


@dataclass
class SessionResult:
    """
    Summary of a traversal run.

    Attributes:
        algorithm: Algorithm identifier
        visit_order: Vertex names in the order they were visited
        steps: Detailed record of each step
        finished: Whether the search reached the finished state
        total_steps: Number of steps taken
        timestamp: When the result was produced
    """

    algorithm: str
    visit_order: list[str]
    steps: list[StepRecord]
    finished: bool
    total_steps: int
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class SessionState:
    """
    Mutable step log for the current run (cleared on reset/switch).
    """

    algorithm: str
    steps: list[StepRecord] = field(default_factory=list)

    @property
    def step_count(self) -> int:
        """Number of steps recorded so far."""
        return len(self.steps)

    def record_step(
        self,
        outcome: str,
        vertex: str | None,
        frontier: list[str],
        restarted_from: str | None = None,
    ) -> StepRecord:
        """Append a step record and return it."""
        record = StepRecord(
            step_number=len(self.steps) + 1,
            outcome=outcome,
            vertex=vertex,
            frontier=frontier,
            restarted_from=restarted_from,
        )
        self.steps.append(record)
        return record

    def to_result(self, visit_order: list[str], finished: bool) -> SessionResult:
        """Convert to a SessionResult snapshot."""
        return SessionResult(
            algorithm=self.algorithm,
            visit_order=list(visit_order),
            steps=list(self.steps),
            finished=finished,
            total_steps=self.step_count,
        )
