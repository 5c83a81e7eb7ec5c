"""
Search module.

Provides the single-step traversal machinery:
- Algorithm: Traversal modes and the switch cycle
- Frontier: FIFO, LIFO and priority containers for the open set
- Traversal: State machine with initialize/step/reset/switch_algorithm
"""

from graphwalk.search.algorithms import Algorithm, get_algorithm
from graphwalk.search.frontier import (
    FifoFrontier,
    Frontier,
    LifoFrontier,
    PriorityFrontier,
    create_frontier,
)
from graphwalk.search.traversal import SearchState, StepOutcome, StepResult, Traversal

__all__ = [
    "Algorithm",
    "get_algorithm",
    "Frontier",
    "FifoFrontier",
    "LifoFrontier",
    "PriorityFrontier",
    "create_frontier",
    "SearchState",
    "StepOutcome",
    "StepResult",
    "Traversal",
]
