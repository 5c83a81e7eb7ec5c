"""
Heuristics module.

Provides ordering keys for the priority-based frontiers:
- priority_key: Highest declared priority first
- goal_distance_key: Nearest (Euclidean) to the goal first
"""

from graphwalk.heuristics.keys import goal_distance_key, priority_key

__all__ = [
    "goal_distance_key",
    "priority_key",
]
