"""
Graph Walk.

Step-by-step visualization of graph traversal (BFS, priority BFS, DFS
and greedy goal-directed search) over hand-authored scene graphs.
"""

__version__ = "0.1.0"
