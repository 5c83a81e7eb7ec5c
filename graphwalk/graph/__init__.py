"""
Graph model module.

Provides the scene graph data model:
- Vertex: Authored vertex (name, position, priority, adjacency)
- Edge: Undirected edge derived from adjacency lists
- Graph: Vertex arena with start/goal designation
"""

from graphwalk.graph.model import Edge, Graph, Position, Vertex

__all__ = [
    "Edge",
    "Graph",
    "Position",
    "Vertex",
]
