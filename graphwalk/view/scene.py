"""
Rendering side table for a scene graph.

Labels, colors and edge lines live here, keyed by vertex/edge index, so the
graph model and traversal stay free of rendering state. Every update is
guarded: a missing label, vertex, or status surface is silently skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from graphwalk.config import (
    COLOR_ALREADY_SEEN,
    COLOR_NEUTRAL,
    COLOR_VISITED,
    COLOR_VISITING,
    EDGE_COLOR,
    EDGE_WIDTH,
    LABEL_COLOR,
    LABEL_FONT_SIZE,
    LABEL_OFFSET,
)

if TYPE_CHECKING:
    from graphwalk.graph import Graph, Position

logger = logging.getLogger(__name__)


class VertexColor(str, Enum):
    """Display colors for vertex traversal states."""

    NEUTRAL = COLOR_NEUTRAL
    VISITING = COLOR_VISITING
    VISITED = COLOR_VISITED
    ALREADY_SEEN = COLOR_ALREADY_SEEN


@dataclass
class Label:
    """Text label placed relative to its vertex."""

    text: str
    offset: Position = LABEL_OFFSET
    font_size: int = LABEL_FONT_SIZE
    color: str = LABEL_COLOR


@dataclass
class Line:
    """Rendered line segment for an edge."""

    start: Position
    end: Position
    width: int = EDGE_WIDTH
    color: str = EDGE_COLOR


class SceneView:
    """
    Per-vertex and per-edge rendering state for one graph.

    Attributes:
        labels: Vertex index -> Label
        colors: Vertex index -> VertexColor
        lines: Edge index -> Line
        status: Frontier status text (None when there is no status surface)
    """

    def __init__(self, status_surface: bool = True) -> None:
        self.labels: dict[int, Label] = {}
        self.colors: dict[int, VertexColor] = {}
        self.lines: dict[int, Line] = {}
        self.status: str | None = "" if status_surface else None

    def attach_labels(self, graph: Graph) -> None:
        """Create a label for every vertex and give all vertices the neutral color."""
        self.labels = {i: Label(graph.name_of(i)) for i in range(len(graph))}
        self.colors = {i: VertexColor.NEUTRAL for i in range(len(graph))}

    def place_edges(self, graph: Graph) -> None:
        """Position one line per synthesized edge between its endpoints."""
        self.lines = {
            i: Line(graph[edge.first].position, graph[edge.second].position)
            for i, edge in enumerate(graph.edges)
        }

    def set_color(self, index: int, color: VertexColor) -> None:
        if index not in self.colors:
            return
        self.colors[index] = color

    def reset_colors(self) -> None:
        for index in self.colors:
            self.colors[index] = VertexColor.NEUTRAL

    def refresh_label(self, index: int, text: str | None) -> None:
        """Update a label's text (skipped if there is no label or no text)."""
        label = self.labels.get(index)
        if label is None or not text:
            return
        label.text = text

    def set_status(self, text: str) -> None:
        if self.status is None:
            return
        self.status = text

    def color_of(self, index: int) -> VertexColor | None:
        return self.colors.get(index)

    def label_position(self, graph: Graph, index: int) -> Position:
        """Absolute scene position of a vertex label."""
        x, y, z = graph[index].position
        dx, dy, dz = self.labels[index].offset if index in self.labels else LABEL_OFFSET
        return (x + dx, y + dy, z + dz)
