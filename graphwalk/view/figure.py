"""
Plotly rendering of a scene graph and its side table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import plotly.graph_objects as go

from graphwalk.config import FIGURE_HEIGHT, VERTEX_MARKER_SIZE
from graphwalk.view.scene import VertexColor

if TYPE_CHECKING:
    from graphwalk.graph import Graph
    from graphwalk.view.scene import SceneView


def build_scene_figure(graph: Graph, view: SceneView, title: str | None = None) -> go.Figure:
    """
    Draw edges as lines, vertices as colored markers, and labels as text.

    Uses the x/y plane of the scene positions.
    """
    fig = go.Figure()

    for line in view.lines.values():
        fig.add_trace(go.Scatter(
            x=[line.start[0], line.end[0]],
            y=[line.start[1], line.end[1]],
            mode="lines",
            line=dict(color=line.color, width=line.width),
            hoverinfo="skip",
            showlegend=False,
        ))

    indices = list(range(len(graph)))
    names = [graph.name_of(i) for i in indices]
    colors = [(view.color_of(i) or VertexColor.NEUTRAL).value for i in indices]

    fig.add_trace(go.Scatter(
        x=[graph[i].position[0] for i in indices],
        y=[graph[i].position[1] for i in indices],
        mode="markers",
        marker=dict(size=VERTEX_MARKER_SIZE, color=colors, line=dict(width=1, color="#2c3e50")),
        text=names,
        hovertemplate="<b>%{text}</b><extra></extra>",
        showlegend=False,
    ))

    labelled = [i for i in indices if i in view.labels]
    if labelled:
        positions = [view.label_position(graph, i) for i in labelled]
        fig.add_trace(go.Scatter(
            x=[p[0] for p in positions],
            y=[p[1] for p in positions],
            mode="text",
            text=[view.labels[i].text for i in labelled],
            textfont=dict(
                size=[view.labels[i].font_size for i in labelled],
                color=[view.labels[i].color for i in labelled],
            ),
            hoverinfo="skip",
            showlegend=False,
        ))

    fig.update_layout(
        title=title,
        height=FIGURE_HEIGHT,
        margin=dict(t=35 if title else 10, b=10, l=10, r=10),
        plot_bgcolor="#1e1e1e",
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x"),
    )
    return fig
