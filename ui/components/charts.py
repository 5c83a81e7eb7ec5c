"""
Plotly chart components for the walker page.
"""

import plotly.graph_objects as go

from graphwalk.session import SessionResult


def create_frontier_chart(result: SessionResult) -> go.Figure:
    """Bar chart of frontier size after each step."""
    steps = [s.step_number for s in result.steps]
    sizes = [len(s.frontier) for s in result.steps]
    colors = ["#95a5a6" if s.outcome == "already_seen" else "#e74c3c" for s in result.steps]
    hover = [s.vertex or "-" for s in result.steps]

    fig = go.Figure(data=[
        go.Bar(
            x=steps,
            y=sizes,
            marker_color=colors,
            text=hover,
            hovertemplate="Step %{x}: %{text}<br>Frontier: %{y}<extra></extra>",
        )
    ])

    fig.update_layout(
        title="Frontier size",
        xaxis_title="Step",
        yaxis_title="Vertices",
        showlegend=False,
        height=240,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig
