"""
View module.

Provides rendering state kept beside the graph model:
- SceneView: Labels, colors, edge lines and status text keyed by index
- VertexColor: Neutral / visiting / visited / already-seen colors
- build_scene_figure: Plotly rendering of a SceneView
"""

from graphwalk.view.figure import build_scene_figure
from graphwalk.view.scene import Label, Line, SceneView, VertexColor

__all__ = [
    "Label",
    "Line",
    "SceneView",
    "VertexColor",
    "build_scene_figure",
]
