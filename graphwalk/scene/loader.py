"""
Scene file loading.

A scene is one document describing the authored vertices, stored as JSON
(.json) or msgpack (.msgpack):

    {
        "start": "a",
        "goal": "d",
        "vertices": [
            {"id": "a", "name": "A", "position": [0, 0, 0],
             "priority": 1, "neighbors": ["b", 2]},
            ...
        ]
    }

Vertex references (neighbors, start, goal) are list indices or strings;
strings match a vertex "id" first, then its "name".

Usage:
    from graphwalk.scene import load_scene

    graph = load_scene("data/scenes/example.json")
    graph.initialize()
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import msgpack

from graphwalk.config import SCENE_EXTENSIONS
from graphwalk.graph import Graph, Vertex

logger = logging.getLogger(__name__)


class SceneError(ValueError):
    """Raised when a scene document is malformed or cannot be resolved."""


def load_scene(path: str | Path) -> Graph:
    """
    Load a scene file into an (uninitialized) Graph.

    Args:
        path: Path to a .json or .msgpack scene

    Returns:
        Graph with vertices, adjacency and start/goal resolved

    Raises:
        FileNotFoundError: If the file does not exist
        SceneError: If the extension is unknown or the document is invalid
    """
    path = Path(path)
    if path.suffix not in SCENE_EXTENSIONS:
        raise SceneError(
            f"Unsupported scene format '{path.suffix}'. Expected one of: {', '.join(SCENE_EXTENSIONS)}"
        )

    logger.info(f"Loading scene from {path}...")
    try:
        if path.suffix == ".msgpack":
            with open(path, "rb") as f:
                data = msgpack.load(f)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
    except (json.JSONDecodeError, msgpack.UnpackException, ValueError) as e:
        raise SceneError(f"Could not decode scene {path}: {e}") from e

    graph = parse_scene(data)
    logger.info(f"Loaded {len(graph):,} vertices from {path.name}")
    return graph


def parse_scene(data: Mapping[str, Any]) -> Graph:
    """
    Build a Graph from a decoded scene document.

    Raises:
        SceneError: If the document structure or a reference is invalid
    """
    if not isinstance(data, Mapping):
        raise SceneError("Scene document must be a mapping")

    entries = data.get("vertices") or []
    if not isinstance(entries, list):
        raise SceneError("'vertices' must be a list")

    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise SceneError(f"Vertex #{i} must be a mapping")

    lookup = _build_lookup(entries)
    vertices = []

    for i, entry in enumerate(entries):
        neighbors = entry.get("neighbors") or []
        if not isinstance(neighbors, list):
            raise SceneError(f"Vertex #{i}: 'neighbors' must be a list")

        priority = entry.get("priority")
        if priority is not None and not isinstance(priority, int):
            raise SceneError(f"Vertex #{i}: 'priority' must be an integer")

        vertices.append(Vertex(
            name=entry.get("name"),
            position=_parse_position(entry.get("position"), i),
            priority=priority,
            neighbors=[_resolve(ref, lookup, len(entries), f"vertex #{i} neighbor") for ref in neighbors],
        ))

    start = data.get("start")
    goal = data.get("goal")

    return Graph(
        vertices,
        start=None if start is None else _resolve(start, lookup, len(entries), "start"),
        goal=None if goal is None else _resolve(goal, lookup, len(entries), "goal"),
    )


def _build_lookup(entries: list[Mapping[str, Any]]) -> dict[str, int]:
    """Map ids (preferred) and names to vertex indices."""
    lookup: dict[str, int] = {}
    for i, entry in enumerate(entries):
        name = entry.get("name")
        if isinstance(name, str) and name.strip():
            lookup.setdefault(name, i)
    for i, entry in enumerate(entries):
        vertex_id = entry.get("id")
        if vertex_id is not None:
            lookup[str(vertex_id)] = i
    return lookup


def _resolve(ref: Any, lookup: dict[str, int], count: int, what: str) -> int:
    if isinstance(ref, bool):
        raise SceneError(f"Invalid {what} reference: {ref!r}")
    if isinstance(ref, int):
        if 0 <= ref < count:
            return ref
        raise SceneError(f"{what.capitalize()} index {ref} out of range (0-{count - 1})")
    if isinstance(ref, str) and ref in lookup:
        return lookup[ref]
    raise SceneError(f"Unknown {what} reference: {ref!r}")


def _parse_position(raw: Any, index: int) -> tuple[float, float, float]:
    if raw is None:
        return (0.0, 0.0, 0.0)
    if not isinstance(raw, (list, tuple)) or not 2 <= len(raw) <= 3:
        raise SceneError(f"Vertex #{index}: 'position' must be [x, y] or [x, y, z]")
    try:
        coords = [float(c) for c in raw]
    except (TypeError, ValueError) as e:
        raise SceneError(f"Vertex #{index}: non-numeric position {raw!r}") from e
    if len(coords) == 2:
        coords.append(0.0)
    return (coords[0], coords[1], coords[2])
