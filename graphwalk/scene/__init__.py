"""
Scene loading module.

Provides loading of authored scene files (JSON or msgpack).

Usage:
    from graphwalk.scene import load_scene

    graph = load_scene("data/scenes/example.json")
"""

from graphwalk.scene.loader import SceneError, load_scene, parse_scene

__all__ = ["SceneError", "load_scene", "parse_scene"]
