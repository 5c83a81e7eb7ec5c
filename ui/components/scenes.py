"""
Scene helpers for the Streamlit pages.
"""

from pathlib import Path

import streamlit as st

from graphwalk.config import get_scene_files
from graphwalk.scene import load_scene
from graphwalk.search import Algorithm
from graphwalk.session import TraversalEngine


@st.cache_data(ttl=60)
def list_scenes() -> list[str]:
    """Paths of authored scenes, as strings (cache-friendly)."""
    return [str(path) for path in get_scene_files()]


def new_engine(scene_path: str, algorithm: Algorithm) -> TraversalEngine:
    """Load a scene fresh and start a session on it."""
    engine = TraversalEngine(load_scene(Path(scene_path)), algorithm)
    engine.start()
    return engine


def get_engine() -> TraversalEngine | None:
    """Engine stored in session state, if any."""
    return st.session_state.get("engine")
