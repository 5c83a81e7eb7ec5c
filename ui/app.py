"""
Graph Walk
"""

import streamlit as st

st.set_page_config(page_title="Graph Walk", page_icon="🔗", layout="wide")

st.title("Graph Walk")
st.caption("Step through BFS, priority BFS, DFS and greedy search one click at a time.")

if st.button("🧭 Walk", use_container_width=True, type="primary"):
    st.switch_page("pages/1_Walk.py")

st.divider()

try:
    from graphwalk.scene import load_scene
    from ui.components.scenes import list_scenes

    scenes = list_scenes()
    if not scenes:
        st.warning("No scenes found in data/scenes.")

    for path in scenes:
        graph = load_scene(path)
        graph.initialize()
        stats = graph.stats()
        c1, c2, c3 = st.columns(3)
        c1.metric("Scene", path.rsplit("/", 1)[-1])
        c2.metric("Vertices", stats["vertices"])
        c3.metric("Edges", stats["edges"])
except Exception as e:
    st.error(f"Could not load scenes: {e}")
