"""
Walk - interactive step-by-step traversal.
"""

import streamlit as st

from graphwalk.config import DEFAULT_ALGORITHM
from graphwalk.scene import SceneError
from graphwalk.search import Algorithm, SearchState, get_algorithm
from graphwalk.session import InputEvent
from graphwalk.view import build_scene_figure
from ui.components.charts import create_frontier_chart
from ui.components.scenes import get_engine, list_scenes, new_engine

st.set_page_config(page_title="Walk", page_icon="🧭", layout="wide")

st.title("Walk")

scenes = list_scenes()
if not scenes:
    st.warning("No scenes found in data/scenes.")
    st.stop()

# SCENE SETUP
with st.sidebar:
    scene_path = st.selectbox("Scene", scenes, format_func=lambda p: p.rsplit("/", 1)[-1])
    algorithm_names = [a.value for a in Algorithm]
    algorithm = st.selectbox(
        "Algorithm",
        algorithm_names,
        index=algorithm_names.index(get_algorithm(DEFAULT_ALGORITHM).value),
    )
    load_clicked = st.button("Load", use_container_width=True)

engine = get_engine()
if load_clicked or engine is None or st.session_state.get("scene_path") != scene_path:
    try:
        engine = new_engine(scene_path, get_algorithm(algorithm))
    except (FileNotFoundError, SceneError) as e:
        st.error(f"Could not load scene: {e}")
        st.stop()
    st.session_state.engine = engine
    st.session_state.scene_path = scene_path

# CONTROLS
c1, c2, c3 = st.columns(3)
with c1:
    if st.button("Step", type="primary", use_container_width=True,
                 disabled=engine.state is not SearchState.SEARCHING):
        engine.handle(InputEvent.STEP)
with c2:
    if st.button("Reset", use_container_width=True):
        engine.handle(InputEvent.RESET)
with c3:
    if st.button("Switch algorithm", use_container_width=True):
        engine.handle(InputEvent.SWITCH)

# SCENE
st.markdown(f"**Algorithm:** {engine.algorithm.label} · **State:** {engine.state.value}")
if engine.view.status is not None:
    st.code(engine.view.status or " ", language=None)

if engine.state is SearchState.IDLE and engine.algorithm.is_goal_directed:
    st.info("This scene has no start/goal pair, so greedy search cannot start.")
elif engine.state is SearchState.FINISHED:
    st.success("Search finished.")

st.plotly_chart(build_scene_figure(engine.graph, engine.view), use_container_width=True)

result = engine.result()
if result.visit_order:
    st.write(" → ".join(result.visit_order))
if result.steps:
    st.plotly_chart(create_frontier_chart(result), use_container_width=True)
