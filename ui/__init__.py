"""
Streamlit UI module.

Provides the web interface for Graph Walk:
- Home: Scene overview
- Walk: Step/reset/switch controls over a rendered scene
"""
