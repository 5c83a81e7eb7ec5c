"""
Configuration constants for the Graph Walk project.

All paths, rendering settings, and tunable parameters are defined here.
Overrides are read from environment variables (scripts load a project
.env file first).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphwalk/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains authored scenes)
DATA_DIR = PROJECT_ROOT / "data"
SCENES_DIR = DATA_DIR / "scenes"

# Scene loaded when none is given on the command line
DEFAULT_SCENE_PATH = Path(
    os.environ.get("GRAPHWALK_SCENE", str(SCENES_DIR / "example.json"))
)

# Recognised scene file extensions
SCENE_EXTENSIONS = (".json", ".msgpack")

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm active when a session starts (bfs, priority-bfs, dfs, greedy)
DEFAULT_ALGORITHM = os.environ.get("GRAPHWALK_ALGORITHM", "bfs")

# Priority assumed for vertices that do not declare one
DEFAULT_PRIORITY = 0

# Safety cap on steps when running a traversal to completion
MAX_AUTO_STEPS = int(os.environ.get("GRAPHWALK_MAX_STEPS", "1000"))

# =============================================================================
# Rendering Configuration
# =============================================================================

# Label placement relative to its vertex (x, y, z)
LABEL_OFFSET = (9.0, 1.5, 0.0)
LABEL_FONT_SIZE = 20
LABEL_COLOR = "#ffffff"

# Vertex colors
COLOR_NEUTRAL = "#2ecc71"       # Green: not yet visited
COLOR_VISITING = "#e74c3c"      # Red: visited by the latest step
COLOR_VISITED = "#922b21"       # Dark red: visited earlier
COLOR_ALREADY_SEEN = "#95a5a6"  # Gray: popped but already visited

# Edge lines
EDGE_COLOR = "#7f8c8d"
EDGE_WIDTH = 2

# Plotly figure settings
FIGURE_HEIGHT = 520
VERTEX_MARKER_SIZE = 28

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_scene_files() -> dict[str, bool]:
    """Check which scene files exist in the scenes directory."""
    if not SCENES_DIR.exists():
        return {}
    return {
        path.name: path.is_file()
        for path in sorted(SCENES_DIR.iterdir())
        if path.suffix in SCENE_EXTENSIONS
    }


def get_scene_files() -> list[Path]:
    """Return paths of all authored scenes, sorted by name."""
    return [SCENES_DIR / name for name, exists in validate_scene_files().items() if exists]
