"""
Configuration constants for the shortest-path engine.

All tunable settings are defined here. Values that make sense to change
per deployment are read from environment variables (or a local .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathengine/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env next to the project (never overrides real environment)
load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Names accepted by the solver registry and the CLI
ALGORITHMS = ("dijkstra", "astar", "bellman-ford")

# Algorithm used when the caller does not pick one
DEFAULT_ALGORITHM = os.environ.get("PATHENGINE_DEFAULT_ALGORITHM", "dijkstra")

# Fail fast when Dijkstra / A* are handed negative weights.
# The bare solver functions never check; only PathEngine honours this.
REJECT_NEGATIVE_WEIGHTS = os.environ.get(
    "PATHENGINE_REJECT_NEGATIVE_WEIGHTS", "true"
).lower() not in ("0", "false", "no", "off")

# =============================================================================
# Graph Configuration
# =============================================================================

# Position assumed for nodes without coordinates (A* heuristic only)
DEFAULT_POSITION = (0.0, 0.0)

# Prefix for generated edge ids: e1, e2, ...
EDGE_ID_PREFIX = "e"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
