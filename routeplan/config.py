"""
Configuration constants for the route planner.

All tunable search parameters are defined here. Values that make sense to
override per deployment are read from environment variables (optionally
from a .env file in the working directory).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Grid Configuration
# =============================================================================

# Neighbor expansion order for grid cells as (d_row, d_col): up, left, down, right.
# Fixed so that search order, and therefore tie-breaks, are reproducible.
GRID_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))

# Cost of a single move between adjacent grid cells
DEFAULT_EDGE_COST = 1.0

# =============================================================================
# Geometric Graph Configuration
# =============================================================================

# Multiplier applied to total path distance (e.g. map units -> meters)
DEFAULT_METRIC_SCALE = 1.0

# =============================================================================
# Search Configuration
# =============================================================================

# Maximum node expansions per run before the search is aborted.
# Unset (None) means the search runs until the open set is exhausted.
_max_expansions = os.environ.get("ROUTEPLAN_MAX_EXPANSIONS")
DEFAULT_MAX_EXPANSIONS = int(_max_expansions) if _max_expansions else None

# Check heuristic consistency while searching (slower, warns on violations)
CHECK_HEURISTIC = os.environ.get("ROUTEPLAN_CHECK_HEURISTIC", "0").lower() in ("1", "true", "yes")

# Slack allowed in heuristic checks to absorb float rounding
HEURISTIC_TOLERANCE = 1e-9

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
