"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import math

DEFAULT_GOAL_PERCENTAGE = 75
SAFE_MARGIN = 5
WARNING_MARGIN = 5
DEFAULT_CACHE_SIZE = 256

# Sentinels for results with no finite answer (goal of 0% or 100%).
UNLIMITED_BUNKS = math.inf
RECOVERY_UNREACHABLE = math.inf
