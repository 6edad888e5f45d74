"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MAX_DAILY_POINTS = 1.5
WINDOW_POINTS = 0.5
DEFAULT_COVERAGE_THRESHOLD = 0.80

EARLY_MORNING_START = time(6, 0)
EARLY_MORNING_END = time(9, 0)
MORNING_START = time(9, 0)
MORNING_END = time(13, 0)
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(18, 0)

# Status fallback weights for records without punch data.
PRESENT_POINTS = 1.0
HALF_DAY_POINTS = 0.5

DEFAULT_STATEMENT_DAYS = 14
LABOR_SOURCE = "labor"
LABOR_DESCRIPTION = "Daily Labor Cost"
