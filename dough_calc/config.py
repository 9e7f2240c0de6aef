"""
Input limits, form defaults and display thresholds shared by the engine and the app.
"""

import os

# Inclusive (min, max) bounds.
BALL_COUNT_RANGE = (1, 20)
BALL_WEIGHT_RANGE = (150, 2000)
PRE_FERMENT_FLOUR_RANGE = (10, 80)
DOUGH_HYDRATION_RANGE = (50, 100)

DEFAULT_BALL_COUNT = 3
DEFAULT_BALL_WEIGHT = 250

# Yeast readouts
YEAST_PINCH_THRESHOLD = 0.01
YEAST_FINE_THRESHOLD = 0.1
NEGLIGIBLE_YEAST = 0.001

LOG_LEVEL = os.environ.get("DOUGH_CALC_LOG_LEVEL", "WARNING").upper()


def in_range(value, bounds) -> bool:
    """True when `value` is set and lies within the inclusive `bounds`."""
    if value is None:
        return False
    low, high = bounds
    return low <= value <= high
