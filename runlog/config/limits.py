"""Accepted ranges for user-entered values.

Lower bounds are exclusive, upper bounds inclusive.
"""

MAX_DISTANCE_KM = 100.0
MAX_DURATION_MIN = 600
MAX_HEART_RATE = 220

# The weekly goal a fresh process starts with, unless WEEKLY_GOAL_KM overrides it.
DEFAULT_WEEKLY_GOAL_KM = 70.0
MAX_WEEKLY_GOAL_KM = 500.0
