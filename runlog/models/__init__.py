from .run import Run, RunEntry, WorkoutType, WORKOUT_TYPES
from .stats import PeriodStats, RunTotals

__all__ = [
    "Run",
    "RunEntry",
    "WorkoutType",
    "WORKOUT_TYPES",
    "PeriodStats",
    "RunTotals",
]
