from datetime import datetime

from pydantic import BaseModel


class PeriodStats(BaseModel):
    """Distance totals for today, the current week and the current month."""

    today_km: float
    week_km: float
    month_km: float
    week_start: datetime
    # The moment the stats were computed, not the Sunday of the week.
    week_end: datetime


class RunTotals(BaseModel):
    """All-time totals over every recorded run."""

    run_count: int
    total_distance_km: float
    total_duration_min: int
    average_pace: float | None = None  # min/km; None when no distance was run
