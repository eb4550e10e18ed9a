from .periods import compute_stats, week_start, month_start
from .totals import summarize_runs
from .progress import weekly_progress_percent, progress_bar

__all__ = [
    "compute_stats",
    "week_start",
    "month_start",
    "summarize_runs",
    "weekly_progress_percent",
    "progress_bar",
]
