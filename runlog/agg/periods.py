from datetime import datetime, timedelta

from runlog.models import Run, PeriodStats


def week_start(now: datetime) -> datetime:
    """Get midnight of the Monday of the week containing `now`."""
    monday = now - timedelta(days=now.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def month_start(now: datetime) -> datetime:
    """Get midnight of the first day of `now`'s month."""
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def compute_stats(runs: list[Run], now: datetime) -> PeriodStats:
    """
    Calculate today/week/month distance totals relative to `now`.

    Runs are matched by calendar day: today is an exact match on the date, the
    week and month windows include everything on or after their first day.

    Args:
        runs: Runs to aggregate, in any order
        now: The reference instant (local time)
    """
    today = now.date()
    first_day_of_week = week_start(now).date()
    first_day_of_month = month_start(now).date()

    today_km = sum(run.distance_km for run in runs if run.date == today)
    week_km = sum(run.distance_km for run in runs if run.date >= first_day_of_week)
    month_km = sum(run.distance_km for run in runs if run.date >= first_day_of_month)

    return PeriodStats(
        # Round away float noise like 10.1 + 5.2 = 15.299999999999999.
        today_km=round(today_km, 4),
        week_km=round(week_km, 4),
        month_km=round(month_km, 4),
        week_start=week_start(now),
        week_end=now,
    )
