FILLED_SEGMENT = "▰"
EMPTY_SEGMENT = "▱"


def weekly_progress_percent(week_km: float, goal_km: float, clamp: bool = False) -> int:
    """
    Calculate progress toward the weekly goal as a whole percentage.

    Args:
        week_km: Distance run so far this week
        goal_km: The weekly goal, must be positive
        clamp: Cap the result at 100 (used where a progress bar is drawn)
    """
    percent = round(week_km / goal_km * 100)
    if clamp:
        return min(100, percent)
    return percent


def progress_bar(percent: int, segments: int = 10) -> str:
    """Draw a bar with one filled segment per full 10% (never more than `segments`)."""
    filled = min(segments, max(0, percent // 10))
    return FILLED_SEGMENT * filled + EMPTY_SEGMENT * (segments - filled)
