"""Display helpers for paces, speeds, dates and plain numbers."""

from datetime import date
from decimal import Decimal


def format_pace(pace_min_per_km: float) -> str:
    """Render a pace (minutes per km) as `M:SS min/km`.

    The total number of seconds is rounded once and then split, so a pace
    like 10.999 minutes renders as `11:00` rather than `10:60`.
    """
    total_seconds = round(pace_min_per_km * 60)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d} min/km"


def pace_to_speed_kmh(pace_min_per_km: float) -> float:
    """Convert a pace (minutes per km) to a speed in km/h, rounded to 0.1.

    Raises ZeroDivisionError for a zero pace.
    """
    return round(60 / pace_min_per_km, 1)


def format_date(day: date) -> str:
    """Render a date as `dd.mm.yy`."""
    return day.strftime("%d.%m.%y")


def format_number(value: float) -> str:
    """Render a number in plain fixed-point form without trailing zeros.

    70.0 -> "70", 80.5 -> "80.5", 0.00001 -> "0.00001" (never "1e-05").
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
