"""Wall-clock helpers.

Run dates and the today/week/month windows all use the same local clock. The
local zone is the system one unless TIMEZONE names an IANA zone.
"""

import os
import zoneinfo
from datetime import date, datetime


def now() -> datetime:
    """Get the current local time as a naive datetime."""
    tz_name = os.environ.get("TIMEZONE")
    if tz_name:
        return datetime.now(zoneinfo.ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


def today() -> date:
    """Get the current local calendar day."""
    return now().date()
