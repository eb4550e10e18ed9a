"""Text of every report the bot sends, as Telegram Markdown."""

from runlog.agg import progress_bar, weekly_progress_percent
from runlog.config.limits import MAX_WEEKLY_GOAL_KM
from runlog.models import Run, PeriodStats, RunTotals
from runlog.utils.formatting import (
    format_date,
    format_number,
    format_pace,
)
from .replies import NEW_RUN_LABEL

NO_PACE = "0:00 min/km"

NO_RUNS_MENU = (
    f'📭 *No runs yet*\n\nPress "{NEW_RUN_LABEL}" to add your first one!'
)
NO_RUNS_COMMAND = "📭 *No runs yet*"
NO_EXPORT_DATA = "📭 *Nothing to export*\n\nAdd some runs first!"
EXPORT_FAILED = "❌ *Could not export your data*\nPlease try again later."
ENTRY_CANCELLED = "❌ Run entry cancelled."
NOTHING_TO_CANCEL = "Nothing to cancel: no run entry is in progress."
UNKNOWN_INPUT = "🤔 I didn't get that. Pick an action from the menu or send /help."
INVALID_GOAL = (
    "❌ *Invalid goal*\n"
    f"Send a single number above 0 and up to {MAX_WEEKLY_GOAL_KM:g} km, e.g. `/goal 80`."
)


def _week_range(stats: PeriodStats) -> str:
    return f"{format_date(stats.week_start)}–{format_date(stats.week_end)}"


def render_welcome(goal_km: float, user_name: str | None = None) -> str:
    greeting = f"🏃 *Hi, {user_name}!*" if user_name else "🏃 *Hi!*"
    return (
        f"{greeting}\n\n"
        "I'm your personal running log.\n\n"
        "*📈 What I can do:*\n"
        "• Record runs (distance, time, heart rate)\n"
        "• Work out pace and speed\n"
        "• Show weekly and monthly stats\n"
        "• Track progress toward your weekly goal\n"
        "• Export your runs to CSV\n\n"
        f"🎯 *Current weekly goal:* {format_number(goal_km)} km\n\n"
        "*👇 Choose an action:*"
    )


def render_run_saved(run: Run, stats: PeriodStats, goal_km: float) -> str:
    """Confirmation for a freshly saved run, followed by updated totals."""
    pace = run.pace_min_per_km
    lines = [
        "✅ *Run saved!*",
        "",
        f"📅 *Date:* {format_date(run.date)}",
        f"🎯 *Type:* {run.workout_type}",
        f"📏 *Distance:* {run.distance_km:.1f} km",
        f"⏱ *Time:* {run.duration_min} min",
        f"❤️ *Heart rate:* {run.avg_heart_rate} bpm",
        f"🏃 *Pace:* {format_pace(pace)}",
        f"🚀 *Speed:* {run.speed_kmh:.1f} km/h",
    ]
    if run.note:
        lines.append(f"📝 *Note:* {run.note}")
    lines += [
        "",
        "*📊 Stats:*",
        f"📅 *Today:* {stats.today_km:.1f} km",
        f"📈 *Week ({_week_range(stats)}):* {stats.week_km:.1f} km of {format_number(goal_km)} km",
        f"📆 *Month:* {stats.month_km:.1f} km",
    ]
    return "\n".join(lines)


def render_week_menu(stats: PeriodStats, goal_km: float) -> str:
    """Week report with a progress bar; the percentage is capped at 100."""
    percent = weekly_progress_percent(stats.week_km, goal_km, clamp=True)
    return (
        f"*📊 Week {_week_range(stats)}*\n\n"
        f"*Run:* {stats.week_km:.1f} km of {format_number(goal_km)} km\n"
        f"*Progress:* {percent}%\n"
        f"{progress_bar(percent)}\n\n"
        f"*Today:* {stats.today_km:.1f} km\n"
        f"*This month:* {stats.month_km:.1f} km"
    )


def render_week_command(stats: PeriodStats, goal_km: float) -> str:
    """Short week report; the percentage can go past 100."""
    percent = weekly_progress_percent(stats.week_km, goal_km)
    return (
        f"*📊 Week {_week_range(stats)}*\n\n"
        f"*Run:* {stats.week_km:.1f} km of {format_number(goal_km)} km\n"
        f"*Progress:* {percent}%\n"
        f"*Today:* {stats.today_km:.1f} km"
    )


def render_last_run_menu(run: Run) -> str:
    pace = run.pace_min_per_km
    text = (
        "*🕒 Last run*\n\n"
        f"*Date:* {format_date(run.date)}\n"
        f"*Type:* {run.workout_type}\n"
        f"*Distance:* {format_number(run.distance_km)} km\n"
        f"*Time:* {run.duration_min} min\n"
        f"*Heart rate:* {run.avg_heart_rate} bpm\n"
        f"*Pace:* {format_pace(pace)}\n"
        f"*Speed:* {run.speed_kmh:.1f} km/h"
    )
    if run.note:
        text += f"\n*Note:* {run.note}"
    return text


def render_last_run_command(run: Run) -> str:
    return (
        f"*🕒 Last run ({format_date(run.date)})*\n\n"
        f"*Distance:* {format_number(run.distance_km)} km\n"
        f"*Time:* {run.duration_min} min\n"
        f"*Pace:* {format_pace(run.pace_min_per_km)}\n"
        f"*Type:* {run.workout_type}"
    )


def render_goal(goal_km: float) -> str:
    return (
        f"*🎯 Current weekly goal:* {format_number(goal_km)} km\n\n"
        "To change it, send the command:\n"
        "`/goal 60` for 60 km a week\n"
        "`/goal 80` for 80 km a week"
    )


def render_goal_updated(goal_km: float) -> str:
    return f"✅ *Goal updated!*\n\nNew weekly goal: {format_number(goal_km)} km"


def render_full_stats(totals: RunTotals, stats: PeriodStats) -> str:
    average_pace = (
        format_pace(totals.average_pace) if totals.average_pace is not None else NO_PACE
    )
    return (
        "*📈 All-time stats*\n\n"
        f"*Total runs:* {totals.run_count}\n"
        f"*Total distance:* {totals.total_distance_km:.1f} km\n"
        f"*Total time:* {totals.total_duration_min} min\n"
        f"*Average pace:* {average_pace}\n\n"
        f"*This week:* {stats.week_km:.1f} km\n"
        f"*This month:* {stats.month_km:.1f} km\n"
        f"*Today:* {stats.today_km:.1f} km"
    )
