from pydantic import BaseModel

from runlog.models import WORKOUT_TYPES

Keyboard = list[list[str]]

NEW_RUN_LABEL = "🟢 New run"
WEEK_LABEL = "📊 Week"
LAST_RUN_LABEL = "🕒 Last run"
GOAL_LABEL = "🎯 Goal"
EXPORT_LABEL = "📂 Export"
ALL_STATS_LABEL = "📈 All stats"

MAIN_MENU: Keyboard = [
    [NEW_RUN_LABEL, WEEK_LABEL],
    [LAST_RUN_LABEL, GOAL_LABEL],
    [EXPORT_LABEL, ALL_STATS_LABEL],
]

# Two buttons per row.
WORKOUT_TYPE_KEYBOARD: Keyboard = [
    list(WORKOUT_TYPES[i : i + 2]) for i in range(0, len(WORKOUT_TYPES), 2)
]


class Reply(BaseModel):
    """One outgoing chat message (Telegram Markdown) and its keyboard."""

    text: str
    keyboard: Keyboard | None = None
    one_time_keyboard: bool = False
    # Hide whatever custom keyboard the client currently shows.
    remove_keyboard: bool = False
