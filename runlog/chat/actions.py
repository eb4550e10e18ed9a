"""Recognize menu buttons and slash commands in incoming chat text."""

from typing import Literal

from pydantic import BaseModel

from .replies import (
    NEW_RUN_LABEL,
    WEEK_LABEL,
    LAST_RUN_LABEL,
    GOAL_LABEL,
    EXPORT_LABEL,
    ALL_STATS_LABEL,
)

ActionKind = Literal[
    "start", "new_run", "week", "last_run", "goal", "export", "stats", "cancel"
]
ActionSource = Literal["menu", "command"]

COMMANDS: dict[str, ActionKind] = {
    "start": "start",
    "help": "start",
    "run": "new_run",
    "week": "week",
    "last": "last_run",
    "goal": "goal",
    "export": "export",
    "stats": "stats",
    "cancel": "cancel",
}

MENU_ACTIONS: dict[str, ActionKind] = {
    NEW_RUN_LABEL: "new_run",
    WEEK_LABEL: "week",
    LAST_RUN_LABEL: "last_run",
    GOAL_LABEL: "goal",
    EXPORT_LABEL: "export",
    ALL_STATS_LABEL: "stats",
}


class InboundAction(BaseModel):
    kind: ActionKind
    source: ActionSource
    args: list[str] = []


def parse_action(text: str) -> InboundAction | None:
    """Map chat text to an action, or None if it is neither a button nor a known command.

    Commands may carry a bot-name suffix (`/week@my_bot`) and arguments
    separated by whitespace (`/goal 80`).
    """
    stripped = text.strip()
    if stripped in MENU_ACTIONS:
        return InboundAction(kind=MENU_ACTIONS[stripped], source="menu")

    if not stripped.startswith("/"):
        return None
    command, *args = stripped.split()
    name = command[1:].split("@", 1)[0].lower()
    kind = COMMANDS.get(name)
    if kind is None:
        return None
    return InboundAction(kind=kind, source="command", args=args)
