from .actions import InboundAction, parse_action
from .dispatcher import Dispatcher, DocumentSender
from .replies import MAIN_MENU, Reply
from .sessions import WorkflowSessions
from .workflow import (
    AwaitDistance,
    AwaitDuration,
    AwaitHeartRate,
    AwaitWorkoutType,
    AwaitNote,
    EntryState,
    advance,
    start_entry,
)

__all__ = [
    "InboundAction",
    "parse_action",
    "Dispatcher",
    "DocumentSender",
    "MAIN_MENU",
    "Reply",
    "WorkflowSessions",
    "AwaitDistance",
    "AwaitDuration",
    "AwaitHeartRate",
    "AwaitWorkoutType",
    "AwaitNote",
    "EntryState",
    "advance",
    "start_entry",
]
