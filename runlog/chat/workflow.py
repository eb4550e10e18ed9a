"""Guided entry of a new run, one question per message.

The conversation is a linear state machine: distance, duration, heart rate,
workout type, note. Each state carries only the answers collected so far.
`advance` is pure: it never touches storage, it just says what the next state
is and what should happen (ask the next question, re-ask the current one, or
save the finished entry).
"""

from typing import Annotated, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from runlog.config.limits import MAX_DISTANCE_KM, MAX_DURATION_MIN, MAX_HEART_RATE
from runlog.models import RunEntry, WorkoutType, WORKOUT_TYPES
from runlog.utils.parsing import parse_decimal, parse_integer
from .replies import Reply, WORKOUT_TYPE_KEYBOARD

SKIP_NOTE = "-"

DISTANCE_PROMPT = Reply(
    text="🏃 *Enter the distance in kilometers*\nFor example: 5.2\n\nSend /cancel to stop.",
    remove_keyboard=True,
)
DURATION_PROMPT = Reply(text="⏱ *Enter the time in minutes*\nFor example: 52")
HEART_RATE_PROMPT = Reply(text="❤️ *Enter your average heart rate (bpm)*\nFor example: 145")
WORKOUT_TYPE_PROMPT = Reply(
    text="📌 *Choose the workout type:*",
    keyboard=WORKOUT_TYPE_KEYBOARD,
    one_time_keyboard=True,
)
NOTE_PROMPT = Reply(
    text=f'📝 *Add a note* (or send "{SKIP_NOTE}" to skip):', remove_keyboard=True
)

DISTANCE_ERROR = Reply(
    text=f"❌ Invalid distance. Enter a number above 0 and up to {MAX_DISTANCE_KM:g} km\n"
    "For example: 10.5"
)
DURATION_ERROR = Reply(
    text=f"❌ Invalid time. Enter a whole number of minutes from 1 to {MAX_DURATION_MIN}\n"
    "For example: 65"
)
HEART_RATE_ERROR = Reply(
    text=f"❌ Invalid heart rate. Enter a whole number from 1 to {MAX_HEART_RATE}\n"
    "For example: 150"
)
WORKOUT_TYPE_ERROR = Reply(
    text="❌ Choose one of the offered types: " + ", ".join(WORKOUT_TYPES),
    keyboard=WORKOUT_TYPE_KEYBOARD,
    one_time_keyboard=True,
)


class AwaitDistance(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Literal["distance"] = "distance"


class AwaitDuration(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Literal["duration"] = "duration"
    distance_km: float


class AwaitHeartRate(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Literal["heart_rate"] = "heart_rate"
    distance_km: float
    duration_min: int


class AwaitWorkoutType(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Literal["workout_type"] = "workout_type"
    distance_km: float
    duration_min: int
    avg_heart_rate: int


class AwaitNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Literal["note"] = "note"
    distance_km: float
    duration_min: int
    avg_heart_rate: int
    workout_type: WorkoutType


EntryState = Annotated[
    AwaitDistance | AwaitDuration | AwaitHeartRate | AwaitWorkoutType | AwaitNote,
    Field(discriminator="step"),
]


class Prompt(BaseModel):
    """The answer was accepted; ask the next question."""

    kind: Literal["prompt"] = "prompt"
    reply: Reply


class Rejected(BaseModel):
    """The answer was invalid; the state is unchanged and the question is re-asked."""

    kind: Literal["rejected"] = "rejected"
    reply: Reply


class Completed(BaseModel):
    """All answers are in; the entry is ready to be saved."""

    kind: Literal["completed"] = "completed"
    entry: RunEntry


Effect = Prompt | Rejected | Completed


class Transition(NamedTuple):
    state: EntryState | None  # None once the workflow is finished
    effect: Effect


def start_entry() -> Transition:
    return Transition(AwaitDistance(), Prompt(reply=DISTANCE_PROMPT))


def advance(state: EntryState, text: str) -> Transition:
    """Feed one user message into the workflow.

    Raises:
        TypeError: If `state` is not a workflow state.
    """
    match state:
        case AwaitDistance():
            distance = parse_decimal(text)
            if distance is None or not 0 < distance <= MAX_DISTANCE_KM:
                return Transition(state, Rejected(reply=DISTANCE_ERROR))
            return Transition(
                AwaitDuration(distance_km=distance), Prompt(reply=DURATION_PROMPT)
            )

        case AwaitDuration():
            duration = parse_integer(text)
            if duration is None or not 0 < duration <= MAX_DURATION_MIN:
                return Transition(state, Rejected(reply=DURATION_ERROR))
            return Transition(
                AwaitHeartRate(distance_km=state.distance_km, duration_min=duration),
                Prompt(reply=HEART_RATE_PROMPT),
            )

        case AwaitHeartRate():
            heart_rate = parse_integer(text)
            if heart_rate is None or not 0 < heart_rate <= MAX_HEART_RATE:
                return Transition(state, Rejected(reply=HEART_RATE_ERROR))
            return Transition(
                AwaitWorkoutType(
                    distance_km=state.distance_km,
                    duration_min=state.duration_min,
                    avg_heart_rate=heart_rate,
                ),
                Prompt(reply=WORKOUT_TYPE_PROMPT),
            )

        case AwaitWorkoutType():
            workout_type = text.strip()
            if workout_type not in WORKOUT_TYPES:
                return Transition(state, Rejected(reply=WORKOUT_TYPE_ERROR))
            return Transition(
                AwaitNote(
                    distance_km=state.distance_km,
                    duration_min=state.duration_min,
                    avg_heart_rate=state.avg_heart_rate,
                    workout_type=workout_type,
                ),
                Prompt(reply=NOTE_PROMPT),
            )

        case AwaitNote():
            note = "" if text == SKIP_NOTE else text
            entry = RunEntry(
                distance_km=state.distance_km,
                duration_min=state.duration_min,
                avg_heart_rate=state.avg_heart_rate,
                workout_type=state.workout_type,
                note=note,
            )
            return Transition(None, Completed(entry=entry))

    raise TypeError(f"Not a workflow state: {state!r}")
