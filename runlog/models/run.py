from datetime import date
from typing import Literal, Self, get_args

from pydantic import BaseModel, ConfigDict, Field

from runlog.utils.formatting import pace_to_speed_kmh

WorkoutType = Literal["Easy", "Tempo", "Intervals", "Long"]
WORKOUT_TYPES: tuple[WorkoutType, ...] = get_args(WorkoutType)


class RunEntry(BaseModel):
    """The user-entered part of a run, before it gets a date."""

    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(gt=0)
    duration_min: int = Field(gt=0)
    avg_heart_rate: int = Field(gt=0)
    workout_type: WorkoutType
    note: str = ""


class Run(RunEntry):
    """A recorded run. Runs are never edited once stored."""

    date: date

    @classmethod
    def from_entry(cls, entry: RunEntry, day: date) -> Self:
        return cls(date=day, **entry.model_dump())

    @property
    def pace_min_per_km(self) -> float:
        return self.duration_min / self.distance_km

    @property
    def speed_kmh(self) -> float:
        return pace_to_speed_kmh(self.pace_min_per_km)
