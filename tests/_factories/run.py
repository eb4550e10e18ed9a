from typing import Any, Mapping
from datetime import date
from runlog.models import Run


class RunFactory:
    def __init__(self, run: Run | None = None):
        if run is None:
            run = Run(
                date=date(2024, 5, 15),
                distance_km=10.0,
                duration_min=50,
                avg_heart_rate=145,
                workout_type="Tempo",
                note="",
            )
        self.run = run

    def make(self, update: Mapping[str, Any] | None = None) -> Run:
        return self.run.model_copy(deep=True, update=update)
