"""Storage for recorded runs and the weekly goal.

Everything lives in process memory and is lost on restart. Callers depend on
the `RunStore` protocol so a durable backend can replace `InMemoryRunStore`.
"""

import logging
import threading
from datetime import date
from typing import Protocol

from runlog.config.limits import DEFAULT_WEEKLY_GOAL_KM
from runlog.models import Run

logger = logging.getLogger(__name__)


class RunStore(Protocol):
    """What the dispatcher and the HTTP routes need from run storage.

    `list_since` is not used by the in-process code paths, which aggregate over
    `list_runs`. It is part of the interface for durable backends that can
    answer date-window queries without loading the whole history.
    """

    def append(self, run: Run) -> None: ...

    def list_runs(self) -> list[Run]: ...

    def list_since(self, day: date) -> list[Run]: ...

    def last_run(self) -> Run | None: ...

    def count(self) -> int: ...

    def get_goal(self) -> float: ...

    def set_goal(self, goal_km: float) -> None: ...


class InMemoryRunStore:
    """Append-only run collection plus one weekly goal, shared by every chat.

    All access goes through a lock, so one store can be shared between the
    HTTP threadpool and the bot's event loop. Reads return copies.
    """

    def __init__(self, goal_km: float = DEFAULT_WEEKLY_GOAL_KM):
        if goal_km <= 0:
            raise ValueError(f"Weekly goal must be positive, got {goal_km}")
        self._runs: list[Run] = []
        self._goal_km = goal_km
        self._lock = threading.Lock()

    def append(self, run: Run) -> None:
        """Add a run at the end of the collection (entry order is kept)."""
        with self._lock:
            self._runs.append(run)
            total = len(self._runs)
        logger.debug(f"Stored run #{total} dated {run.date.isoformat()}")

    def list_runs(self) -> list[Run]:
        """Get every run in entry order."""
        with self._lock:
            return list(self._runs)

    def list_since(self, day: date) -> list[Run]:
        """Get the runs dated on or after `day`, in entry order."""
        with self._lock:
            return [run for run in self._runs if run.date >= day]

    def last_run(self) -> Run | None:
        """Get the most recently appended run, if any."""
        with self._lock:
            return self._runs[-1] if self._runs else None

    def count(self) -> int:
        with self._lock:
            return len(self._runs)

    def get_goal(self) -> float:
        with self._lock:
            return self._goal_km

    def set_goal(self, goal_km: float) -> None:
        """Replace the weekly goal.

        Raises:
            ValueError: If the goal is not positive.
        """
        if goal_km <= 0:
            raise ValueError(f"Weekly goal must be positive, got {goal_km}")
        with self._lock:
            self._goal_km = goal_km
