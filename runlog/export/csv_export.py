"""CSV export of the run history."""

import logging
import tempfile
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator

from runlog.models import Run
from runlog.utils.formatting import format_number

logger = logging.getLogger(__name__)

CSV_HEADER = "Date,Distance (km),Duration (min),Heart Rate (bpm),Type,Note"


def _quote_note(note: str) -> str:
    """Quote a non-empty note, doubling any quotes inside it."""
    if not note:
        return ""
    escaped = note.replace('"', '""')
    return f'"{escaped}"'


def runs_to_csv(runs: list[Run]) -> str:
    """Render runs as CSV text, header first, one row per run in entry order."""
    rows = [
        ",".join(
            [
                run.date.isoformat(),
                format_number(run.distance_km),
                str(run.duration_min),
                str(run.avg_heart_rate),
                run.workout_type,
                _quote_note(run.note),
            ]
        )
        for run in runs
    ]
    return "\n".join([CSV_HEADER, *rows])


def export_filename(day: date) -> str:
    return f"runs_{day.isoformat()}.csv"


@contextmanager
def staged_export(
    runs: list[Run], day: date, directory: str | Path | None = None
) -> Iterator[Path]:
    """Write the CSV export to a temporary file and yield its path.

    The file lives in its own temporary directory (created under `directory`
    if given), which is removed when the context exits, whether or not the
    delivery inside the block succeeded.
    """
    with tempfile.TemporaryDirectory(prefix="runlog-export-", dir=directory) as tmp:
        path = Path(tmp) / export_filename(day)
        path.write_text(runs_to_csv(runs), encoding="utf-8")
        logger.debug(f"Staged {len(runs)} runs for export at {path}")
        yield path
