"""Read-only views of the run history for non-chat clients."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Response

from runlog.agg import compute_stats, summarize_runs, weekly_progress_percent
from runlog.db.store import RunStore
from runlog.export import export_filename, runs_to_csv
from runlog.models import Run
from ..dependencies import current_time, run_store
from ..models import StatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["runs"])


@router.get("/runs", response_model=list[Run])
async def read_runs(store: RunStore = Depends(run_store)) -> list[Run]:
    """Get every recorded run in the order it was entered."""
    return store.list_runs()


@router.get("/runs/export")
async def export_runs(
    store: RunStore = Depends(run_store),
    now: datetime = Depends(current_time),
) -> Response:
    """Download the run history as a CSV attachment."""
    runs = store.list_runs()
    if not runs:
        raise HTTPException(status_code=404, detail="No runs to export")
    filename = export_filename(now.date())
    logger.info(f"Exporting {len(runs)} runs as {filename}")
    return Response(
        content=runs_to_csv(runs),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/stats", response_model=StatsResponse)
async def read_stats(
    store: RunStore = Depends(run_store),
    now: datetime = Depends(current_time),
) -> StatsResponse:
    """Get today/week/month distance, all-time totals and weekly goal progress.

    The percentage is not capped at 100.
    """
    runs = store.list_runs()
    period = compute_stats(runs, now)
    goal = store.get_goal()
    return StatsResponse(
        period=period,
        totals=summarize_runs(runs),
        goal_km=goal,
        week_progress_percent=weekly_progress_percent(period.week_km, goal),
    )
