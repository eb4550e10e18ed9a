from runlog.models import Run, RunTotals


def summarize_runs(runs: list[Run]) -> RunTotals:
    """Calculate all-time count, distance, duration and average pace."""
    total_distance = round(sum(run.distance_km for run in runs), 4)
    total_duration = sum(run.duration_min for run in runs)
    average_pace = total_duration / total_distance if total_distance > 0 else None
    return RunTotals(
        run_count=len(runs),
        total_distance_km=total_distance,
        total_duration_min=total_duration,
        average_pace=average_pace,
    )
