from datetime import date, datetime, timedelta

import pytest

from runlog.agg.periods import compute_stats, month_start, week_start


class TestWeekStart:
    def test_midweek_goes_back_to_monday(self):
        assert week_start(datetime(2024, 5, 15, 18, 30)) == datetime(2024, 5, 13)

    def test_monday_is_its_own_week_start(self):
        assert week_start(datetime(2024, 5, 13, 7, 0)) == datetime(2024, 5, 13)

    def test_sunday_goes_back_six_days(self):
        sunday = datetime(2024, 5, 19, 23, 59, 59)
        assert week_start(sunday) == datetime(2024, 5, 13)
        assert (sunday.date() - week_start(sunday).date()).days == 6

    def test_crosses_month_boundary(self):
        assert week_start(datetime(2024, 6, 1, 12, 0)) == datetime(2024, 5, 27)

    @pytest.mark.parametrize("offset", range(14))
    def test_always_a_monday_at_midnight(self, offset):
        start = week_start(datetime(2024, 2, 20, 15, 45, 12, 999) + timedelta(days=offset))
        assert start.weekday() == 0
        assert (start.hour, start.minute, start.second, start.microsecond) == (0, 0, 0, 0)


def test_month_start():
    assert month_start(datetime(2024, 5, 15, 18, 30)) == datetime(2024, 5, 1)
    assert month_start(datetime(2024, 5, 1, 0, 0)) == datetime(2024, 5, 1)


class TestComputeStats:
    now = datetime(2024, 5, 15, 18, 30)  # Wednesday

    def test_windows(self, run_factory):
        runs = [
            run_factory.make({"date": date(2024, 4, 30), "distance_km": 20.0}),  # last month
            run_factory.make({"date": date(2024, 5, 2), "distance_km": 8.0}),  # this month
            run_factory.make({"date": date(2024, 5, 12), "distance_km": 15.0}),  # last Sunday
            run_factory.make({"date": date(2024, 5, 13), "distance_km": 6.0}),  # Monday
            run_factory.make({"date": date(2024, 5, 15), "distance_km": 10.5}),  # today
        ]
        stats = compute_stats(runs, self.now)
        assert stats.today_km == pytest.approx(10.5)
        assert stats.week_km == pytest.approx(16.5)
        assert stats.month_km == pytest.approx(39.5)

    def test_week_range_ends_now(self, run_factory):
        stats = compute_stats([run_factory.make()], self.now)
        assert stats.week_start == datetime(2024, 5, 13)
        assert stats.week_end == self.now

    def test_two_runs_today_are_summed(self, run_factory):
        runs = [
            run_factory.make({"date": date(2024, 5, 15), "distance_km": 5.1}),
            run_factory.make({"date": date(2024, 5, 15), "distance_km": 10.2}),
        ]
        stats = compute_stats(runs, self.now)
        assert stats.today_km == pytest.approx(15.3)

    def test_no_runs(self):
        stats = compute_stats([], self.now)
        assert (stats.today_km, stats.week_km, stats.month_km) == (0.0, 0.0, 0.0)

    def test_is_idempotent(self, run_factory):
        runs = [
            run_factory.make({"date": date(2024, 5, 14), "distance_km": 7.0}),
            run_factory.make({"date": date(2024, 5, 15), "distance_km": 3.0}),
        ]
        before = [run.model_copy() for run in runs]
        first = compute_stats(runs, self.now)
        second = compute_stats(runs, self.now)
        assert first == second
        assert runs == before
