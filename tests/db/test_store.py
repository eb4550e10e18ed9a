"""Tests for the in-memory run store."""

from datetime import date

import pytest

from runlog.db.store import InMemoryRunStore


class TestRuns:
    def test_starts_empty(self, store: InMemoryRunStore):
        assert store.list_runs() == []
        assert store.count() == 0
        assert store.last_run() is None

    def test_append_keeps_entry_order(self, store: InMemoryRunStore, run_factory):
        first = run_factory.make({"date": date(2024, 5, 15), "distance_km": 5.0})
        second = run_factory.make({"date": date(2024, 5, 14), "distance_km": 8.0})
        third = run_factory.make({"date": date(2024, 5, 15), "distance_km": 3.0})
        for run in (first, second, third):
            store.append(run)

        assert store.list_runs() == [first, second, third]
        assert store.count() == 3
        assert store.last_run() == third

    def test_list_runs_returns_a_copy(self, store: InMemoryRunStore, run_factory):
        store.append(run_factory.make())
        runs = store.list_runs()
        runs.clear()
        assert store.count() == 1

    def test_list_since(self, store: InMemoryRunStore, run_factory):
        old = run_factory.make({"date": date(2024, 5, 1)})
        boundary = run_factory.make({"date": date(2024, 5, 13)})
        recent = run_factory.make({"date": date(2024, 5, 15)})
        for run in (recent, old, boundary):
            store.append(run)

        assert store.list_since(date(2024, 5, 13)) == [recent, boundary]


class TestGoal:
    def test_default_goal(self, store: InMemoryRunStore):
        assert store.get_goal() == 70.0

    def test_custom_initial_goal(self):
        assert InMemoryRunStore(goal_km=42.5).get_goal() == 42.5

    def test_set_goal(self, store: InMemoryRunStore):
        store.set_goal(80.0)
        assert store.get_goal() == 80.0

    @pytest.mark.parametrize("goal", [0, -5])
    def test_non_positive_goal_is_rejected(self, store: InMemoryRunStore, goal):
        with pytest.raises(ValueError):
            store.set_goal(goal)
        assert store.get_goal() == 70.0

    def test_non_positive_initial_goal_is_rejected(self):
        with pytest.raises(ValueError):
            InMemoryRunStore(goal_km=0)
