"""Test the read-only run, export and stats endpoints."""

from datetime import date

from fastapi.testclient import TestClient

from runlog.export import CSV_HEADER


class TestReadRuns:
    def test_empty(self, client: TestClient):
        response = client.get("/runs")
        assert response.status_code == 200
        assert response.json() == []

    def test_entry_order(self, client: TestClient, store, run_factory):
        store.append(run_factory.make({"date": date(2024, 5, 15), "note": "second day"}))
        store.append(run_factory.make({"date": date(2024, 5, 14), "note": "backfilled"}))
        runs = client.get("/runs").json()
        assert [run["note"] for run in runs] == ["second day", "backfilled"]
        assert runs[0]["date"] == "2024-05-15"
        assert runs[0]["distance_km"] == 10.0
        assert runs[0]["workout_type"] == "Tempo"


class TestExportRuns:
    def test_no_runs(self, client: TestClient):
        response = client.get("/runs/export")
        assert response.status_code == 404
        assert response.json()["detail"] == "No runs to export"

    def test_csv_attachment(self, client: TestClient, store, run_factory):
        store.append(run_factory.make({"note": "hills"}))
        response = client.get("/runs/export")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="runs_2024-05-15.csv"'
        )
        assert response.text.split("\n") == [
            CSV_HEADER,
            '2024-05-15,10,50,145,Tempo,"hills"',
        ]


class TestStats:
    def test_empty(self, client: TestClient):
        body = client.get("/stats").json()
        assert body["goal_km"] == 70.0
        assert body["week_progress_percent"] == 0
        assert body["totals"] == {
            "run_count": 0,
            "total_distance_km": 0.0,
            "total_duration_min": 0,
            "average_pace": None,
        }
        assert body["period"]["today_km"] == 0.0
        assert body["period"]["week_start"] == "2024-05-13T00:00:00"

    def test_progress_is_not_capped(self, client: TestClient, store, run_factory):
        store.append(run_factory.make({"date": date(2024, 5, 14), "distance_km": 84.0}))
        body = client.get("/stats").json()
        assert body["week_progress_percent"] == 120
        assert body["period"]["week_km"] == 84.0
        assert body["period"]["month_km"] == 84.0
        assert body["totals"]["run_count"] == 1

    def test_uses_the_current_goal(self, client: TestClient, store):
        store.set_goal(50.0)
        assert client.get("/stats").json()["goal_km"] == 50.0
