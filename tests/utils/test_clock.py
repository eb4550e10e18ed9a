from datetime import datetime, timedelta, timezone
import zoneinfo

from runlog.utils.clock import now, today


def test_now_is_naive(monkeypatch):
    monkeypatch.delenv("TIMEZONE", raising=False)
    assert now().tzinfo is None


def test_now_uses_configured_timezone(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Pacific/Kiritimati")  # UTC+14
    expected = datetime.now(timezone.utc).astimezone(
        zoneinfo.ZoneInfo("Pacific/Kiritimati")
    )
    assert abs(now() - expected.replace(tzinfo=None)) < timedelta(minutes=1)


def test_today_matches_now(monkeypatch):
    monkeypatch.delenv("TIMEZONE", raising=False)
    assert today() in (now().date(), (now() - timedelta(minutes=1)).date())
