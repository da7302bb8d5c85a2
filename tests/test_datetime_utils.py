"""Tests for app timezone resolution."""

from __future__ import annotations

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.utils.datetime import _resolve_timezone, ensure_app_naive_datetime


@pytest.mark.parametrize(
    ("tz_name", "expected_offset"),
    [
        ("UTC+05:30", timedelta(hours=5, minutes=30)),
        ("UTC-03:00", timedelta(hours=-3)),
        ("gmt+2", timedelta(hours=2)),
        ("GMT-0930", timedelta(hours=-9, minutes=-30)),
    ],
)
def test_fixed_offsets_are_accepted(tz_name, expected_offset):
    tz = _resolve_timezone(tz_name)

    assert tz.utcoffset(None) == expected_offset


def test_iana_names_resolve_to_zoneinfo():
    assert _resolve_timezone("Europe/Madrid") == ZoneInfo("Europe/Madrid")


@pytest.mark.parametrize("tz_name", ["Mars/Olympus_Mons", "UTC+", "not a zone"])
def test_unknown_names_fall_back_to_new_york(tz_name):
    assert _resolve_timezone(tz_name) == ZoneInfo("America/New_York")


def test_naive_storage_value_keeps_app_wall_clock(monkeypatch):
    monkeypatch.setattr(
        "app.utils.datetime.get_app_timezone", lambda: _resolve_timezone("UTC+05:30")
    )
    aware = datetime.fromisoformat("2023-05-10T12:00:00+00:00")

    assert ensure_app_naive_datetime(aware) == datetime(2023, 5, 10, 17, 30)
