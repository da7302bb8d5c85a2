"""Timezone handling shared by the notification window and storage layers."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "America/New_York"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Timezone named by ``APP_TIMEZONE``, falling back to ``America/New_York``.

    Accepts IANA names and fixed offsets written as ``UTC+05:30`` or ``UTC-03:00``.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def now_in_app_timezone() -> datetime:
    """Current moment as an aware datetime in the app timezone."""

    return datetime.now(tz=get_app_timezone())


def start_of_day(value: datetime) -> datetime:
    """Return midnight of the day ``value`` falls on, keeping its ``tzinfo``."""

    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the app timezone to naive values and convert aware ones into it."""

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` localized to the app timezone but without ``tzinfo``.

    ``DATETIME`` columns on some backends (SQLite among them) drop the offset.
    Timestamps are stored as naive wall-clock values in the app timezone and
    turned back into aware datetimes when they leave the repository.
    """

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Map an IANA name or ``UTC/GMT`` offset to a ``tzinfo``."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return ZoneInfo(_DEFAULT_TIMEZONE)
