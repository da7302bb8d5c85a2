"""Derivation of the time window searched for notifications."""

from __future__ import annotations

from datetime import datetime, timedelta

from app.config import get_settings
from app.domain.entities import TimeInterval
from app.domain.exceptions import MalformedTimestamp
from app.utils import ensure_app_timezone, now_in_app_timezone, start_of_day


def parse_iso_datetime(raw: str, field: str) -> datetime:
    """Parse an ISO date (midnight) or date-time expressed in the app timezone."""

    candidate = raw.strip()
    if candidate.endswith(("Z", "z")):
        candidate = f"{candidate[:-1]}+00:00"
    try:
        return ensure_app_timezone(datetime.fromisoformat(candidate))
    except (ValueError, OverflowError) as exc:
        # Offsets near year 1 or 9999 can leave the datetime range on conversion.
        raise MalformedTimestamp(field, raw) from exc


def resolve_time_window(
    raw_from: str | None,
    raw_to: str | None,
    *,
    now: datetime | None = None,
) -> TimeInterval:
    """Return the ``(from, to]`` interval requested by the caller.

    A missing ``from`` starts at midnight of the day that lies the configured
    number of days (seven by default) before ``now``; a missing ``to`` ends at
    ``now``. Ordering of the two bounds is not checked here.
    """

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()

    if raw_from is None:
        window_days = get_settings().notification_window_days
        start = start_of_day(current - timedelta(days=window_days))
    else:
        start = parse_iso_datetime(raw_from, "from")

    end = current if raw_to is None else parse_iso_datetime(raw_to, "to")
    return TimeInterval(start=start, end=end)


__all__ = ["parse_iso_datetime", "resolve_time_window"]
