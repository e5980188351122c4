from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Any

from zoneinfo import ZoneInfo

from foalwatch.domain.errors import InvalidDateError

# Farm-local timezone used when "today" is not supplied
DEFAULT_TIMEZONE_NAME = "UTC"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)


def local_today(tz: tzinfo | None = DEFAULT_TZ) -> date:
    """Return the current calendar date in `tz` (UTC when None)."""
    return datetime.now(tz or timezone.utc).date()


def to_calendar_date(value: Any, *, field: str = "date", tz: tzinfo | None = DEFAULT_TZ) -> date:
    """Normalize a date-like value to a calendar date.

    Accepts `date`, `datetime` and ISO-8601 strings ('YYYY-MM-DD' or a full
    datetime, optional trailing 'Z'). Aware datetimes are converted to `tz`
    before the time of day is dropped; naive ones are taken as local already.
    Raises InvalidDateError for anything else.
    """
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(tz)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_iso(value, field=field, tz=tz)
    raise InvalidDateError(
        f"{field} must be an ISO-8601 date string or a date",
        details={"field": field, "value": repr(value)},
    )


def _parse_iso(raw: str, *, field: str, tz: tzinfo | None) -> date:
    s = raw.strip()
    if not s:
        raise InvalidDateError(f"{field} is empty", details={"field": field, "value": raw})
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError as exc:
        raise InvalidDateError(
            f"{field} is not a valid calendar date: {raw!r}",
            details={"field": field, "value": raw},
        ) from exc
    return to_calendar_date(dt, field=field, tz=tz)
