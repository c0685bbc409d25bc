from __future__ import annotations

import datetime as _dt
from typing import Any, Iterator


def require_date_iso(value: Any, *, field: str = "date_iso") -> str:
    """
    Ensure value is a valid YYYY-MM-DD (ISO date) and return normalized date ISO.
    Fail-loud.
    """
    if value is None:
        raise ValueError(f"{field} is required (YYYY-MM-DD)")
    if isinstance(value, _dt.date):
        return value.isoformat()[:10]
    s = str(value)[:10]
    try:
        _dt.date.fromisoformat(s)
    except ValueError as exc:
        raise ValueError(f"Invalid {field}: {value!r}") from exc
    return s


def to_date(value: Any, *, field: str = "date") -> _dt.date:
    """Accept a date/datetime or an ISO string and return a plain date."""
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    return _dt.date.fromisoformat(require_date_iso(value, field=field))


def add_days(d: _dt.date, days: int) -> _dt.date:
    return d + _dt.timedelta(days=int(days))


def days_between(start: _dt.date, end: _dt.date) -> int:
    """Signed day count from start to end."""
    return int((end - start).days)


def iter_dates(start: _dt.date, end: _dt.date) -> Iterator[_dt.date]:
    """Yield every calendar day in [start, end] (inclusive)."""
    cur = start
    while cur <= end:
        yield cur
        cur += _dt.timedelta(days=1)


def nth_weekday_of_month(year: int, month: int, weekday: int, nth: int) -> _dt.date:
    """Return the nth occurrence of weekday (Monday=0 .. Sunday=6) in a month."""
    first = _dt.date(int(year), int(month), 1)
    offset = (int(weekday) - first.weekday()) % 7
    return first + _dt.timedelta(days=offset + (int(nth) - 1) * 7)
