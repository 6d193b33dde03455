from __future__ import annotations

from datetime import date, datetime, timezone


def coerce_date(value: object) -> date | None:
    """Return a calendar date for ``value`` or ``None`` when it is unusable.

    Accepts ``date``/``datetime`` objects and ISO strings (with optional
    trailing 'Z'). Aware datetimes are converted to UTC before taking the day.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return coerce_date(datetime.fromisoformat(s))
        except ValueError:
            try:
                return date.fromisoformat(s)
            except ValueError:
                return None
    return None


def ensure_aware(value: datetime | None) -> datetime:
    if value is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_between(later: date, earlier: date) -> int:
    return (later - earlier).days


def utc_today() -> date:
    return datetime.now(timezone.utc).date()
