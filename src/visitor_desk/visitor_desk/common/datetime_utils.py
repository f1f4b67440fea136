from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.constants import DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_utc() -> datetime:
    """Current server time (UTC).

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def date_key(value: datetime) -> str:
    """Calendar-day key used to group records, from the timestamp itself."""
    return as_utc(value).strftime(DATE_FORMAT)


def today_key() -> str:
    return date_key(now_utc())


def to_iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    return as_utc(value).isoformat().replace("+00:00", "Z")
