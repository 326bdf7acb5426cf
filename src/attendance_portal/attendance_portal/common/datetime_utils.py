from __future__ import annotations

from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    return date.today()


def now_utc() -> datetime:
    """Current wall-clock time (UTC).

    Injected as the session guard clock; tests pass a fixed one.
    """
    return datetime.now(timezone.utc)
