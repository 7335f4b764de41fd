from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.constants import DATE_FORMAT, TIMESTAMP_FORMAT
from ..core.exceptions import InvalidDateError


def parse_calendar_date(value: Any) -> date:
    """Parse a session date and drop any time-of-day component.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and ISO 8601
    date-times. Aware date-times are converted to UTC before the date is taken.
    Non-ISO forms such as ``2024/03/10`` or ``10/03/2024`` are rejected rather
    than guessed at, since their day/month order is ambiguous.
    """
    if isinstance(value, datetime):
        return _utc_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError("Session date is not a valid date")

    text = value.strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        pass
    try:
        return _utc_date(datetime.fromisoformat(text))
    except ValueError:
        raise InvalidDateError("Session date is not a valid date")


def _utc_date(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def now_utc() -> datetime:
    """Current UTC time as a naive datetime (the store keeps UTC DATETIME columns).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


def format_date(value: Optional[date]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value else None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(TIMESTAMP_FORMAT) if value else None
