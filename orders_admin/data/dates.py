from __future__ import annotations

from datetime import datetime, timezone
from numbers import Real
from typing import Any, Callable, Optional

import pandas as pd
from google.api_core.datetime_helpers import DatetimeWithNanoseconds

from orders_admin.logger import get_logger

logger = get_logger(__name__)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_datetime(
    value: Any,
    default: Callable[[], Optional[datetime]] = now_utc,
) -> Optional[datetime]:
    """Normalize a date-bearing field from either order source.

    Firestore timestamps come back as ``DatetimeWithNanoseconds``; the REST API
    serializes dates as ISO strings. Strings are parsed with pandas and numbers
    are read as epoch milliseconds. Missing values, and values that cannot be
    recognized, fall back to ``default()`` (the current time unless the caller
    says otherwise). Naive datetimes are assumed to be UTC.

    Args:
        value: Raw field value.
        default: Factory for the value to use when ``value`` is missing or unrecognized.
    Returns:
        datetime | None: A timezone-aware datetime, or whatever ``default`` returns.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default()

    if isinstance(value, DatetimeWithNanoseconds):
        return datetime(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
            tzinfo=value.tzinfo or timezone.utc,
        )
    if isinstance(value, datetime):
        return _as_utc(value)

    parsed = pd.NaT
    if isinstance(value, str):
        parsed = pd.to_datetime(value, errors="coerce", utc=True)
    elif isinstance(value, Real) and not isinstance(value, bool):
        parsed = pd.to_datetime(value, unit="ms", errors="coerce", utc=True)

    if pd.isna(parsed):
        logger.warning(f"Unrecognized date value {value!r} ({type(value).__name__}); using default")
        return default()
    return parsed.to_pydatetime()


def normalize_order_dates(record: dict) -> dict:
    """Return a copy of a raw order record with its date fields normalized.

    ``orderDate`` and ``createdAt`` default to now; ``updatedAt`` stays None when absent.
    """
    normalized = dict(record)
    normalized["orderDate"] = to_datetime(record.get("orderDate"))
    normalized["createdAt"] = to_datetime(record.get("createdAt"))
    normalized["updatedAt"] = to_datetime(record.get("updatedAt"), default=lambda: None)
    return normalized
