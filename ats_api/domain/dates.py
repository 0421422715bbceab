"""Date normalisation for domain records."""

import re
from datetime import date, datetime
from typing import Any, Optional

from .exceptions import InvalidDateError

# Extended calendar form only; basic form (20200101) is rejected on every Python
_ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


def normalize_date(value: Any, field: str) -> date:
    """
    Return ``value`` as a date.

    Date (and datetime) instances are returned unchanged. Strings must start
    with an extended ISO-8601 date: a plain ``YYYY-MM-DD`` becomes a
    ``date``, anything with a time part becomes a ``datetime``. A trailing
    ``Z`` is read as UTC.
    """
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise InvalidDateError(field, value)

    raw = value.strip()
    if not _ISO_DATE_PREFIX.match(raw):
        raise InvalidDateError(field, value)

    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateError(field, value) from e


def normalize_optional_date(value: Any, field: str) -> Optional[date]:
    """Like normalize_date, but None stays None."""
    if value is None:
        return None
    return normalize_date(value, field)
