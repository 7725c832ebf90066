"""Query-string parsing shared by the HTML and JSON views."""

from datetime import datetime, timezone as dt_timezone
from typing import Optional

from django.utils.dateparse import parse_datetime

from .exceptions import PreconditionError

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_bool_param(name: str, raw: Optional[str]) -> Optional[bool]:
    """None when the parameter is missing, else its boolean value."""
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise PreconditionError(f"Query parameter {name!r} must be true or false, got {raw!r}")


def parse_instant_param(name: str, raw: Optional[str]) -> Optional[datetime]:
    """
    None when missing, else an aware datetime. Text without an offset is
    taken as UTC (e.g. "2025-09-30T00:00:00" == "2025-09-30T00:00:00Z").
    """
    if raw is None or raw == "":
        return None
    try:
        value = parse_datetime(raw.strip())
    except ValueError:
        value = None
    if value is None:
        raise PreconditionError(f"Query parameter {name!r} is not an ISO-8601 instant: {raw!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt_timezone.utc)
    return value
