"""Timestamp conversion and day arithmetic."""

from datetime import datetime, timedelta, timezone
from typing import Any

# 1601-01-01, start of the Windows FILETIME epoch
FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)

SECONDS_PER_DAY = 86400


class InvalidTimestampError(ValueError):
    """Raised when a password-last-set value cannot be interpreted."""

    pass


def filetime_to_datetime(filetime: int) -> datetime:
    """
    Convert a Windows FILETIME to an aware UTC datetime.

    Args:
        filetime: 100-nanosecond intervals since 1601-01-01 UTC

    Returns:
        Aware datetime in UTC

    Raises:
        InvalidTimestampError: If value is zero, negative or out of range

    Examples:
        >>> filetime_to_datetime(116444736000000000)
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if filetime <= 0:
        # pwdLastSet=0 means "must change at next logon"
        raise InvalidTimestampError(f"FILETIME value is not a point in time: {filetime}")
    try:
        return FILETIME_EPOCH + timedelta(microseconds=filetime // 10)
    except OverflowError as e:
        raise InvalidTimestampError(f"FILETIME value out of range: {filetime}") from e


def to_datetime(value: Any) -> datetime:
    """
    Interpret a raw password-last-set value.

    Accepts datetimes, integer FILETIMEs (also as digit strings) and
    ISO-8601 strings.

    Raises:
        InvalidTimestampError: For anything else
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise InvalidTimestampError(f"Not a timestamp: {value!r}")
    if isinstance(value, int):
        return filetime_to_datetime(value)
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return filetime_to_datetime(int(text))
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(f"Unparsable timestamp: {value!r}") from e
    raise InvalidTimestampError(f"Not a timestamp: {value!r}")


def whole_days_between(start: datetime, end: datetime) -> int:
    """
    Number of whole days elapsed from start to end, truncated toward zero.

    A naive datetime is taken to be in the other value's timezone.

    Examples:
        >>> whole_days_between(datetime(2025, 1, 1), datetime(2025, 1, 3, 23, 59))
        2
    """
    if (start.tzinfo is None) != (end.tzinfo is None):
        if start.tzinfo is None:
            start = start.replace(tzinfo=end.tzinfo)
        else:
            end = end.replace(tzinfo=start.tzinfo)
    delta = end - start
    return int(delta.total_seconds() / SECONDS_PER_DAY)


def local_now() -> datetime:
    """Current local wall-clock time as an aware datetime."""
    return datetime.now().astimezone()
