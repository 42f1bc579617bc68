"""Literal text of scalar property values, as written after the property colon."""

import json
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from ..enumeration import DateFormatHandling
from ..schema import SerializerSettings

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
MICROSOFT_LONG_DATE_FORMAT = "%A, %d %B %Y %H:%M:%S"
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_milliseconds(value: datetime) -> int:
    """Milliseconds elapsed since the Unix epoch, naive values taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _UNIX_EPOCH) // timedelta(milliseconds=1)


def _quote(text: str) -> str:
    return f'"{text}"'


def format_iso(value: datetime) -> str:
    """`yyyy-MM-ddTHH:mm:ss[.fffffff]K`: fraction without trailing zeros, `Z` for UTC, `+hh:mm` otherwise."""
    text = value.strftime(ISO_DATE_FORMAT)
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset()
    if offset is None:
        return text
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(abs(offset) // timedelta(minutes=1), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def format_date(value: date, settings: SerializerSettings) -> str:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())

    if settings.date_format_string and settings.date_format_string.strip():
        return _quote(value.strftime(settings.date_format_string))

    if settings.date_format_handling is DateFormatHandling.ISO:
        return _quote(format_iso(value))
    if settings.date_format_handling is DateFormatHandling.MICROSOFT_LONG:
        return _quote(value.strftime(MICROSOFT_LONG_DATE_FORMAT))
    return _quote(f"\\/Date({epoch_milliseconds(value)})\\/")


def format_value(value: Any, settings: SerializerSettings | None = None) -> str:
    """Render one scalar value.

    Args:
        value: None, a number, a date/datetime, an enum member or anything else.
        settings: Date and string rendering options.

    Returns:
        `null`, an unquoted number or boolean literal, or a quoted string.
        Strings are not escaped unless `settings.escape_strings` is set.
    """
    if settings is None:
        settings = SerializerSettings()

    if value is None:
        return "null"
    # bool and IntEnum are ints, check them first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return format_value(str(value.value), settings)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # the mirrored serializer writes an uppercase exponent marker
        return json.dumps(value).replace("e", "E")
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return format_date(value, settings)

    if settings.escape_strings:
        return json.dumps(str(value), ensure_ascii=False)
    return _quote(str(value))
