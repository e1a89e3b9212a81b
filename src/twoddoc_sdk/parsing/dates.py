"""
Date decoding for 2D-DOC headers and bodies

Two encodings are used across 2D-DOC fields:

- header dates are a 4 digit hexadecimal number of days since 2000-01-01;
- body dates are plain ASCII ``DDMMYYYY`` or ``DDMMYYYYHHmm`` strings.

Empty or all-zero values are returned unchanged so that callers can tell
an unknown date apart from a decoded one.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

# Day zero of the header date encoding
DATE_REFERENCE = datetime(2000, 1, 1, tzinfo=timezone.utc)

ASCII_DATE_LENGTH = 8
ASCII_DATETIME_LENGTH = 12


def hex_date_to_calendar(hex_value: str) -> Optional[date]:
    """
    Convert a header hex date into a calendar date.

    Args:
        hex_value: Hexadecimal day count since 2000-01-01 (e.g. "1337")

    Returns:
        Optional[date]: The decoded date, or None when the value is empty or zero

    Raises:
        ValueError: If the value is not hexadecimal
    """
    days = int(hex_value, 16) if hex_value else 0
    if days == 0:
        return None

    return (DATE_REFERENCE + timedelta(seconds=days * 24 * 3600)).date()


def decode_hex_date(hex_value: str) -> str:
    """
    Render a header hex date the way 2D-DOC readers historically did.

    The rendering is ``W/M/YYYY`` where ``W`` is the day of the week
    (Sunday is 0) and ``M`` is the zero-based month, so "1337"
    (2013-06-20, a Thursday) becomes "4/5/2013". Use
    :func:`hex_date_to_calendar` for the actual calendar date.

    Args:
        hex_value: Hexadecimal day count since 2000-01-01

    Returns:
        str: Rendered date, or ``hex_value`` unchanged when it is empty or zero

    Raises:
        ValueError: If the value is not hexadecimal
    """
    decoded = hex_date_to_calendar(hex_value)
    if decoded is None:
        return hex_value

    weekday = decoded.isoweekday() % 7
    return f"{weekday}/{decoded.month - 1}/{decoded.year}"


def decode_ascii_date(value: str) -> str:
    """Turn ``DDMMYYYY`` into ``DD/MM/YYYY``; any other length is returned as is."""
    if len(value) != ASCII_DATE_LENGTH:
        return value

    return f"{value[0:2]}/{value[2:4]}/{value[4:8]}"


def decode_ascii_datetime(value: str) -> str:
    """Turn ``DDMMYYYYHHmm`` into ``DD/MM/YYYY HH:mm``; any other length is returned as is."""
    if len(value) != ASCII_DATETIME_LENGTH:
        return value

    return f"{value[0:2]}/{value[2:4]}/{value[4:8]} {value[8:10]}:{value[10:12]}"
