#!/usr/bin/env python3

from __future__ import annotations

from datetime import date, datetime

from beancount_import_coda.errors import UnknownDateFormat
from beancount_import_coda.stream import FieldCursor

UNKNOWN_DATE = "000000"


def century_year(yy: int, today: date | None = None) -> int:
    """Expand a 2-digit year within the century of the current year."""
    today = today or date.today()
    return today.year // 100 * 100 + yy


def parse_date(value: str, today: date | None = None) -> date | datetime | None:
    """Decode DDMMYY, DDMMYYYY or DDMMYYHHMM.

    Two digit years are placed in the current century. ``000000`` is the
    format's marker for an unknown date and decodes to None, as does a blank
    field of a valid width.
    """
    if value == UNKNOWN_DATE:
        return None
    if len(value) in (6, 8, 10) and not value.strip():
        return None
    if not value.isdigit():
        raise UnknownDateFormat(value, "not a digit sequence")

    cursor = FieldCursor(value)
    try:
        if len(value) == 6:
            day, month = cursor.take_int(2), cursor.take_int(2)
            return date(century_year(cursor.take_int(2), today), month, day)
        if len(value) == 8:
            day, month = cursor.take_int(2), cursor.take_int(2)
            return date(cursor.take_int(4), month, day)
        if len(value) == 10:
            day, month, year, hour, minute = (cursor.take_int(2) for _ in range(5))
            return datetime(century_year(year, today), month, day, hour, minute)
    except ValueError as e:
        raise UnknownDateFormat(value, str(e)) from e
    raise UnknownDateFormat(value)
