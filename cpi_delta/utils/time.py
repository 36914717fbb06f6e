"""
Month precision date helpers.

Query ranges are expressed in whole months while observations may carry any
calendar day, so both range ends are snapped to month boundaries here.
"""

import calendar
import re
from datetime import date, datetime
from typing import Optional, Union

MonthLike = Union[date, datetime, str]

_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})\s*$")


def month_start(value: date) -> date:
    """Return the first calendar day of the month containing value."""
    return date(value.year, value.month, 1)


def month_end(value: date) -> date:
    """Return the last calendar day of the month containing value."""
    last_day = calendar.monthrange(value.year, value.month)[1]
    return date(value.year, value.month, last_day)


def to_month(value: Optional[MonthLike]) -> Optional[date]:
    """
    Coerce a user supplied month into the first day of that month.

    Accepts date and datetime objects and "YYYY-MM" or "YYYY-MM-DD" strings.
    None and blank strings mean the picker was left unset.

    Args:
        value: Month selection from the query interface

    Returns:
        First day of the selected month, or None when unset

    Raises:
        ValueError: If a string cannot be read as a month
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return month_start(value.date())

    if isinstance(value, date):
        return month_start(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None

        match = _MONTH_PATTERN.match(text)
        if match:
            return date(int(match.group(1)), int(match.group(2)), 1)

        return month_start(date.fromisoformat(text))

    raise ValueError(f"Unsupported month value: {value!r}")


def format_month(value: date) -> str:
    """Render a month as YYYY-MM."""
    return f"{value.year:04d}-{value.month:02d}"
