"""Range filtering, percent change and rebasing for CPI series"""

import math
from datetime import date

from ..data.models import ChangeResult, DateRange, Observation, Series
from ..errors import ComputationError, RangeEmptyError, ValidationError
from ..utils.time import month_end, month_start


def month_window(date_range: DateRange) -> tuple[date, date]:
    """
    Inclusive date window covered by a month range

    The lower bound is the first day of the start month and the upper bound
    the last day of the end month, so the whole end month is captured.

    Args:
        date_range: Range with both ends set

    Returns:
        (lower, upper) dates, both inclusive

    Raises:
        ValidationError: If either end of the range is unset
    """
    missing = [name for name in ("start", "end") if getattr(date_range, name) is None]
    if missing:
        raise ValidationError(
            "Both a start and an end month are required",
            missing_fields=missing,
        )

    return month_start(date_range.start), month_end(date_range.end)


def filter_range(series: Series, date_range: DateRange) -> Series:
    """
    Keep the observations falling inside the month window

    A start month after the end month yields an empty series rather than
    an error.
    """
    lower, upper = month_window(date_range)
    return Series(tuple(o for o in series if lower <= o.date <= upper))


def percent_change(base: float, value: float) -> float:
    """
    Percentage change of value relative to base

    change = (value - base) / base * 100

    Raises:
        ComputationError: If base is zero or the result is not finite
    """
    if base == 0:
        raise ComputationError(
            "Cannot compute a percent change against a zero baseline",
            operation="percent_change",
            operands={"base": base, "value": value},
        )

    change = (value - base) / base * 100.0

    if not math.isfinite(change):
        raise ComputationError(
            f"Percent change is not finite: {change}",
            operation="percent_change",
            operands={"base": base, "value": value},
        )

    return change


def rebase(series: Series, date_range: DateRange, *, precision: int = 2) -> ChangeResult:
    """
    Compute the change over a month range and rebase the range to its first point

    The input series is never modified; calling this repeatedly with
    different ranges on the same series always starts from the original
    values.

    Args:
        series: Canonical series in chronological order
        date_range: Month range to evaluate
        precision: Decimal places kept in the reported percent change

    Returns:
        ChangeResult with the rounded change and the rebased window

    Raises:
        ValidationError: If either end of the range is unset
        RangeEmptyError: If no observation falls inside the range
        ComputationError: If the first observation in range is zero
    """
    window = filter_range(series, date_range)

    if window.is_empty:
        raise RangeEmptyError(
            "No data found for the selected dates",
            start=date_range.start,
            end=date_range.end,
        )

    base = window.first.value
    change = percent_change(base, window.last.value)

    rebased = Series(tuple(
        Observation(date=o.date, value=percent_change(base, o.value))
        for o in window
    ))

    return ChangeResult(
        percent_change=round(change, precision) + 0.0,  # no "-0.00"
        rebased_series=rebased,
        date_range=date_range,
        precision=precision,
    )
