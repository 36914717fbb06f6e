"""Tests for month precision date helpers."""

from datetime import date, datetime

import pytest

from cpi_delta.utils.time import format_month, month_end, month_start, to_month


class TestMonthBoundaries:
    """Test month start and end helpers."""

    def test_month_start(self) -> None:
        assert month_start(date(2020, 3, 17)) == date(2020, 3, 1)

    @pytest.mark.parametrize("value,expected", [
        (date(2020, 2, 10), date(2020, 2, 29)),   # leap year
        (date(2021, 2, 10), date(2021, 2, 28)),
        (date(2020, 4, 1), date(2020, 4, 30)),
        (date(2020, 12, 31), date(2020, 12, 31)),
    ])
    def test_month_end(self, value, expected) -> None:
        assert month_end(value) == expected


class TestToMonth:
    """Test coercion of picker values."""

    def test_none_and_blank_are_unset(self) -> None:
        assert to_month(None) is None
        assert to_month("  ") is None

    def test_date_snaps_to_first_day(self) -> None:
        assert to_month(date(2020, 5, 20)) == date(2020, 5, 1)

    def test_datetime_snaps_to_first_day(self) -> None:
        assert to_month(datetime(2020, 5, 20, 13, 45)) == date(2020, 5, 1)

    @pytest.mark.parametrize("text", ["2020-05", "2020-5", " 2020-05 ", "2020-05-20"])
    def test_strings(self, text) -> None:
        assert to_month(text) == date(2020, 5, 1)

    @pytest.mark.parametrize("text", ["May 2020", "2020-13", "20-05"])
    def test_unreadable_strings(self, text) -> None:
        with pytest.raises(ValueError):
            to_month(text)

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValueError):
            to_month(202005)


class TestFormatMonth:
    def test_format(self) -> None:
        assert format_month(date(2020, 1, 31)) == "2020-01"
