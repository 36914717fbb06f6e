"""Tests for range filtering, percent change and rebasing"""

from datetime import date

import pytest

from cpi_delta.data.models import DateRange, Series
from cpi_delta.errors import ComputationError, RangeEmptyError, ValidationError
from cpi_delta.metrics.rebase import filter_range, month_window, percent_change, rebase


class TestMonthWindow:
    """Test month boundary normalization"""

    def test_window_spans_whole_months(self):
        """Start snaps to the 1st, end to the last day of its month"""
        window = month_window(DateRange(start=date(2020, 1, 15), end=date(2020, 2, 3)))
        assert window == (date(2020, 1, 1), date(2020, 2, 29))

    def test_window_end_of_year(self):
        """December ends on the 31st"""
        window = month_window(DateRange(start=date(2021, 12, 1), end=date(2021, 12, 1)))
        assert window == (date(2021, 12, 1), date(2021, 12, 31))

    @pytest.mark.parametrize("start,end,missing", [
        (None, date(2020, 1, 1), ["start"]),
        (date(2020, 1, 1), None, ["end"]),
        (None, None, ["start", "end"]),
    ])
    def test_missing_ends(self, start, end, missing):
        """Both ends are required"""
        with pytest.raises(ValidationError) as exc_info:
            month_window(DateRange(start=start, end=end))
        assert exc_info.value.missing_fields == missing


class TestFilterRange:
    """Test inclusive range filtering"""

    def test_end_month_is_inclusive(self, daily_series):
        """Every day through March 31 is kept, April is excluded"""
        window = filter_range(daily_series, DateRange(start=date(2020, 1, 1), end=date(2020, 3, 1)))

        assert window.first.date == date(2020, 1, 1)
        assert window.last.date == date(2020, 3, 31)
        assert len(window) == 31 + 29 + 31
        assert all(o.date < date(2020, 4, 1) for o in window)

    def test_start_after_end_matches_nothing(self, monthly_series):
        """Reversed range is not an error, it is just empty"""
        window = filter_range(monthly_series, DateRange(start=date(2020, 6, 1), end=date(2020, 3, 1)))
        assert window.is_empty

    def test_keeps_source_order(self):
        """Filtered observations stay in input order"""
        series = Series.from_pairs([
            (date(2020, 3, 1), 3.0),
            (date(2020, 1, 1), 1.0),
            (date(2020, 2, 1), 2.0),
        ])
        window = filter_range(series, DateRange(start=date(2020, 1, 1), end=date(2020, 3, 1)))
        assert [o.value for o in window] == [3.0, 1.0, 2.0]


class TestPercentChange:
    """Test the percent change formula"""

    def test_increase(self):
        assert percent_change(100.0, 110.0) == pytest.approx(10.0)

    def test_decrease(self):
        assert percent_change(200.0, 150.0) == pytest.approx(-25.0)

    def test_zero_base(self):
        """Zero baseline cannot be divided by"""
        with pytest.raises(ComputationError) as exc_info:
            percent_change(0.0, 5.0)

        assert exc_info.value.operation == "percent_change"
        assert exc_info.value.operands == {"base": 0.0, "value": 5.0}

    def test_overflow_is_not_finite(self):
        """Results that overflow to infinity are rejected"""
        with pytest.raises(ComputationError):
            percent_change(1e-300, 1e300)


class TestRebase:
    """Test the full rebase calculation"""

    def test_two_point_change(self):
        """100 -> 110 is a 10% change"""
        series = Series.from_pairs([(date(2020, 1, 1), 100.0), (date(2020, 6, 1), 110.0)])
        result = rebase(series, DateRange(start=date(2020, 1, 1), end=date(2020, 6, 1)))

        assert result.percent_change == 10.0
        assert result.formatted_change == "10.00"
        assert [o.date for o in result.rebased_series] == [date(2020, 1, 1), date(2020, 6, 1)]
        assert [o.value for o in result.rebased_series] == pytest.approx([0.0, 10.0])

    def test_single_point_range(self, monthly_series):
        """One matching observation gives a zero change"""
        result = rebase(monthly_series, DateRange(start=date(2020, 4, 1), end=date(2020, 4, 1)))

        assert result.percent_change == 0.0
        assert result.formatted_change == "0.00"
        assert len(result.rebased_series) == 1
        assert result.rebased_series[0].value == 0.0

    def test_negative_base_single_point_has_no_negative_zero(self):
        """Rounding never produces -0.00"""
        series = Series.from_pairs([(date(2020, 1, 1), -5.0)])
        result = rebase(series, DateRange(start=date(2020, 1, 1), end=date(2020, 1, 1)))

        assert result.formatted_change == "0.00"

    def test_change_is_rounded(self):
        """Reported change keeps two decimals by default, rebased points are exact"""
        series = Series.from_pairs([(date(2020, 1, 1), 3.0), (date(2020, 2, 1), 4.0)])
        result = rebase(series, DateRange(start=date(2020, 1, 1), end=date(2020, 2, 1)))

        assert result.percent_change == 33.33
        assert result.rebased_series.last.value == pytest.approx(100.0 / 3.0)

    def test_custom_precision(self):
        series = Series.from_pairs([(date(2020, 1, 1), 3.0), (date(2020, 2, 1), 4.0)])
        result = rebase(series, DateRange(start=date(2020, 1, 1), end=date(2020, 2, 1)), precision=4)

        assert result.percent_change == 33.3333
        assert result.formatted_change == "33.3333"

    def test_uses_first_and_last_in_range(self, monthly_series):
        """Only the window's end points drive the change"""
        result = rebase(monthly_series, DateRange(start=date(2020, 3, 1), end=date(2020, 5, 1)))

        # 102 -> 104
        assert result.percent_change == pytest.approx(1.96)
        assert len(result.rebased_series) == 3
        assert result.rebased_series.first.value == 0.0

    def test_input_is_not_mutated(self, monthly_series):
        """Rebasing twice starts from the original values both times"""
        before = monthly_series.pairs()

        first = rebase(monthly_series, DateRange(start=date(2020, 1, 1), end=date(2020, 12, 1)))
        second = rebase(monthly_series, DateRange(start=date(2020, 6, 1), end=date(2020, 12, 1)))

        assert monthly_series.pairs() == before
        assert first.percent_change == pytest.approx(11.0)
        # 105 -> 111, unaffected by the first call
        assert second.percent_change == pytest.approx(5.71)

    def test_empty_range(self, monthly_series):
        """No data in range raises and leaves the series untouched"""
        before = monthly_series.pairs()

        with pytest.raises(RangeEmptyError) as exc_info:
            rebase(monthly_series, DateRange(start=date(2022, 1, 1), end=date(2022, 6, 1)))

        assert exc_info.value.start == date(2022, 1, 1)
        assert monthly_series.pairs() == before

    def test_zero_baseline(self):
        """First value of zero fails instead of returning infinity"""
        series = Series.from_pairs([(date(2020, 1, 1), 0.0), (date(2020, 2, 1), 5.0)])

        with pytest.raises(ComputationError):
            rebase(series, DateRange(start=date(2020, 1, 1), end=date(2020, 2, 1)))

    def test_missing_range(self, monthly_series):
        with pytest.raises(ValidationError):
            rebase(monthly_series, DateRange(start=date(2020, 1, 1)))

    def test_result_keeps_range(self, monthly_series):
        date_range = DateRange(start=date(2020, 1, 1), end=date(2020, 2, 1))
        result = rebase(monthly_series, date_range)
        assert result.date_range == date_range
