"""
CPI change calculator session.

Coordinates loading the canonical series once at startup and answering
range queries against it, turning every failure into a user notification
so nothing propagates uncaught to the presentation layer.
"""

from pathlib import Path
from typing import Any, Optional, Union

import orjson
import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.loader import load_series, parse_series_with_stats
from .data.models import (
    ChangeResult,
    DateRange,
    Notification,
    QueryOutcome,
    Series,
)
from .errors import (
    ComputationError,
    RangeEmptyError,
    ResourceError,
    ValidationError,
)
from .logging.config import configure_logging, get_query_logger, log_query_result
from .metrics.rebase import rebase
from .utils.time import MonthLike, to_month

logger = structlog.get_logger(__name__)
query_logger = get_query_logger(__name__)

LOAD_ERROR = ("Error loading data", "Failed to load CPI data")
MISSING_RANGE = ("Missing date range", "Please select both a start and an end month")
EMPTY_RANGE = ("No data in range", "No data found for the selected dates")
CALCULATION_ERROR = ("Calculation error", "An error occurred while calculating the CPI change")


class CpiChangeCalculator:
    """
    Stateful front for the loader and the rebaser.

    Holds the canonical series published at startup, the series currently
    shown on the chart and the last successful result. Queries always run
    against the canonical series, never against a previous result.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 config_dir: Optional[Union[str, Path]] = None,
                 setup_logging: bool = False) -> None:
        """Initialize the calculator with merged configuration."""
        self.logger = logger
        self.query_logger = query_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)

        if config is None:
            merged = self.config_loader.merge_config()
            errors = ConfigValidator.validate_config(merged)
            if errors:
                error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
                raise ValueError(f"Invalid configuration: {'; '.join(error_msgs)}")
            config = self.config_loader.load()

        self.config = config

        if setup_logging:
            configure_logging(level=config.logging.level, format_json=config.logging.format_json)

        self._series = Series()
        self._display_series = Series()
        self._last_result: Optional[ChangeResult] = None
        self._loaded = False

        self.logger.info("CPI change calculator initialized")

    @property
    def series(self) -> Series:
        """Canonical series; empty until a load succeeds."""
        return self._series

    @property
    def display_series(self) -> Series:
        """Series the chart should currently show."""
        return self._display_series

    @property
    def last_result(self) -> Optional[ChangeResult]:
        return self._last_result

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def start(self) -> Optional[Notification]:
        """
        Load the configured resource once.

        Returns:
            None on success, otherwise the load error notification. The
            calculator stays usable with an empty dataset after a failure.
        """
        source = self.config.source
        location = self.config_loader.resolve_location(source.location)

        try:
            series = load_series(
                location,
                date_column=source.date_column,
                value_column=source.value_column,
                delimiter=source.delimiter,
                timeout=source.timeout_seconds,
            )
        except ResourceError as e:
            self.logger.error("CPI data load failed", location=location, error=str(e))
            self._publish(Series(), loaded=False)
            return self._notify(*LOAD_ERROR)

        self._publish(series, loaded=True)
        return None

    def load_text(self, raw_text: str) -> Optional[Notification]:
        """Publish a series parsed from already fetched text; same contract as start()."""
        source = self.config.source

        try:
            series, stats = parse_series_with_stats(
                raw_text,
                date_column=source.date_column,
                value_column=source.value_column,
                delimiter=source.delimiter,
            )
        except ResourceError as e:
            self.logger.error("CPI data parse failed", error=str(e))
            self._publish(Series(), loaded=False)
            return self._notify(*LOAD_ERROR)

        self.logger.info(
            "CPI data loaded",
            rows_total=stats.rows_total,
            rows_loaded=stats.rows_loaded,
            rows_dropped=stats.rows_dropped,
        )
        self._publish(series, loaded=True)
        return None

    def calculate_change(self, start: Optional[MonthLike],
                         end: Optional[MonthLike]) -> QueryOutcome:
        """
        Compute the change between two months of the canonical series.

        Never raises. On failure the previous result and chart series are
        left untouched and the outcome carries a notification instead.

        Args:
            start: Start month (date, datetime, "YYYY-MM" or None)
            end: End month (date, datetime, "YYYY-MM" or None)

        Returns:
            QueryOutcome with either a ChangeResult or a Notification
        """
        try:
            date_range = self._build_range(start, end)
            result = rebase(self._series, date_range, precision=self.config.rebase.precision)

        except ValidationError as e:
            log_query_result(self.query_logger, start, end, False, "missing_range",
                             context={"missing_fields": e.missing_fields})
            return QueryOutcome(notification=self._notify(*MISSING_RANGE))

        except RangeEmptyError:
            log_query_result(self.query_logger, start, end, False, "range_empty",
                             context={"series_length": len(self._series)})
            return QueryOutcome(notification=self._notify(*EMPTY_RANGE))

        except ComputationError as e:
            log_query_result(self.query_logger, start, end, False, "computation_error",
                             context={"operation": e.operation, "operands": e.operands})
            return QueryOutcome(notification=self._notify(*CALCULATION_ERROR))

        except Exception as e:
            self.logger.error("Unexpected error during change calculation",
                              error=str(e), exc_info=True)
            log_query_result(self.query_logger, start, end, False, type(e).__name__)
            return QueryOutcome(notification=self._notify(*CALCULATION_ERROR))

        self._last_result = result
        self._display_series = result.rebased_series

        log_query_result(self.query_logger, date_range.start, date_range.end, True, "ok",
                         context={"percent_change": result.percent_change,
                                  "points": len(result.rebased_series)})
        return QueryOutcome(result=result)

    def chart_payload(self) -> dict[str, Any]:
        """Current chart contents for the presentation layer."""
        result = self._last_result
        return {
            "rebased": result is not None,
            "percent_change": result.formatted_change if result else None,
            "points": [
                {"date": o.date.isoformat(), "value": o.value}
                for o in self._display_series
            ],
        }

    def chart_json(self) -> bytes:
        """chart_payload() serialized as JSON."""
        return orjson.dumps(self.chart_payload())

    def _build_range(self, start: Optional[MonthLike], end: Optional[MonthLike]) -> DateRange:
        """Coerce picker values into a DateRange, rejecting unreadable months."""
        invalid = []
        months = {}
        for name, value in (("start", start), ("end", end)):
            try:
                months[name] = to_month(value)
            except ValueError:
                invalid.append(name)

        if invalid:
            raise ValidationError(
                f"Unreadable month value for: {', '.join(invalid)}",
                missing_fields=invalid,
            )

        return DateRange(start=months["start"], end=months["end"])

    def _publish(self, series: Series, *, loaded: bool) -> None:
        """Swap in a fully parsed series and reset derived state."""
        self._series = series
        self._display_series = series
        self._last_result = None
        self._loaded = loaded

    def _notify(self, title: str, description: str, status: str = "error") -> Notification:
        params = self.config.notification
        return Notification(
            title=title,
            description=description,
            status=status,
            duration_ms=params.duration_ms,
            is_closable=params.is_closable,
        )
