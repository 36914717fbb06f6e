"""
Record loader turning delimited CPI text into the canonical series.

This module handles fetching the input resource and parsing it into
Observation objects with proper type conversion. Individual malformed rows
are dropped without raising; only a resource that cannot be read or that
yields no rows at all is reported as a ResourceError.
"""

import io
import math
from datetime import date
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import requests
import structlog

from ..errors import ResourceError
from .models import LoadStats, Observation, Series

logger = structlog.get_logger(__name__)

DEFAULT_DATE_COLUMN = "Date"
DEFAULT_VALUE_COLUMN = "CPI"


def fetch_resource(location: str, *, timeout: float = 10.0) -> str:
    """
    Read the raw text of the input resource.

    Args:
        location: Local file path or http(s) URL
        timeout: Request timeout in seconds for URLs

    Returns:
        Raw resource text

    Raises:
        ResourceError: If the resource is unreachable or empty
    """
    location = str(location)

    if location.startswith(("http://", "https://")):
        try:
            response = requests.get(location, timeout=timeout)
            response.raise_for_status()
            text = response.text
        except requests.RequestException as e:
            raise ResourceError(f"Failed to fetch CPI data: {e}", location=location) from e
    else:
        try:
            # utf-8-sig drops the BOM spreadsheet exports tend to add
            text = Path(location).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(f"Failed to read CPI data: {e}", location=location) from e

    if not text.strip():
        raise ResourceError("CPI data resource is empty", location=location)

    return text


def parse_series(raw_text: str, *,
                 date_column: str = DEFAULT_DATE_COLUMN,
                 value_column: str = DEFAULT_VALUE_COLUMN,
                 delimiter: str = ",",
                 location: Optional[str] = None) -> Series:
    """
    Parse header-delimited text into a Series.

    A row is kept only when both the date and the index field are present
    and parse cleanly. Row order from the source is preserved.

    Args:
        raw_text: Delimited text with a header row
        date_column: Name of the date column
        value_column: Name of the numeric index column
        delimiter: Field separator
        location: Resource location, used for error context only

    Returns:
        Series of parsed observations

    Raises:
        ResourceError: If the text cannot be parsed or yields no rows
    """
    series, _stats = parse_series_with_stats(
        raw_text,
        date_column=date_column,
        value_column=value_column,
        delimiter=delimiter,
        location=location,
    )
    return series


def parse_series_with_stats(raw_text: str, *,
                            date_column: str = DEFAULT_DATE_COLUMN,
                            value_column: str = DEFAULT_VALUE_COLUMN,
                            delimiter: str = ",",
                            location: Optional[str] = None) -> tuple[Series, LoadStats]:
    """Parse like parse_series and also return row counters."""
    frame = _read_frame(raw_text, delimiter, location)

    missing = [c for c in (date_column, value_column) if c not in frame.columns]
    if missing:
        raise ResourceError(
            f"CPI data is missing required columns: {', '.join(missing)}",
            location=location,
            context={"columns": list(frame.columns)},
        )

    dates = [_parse_date(raw) for raw in frame[date_column]]
    values = pd.to_numeric(
        pd.Series([_clean_field(raw) for raw in frame[value_column]], dtype=object),
        errors="coerce",
    )

    observations = []
    for row_number, (obs_date, value) in enumerate(zip(dates, values), start=1):
        if obs_date is None or pd.isna(value) or not math.isfinite(value):
            logger.debug(
                "Dropping malformed CPI row",
                row=row_number,
                date_field=frame[date_column].iloc[row_number - 1],
                value_field=frame[value_column].iloc[row_number - 1],
            )
            continue
        observations.append(Observation(date=obs_date, value=float(value)))

    stats = LoadStats(rows_total=len(frame), rows_loaded=len(observations))

    if not observations:
        raise ResourceError(
            "CPI data contains no usable rows",
            location=location,
            context={"rows_total": stats.rows_total},
        )

    return Series(tuple(observations)), stats


def load_series(location: str, *,
                date_column: str = DEFAULT_DATE_COLUMN,
                value_column: str = DEFAULT_VALUE_COLUMN,
                delimiter: str = ",",
                timeout: float = 10.0) -> Series:
    """
    Fetch and parse the CPI resource.

    Raises:
        ResourceError: If the resource is unreachable, unparsable or empty
    """
    logger.info("Loading CPI data", location=location)

    raw_text = fetch_resource(location, timeout=timeout)
    series, stats = parse_series_with_stats(
        raw_text,
        date_column=date_column,
        value_column=value_column,
        delimiter=delimiter,
        location=location,
    )

    logger.info(
        "CPI data loaded",
        location=location,
        rows_total=stats.rows_total,
        rows_loaded=stats.rows_loaded,
        rows_dropped=stats.rows_dropped,
        first_date=str(series.first.date),
        last_date=str(series.last.date),
    )
    return series


def _read_frame(raw_text: str, delimiter: str, location: Optional[str]) -> pd.DataFrame:
    """Read the text into a frame of raw string fields."""
    if not isinstance(raw_text, str) or not raw_text.strip():
        raise ResourceError("CPI data resource is empty", location=location)

    try:
        frame = pd.read_csv(
            io.StringIO(raw_text),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            on_bad_lines="skip",
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ResourceError(f"Failed to parse CPI data: {e}", location=location) from e

    frame.columns = [str(column).strip() for column in frame.columns]
    return frame


def _clean_field(raw: Any) -> Optional[str]:
    """Strip a raw field, mapping absent or blank fields to None."""
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    return text or None


def _parse_date(raw: Any) -> Optional[date]:
    """Parse a raw date field, None when absent or unparsable."""
    text = _clean_field(raw)
    # Also rejects keywords like "now" that pandas would resolve to the clock
    if text is None or not any(ch.isdigit() for ch in text):
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        timestamp = pd.Timestamp(text)
    except (ValueError, TypeError, OverflowError):
        return None

    if pd.isna(timestamp):
        return None
    return timestamp.date()
