"""
Canonical data models for CPI series and change results.

This module defines immutable data structures. The canonical series is
created once at load time and every query derives a fresh result from it,
so nothing here is ever modified in place.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Observation:
    """Single price-index reading."""
    date: date         # Calendar date of the reading
    value: float       # Index level (or percent change once rebased)

    def __post_init__(self):
        if not math.isfinite(self.value):
            raise ValueError(f"Observation value must be finite, got {self.value}")


@dataclass(frozen=True)
class Series:
    """Ordered sequence of observations, kept in source order."""
    observations: tuple[Observation, ...] = ()

    @classmethod
    def from_pairs(cls, pairs) -> "Series":
        """Build a series from (date, value) pairs."""
        return cls(tuple(Observation(date=d, value=float(v)) for d, v in pairs))

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self.observations)

    def __getitem__(self, index: int) -> Observation:
        return self.observations[index]

    @property
    def is_empty(self) -> bool:
        return not self.observations

    @property
    def first(self) -> Optional[Observation]:
        """First observation, None if empty."""
        return self.observations[0] if self.observations else None

    @property
    def last(self) -> Optional[Observation]:
        """Last observation, None if empty."""
        return self.observations[-1] if self.observations else None

    def pairs(self) -> list[tuple[date, float]]:
        """Series as a list of (date, value) tuples."""
        return [(o.date, o.value) for o in self.observations]


@dataclass(frozen=True)
class DateRange:
    """User selected month range; either end may still be unset."""
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class ChangeResult:
    """Outcome of one range query."""
    percent_change: float       # Rounded to the display precision
    rebased_series: Series      # Percent change of each point vs. the first one
    date_range: DateRange
    precision: int = 2

    @property
    def formatted_change(self) -> str:
        """Percent change with a fixed number of decimals, e.g. '10.00'."""
        return f"{self.percent_change:.{self.precision}f}"


@dataclass(frozen=True)
class LoadStats:
    """Row counters for a single load."""
    rows_total: int = 0
    rows_loaded: int = 0

    @property
    def rows_dropped(self) -> int:
        return self.rows_total - self.rows_loaded


@dataclass(frozen=True)
class Notification:
    """Transient user-facing message for the presentation layer."""
    title: str
    description: str
    status: str = "error"           # error, warning, info, success
    duration_ms: int = 5000
    is_closable: bool = True


@dataclass(frozen=True)
class QueryOutcome:
    """Result of a calculator query: either a result or a notification."""
    result: Optional[ChangeResult] = None
    notification: Optional[Notification] = None

    @property
    def ok(self) -> bool:
        return self.result is not None
