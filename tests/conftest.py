"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from pathlib import Path

import pytest

from cpi_delta.config.defaults import config_from_dict
from cpi_delta.data.models import Series


@pytest.fixture
def sample_csv_text() -> str:
    """CPI export with a few malformed rows mixed in."""
    return (
        "Date,CPI\n"
        "2020-01-01,100.0\n"
        "2020-02-01,102.0\n"
        ",103.0\n"
        "2020-03-01,\n"
        "not-a-date,104.0\n"
        "2020-04-01,abc\n"
        "2020-05-01,105.0\n"
        "2020-06-01,110.0\n"
    )


@pytest.fixture
def monthly_series() -> Series:
    """One observation per month of 2020, index rising by 1 each month."""
    return Series.from_pairs(
        (date(2020, month, 1), 100.0 + month - 1) for month in range(1, 13)
    )


@pytest.fixture
def daily_series() -> Series:
    """One observation per day from 2020-01-01 through 2020-04-30."""
    start = date(2020, 1, 1)
    days = (date(2020, 5, 1) - start).days
    return Series.from_pairs(
        (start + timedelta(days=i), 200.0 + i) for i in range(days)
    )


@pytest.fixture
def cpi_csv_file(tmp_path: Path, sample_csv_text: str) -> Path:
    """Sample CPI export written to disk."""
    path = tmp_path / "cpi_data.csv"
    path.write_text(sample_csv_text, encoding="utf-8")
    return path


@pytest.fixture
def calculator_config(cpi_csv_file: Path):
    """Default configuration pointed at the sample CPI file."""
    return config_from_dict({"source": {"location": str(cpi_csv_file)}})
