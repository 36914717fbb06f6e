"""Change calculation engine for CPI series"""

from .rebase import filter_range, month_window, percent_change, rebase

__all__ = [
    "rebase",
    "filter_range",
    "month_window",
    "percent_change",
]
