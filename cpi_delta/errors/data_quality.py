"""
Data quality error classifications for CPI series handling.

These exceptions describe problems with the input resource or with the
range a user asked for. None of them are fatal: the calculator reports
them and stays ready for the next query.
"""

from datetime import date
from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class ResourceError(DataQualityError):
    """The input resource could not be fetched or parsed into any rows."""

    def __init__(self, message: str, location: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.location = location


class ValidationError(DataQualityError):
    """The query is missing its start or end month."""

    def __init__(self, message: str, missing_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_fields = missing_fields or []


class RangeEmptyError(DataQualityError):
    """The selected range matches no observations."""

    def __init__(self, message: str, start: Optional[date] = None,
                 end: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.start = start
        self.end = end
