"""
Error classification for CPI loading and change calculation.

Data quality errors cover problems with the input resource or the user's
query and are recovered at the query boundary. System failures cover
unexpected breakdowns of the calculation itself.
"""

from .data_quality import (
    DataQualityError,
    RangeEmptyError,
    ResourceError,
    ValidationError,
)
from .system_failures import (
    ComputationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "ResourceError",
    "ValidationError",
    "RangeEmptyError",
    # System Failures
    "SystemFailureError",
    "ComputationError",
]
