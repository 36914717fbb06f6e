"""
System failure error classifications.

These represent calculations that cannot produce a meaningful number,
such as rebasing against a zero baseline.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable calculation failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ComputationError(SystemFailureError):
    """Percentage computation produced no finite result."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 operands: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.operands = operands or {}
