"""
Logging configuration and utilities for the CPI change calculator.
"""
from .config import configure_logging, get_logger, get_query_logger, log_query_result

__all__ = ["configure_logging", "get_logger", "get_query_logger", "log_query_result"]
