"""
Centralized logging configuration for the CPI change calculator.

This module provides standardized logging configuration using structlog
for all components. Loader and rebaser code should log through loggers
obtained here so output stays structured and consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_query_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for range queries.

    Every record carries the rebaser subsystem tag so query outcomes can be
    filtered out of the general application log.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for range queries
    """
    return get_logger(name).bind(subsystem="rebaser")


def log_query_result(
    logger: FilteringBoundLogger,
    start: Any,
    end: Any,
    succeeded: bool,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a range query with standardized format.

    Args:
        logger: Structlog logger instance
        start: Requested start month
        end: Requested end month
        succeeded: Whether a ChangeResult was produced
        reason: Short outcome description (error class or "ok")
        context: Additional context data
    """
    bound_logger = logger.bind(
        range_start=str(start) if start is not None else None,
        range_end=str(end) if end is not None else None,
        query_result="OK" if succeeded else "FAILED",
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.info("Range query completed")
    else:
        bound_logger.warning("Range query failed")
