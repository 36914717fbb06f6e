"""Default configuration parameters for the CPI change calculator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceParams:
    """Input resource location and column layout."""
    location: str = "data/cpi_data.csv"     # Path (relative to project root) or http(s) URL
    date_column: str = "Date"
    value_column: str = "CPI"
    delimiter: str = ","
    timeout_seconds: float = 10.0           # Only used for http(s) locations


@dataclass(frozen=True)
class RebaseParams:
    """Change calculation parameters."""
    precision: int = 2                      # Decimal places of the displayed change


@dataclass(frozen=True)
class NotificationParams:
    """User notification parameters."""
    duration_ms: int = 5000
    is_closable: bool = True


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    source: SourceParams
    rebase: RebaseParams
    notification: NotificationParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        source=SourceParams(),
        rebase=RebaseParams(),
        notification=NotificationParams(),
        logging=LoggingParams(),
    )


def config_from_dict(values: dict) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary."""
    return DefaultConfig(
        source=SourceParams(**values.get("source", {})),
        rebase=RebaseParams(**values.get("rebase", {})),
        notification=NotificationParams(**values.get("notification", {})),
        logging=LoggingParams(**values.get("logging", {})),
    )
