"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FieldError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[FieldError]:
        """Validate input resource parameters."""
        errors = []

        for name in ("location", "date_column", "value_column"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.strip():
                    errors.append(FieldError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(FieldError(
                    field="delimiter",
                    message="Must be a single character",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(FieldError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if (params.get("date_column") and
                params.get("date_column") == params.get("value_column")):
            errors.append(FieldError(
                field="value_column",
                message="Must differ from date_column",
                value=params["value_column"]
            ))

        return errors

    @staticmethod
    def validate_rebase_params(params: dict[str, Any]) -> list[FieldError]:
        """Validate change calculation parameters."""
        errors = []

        if "precision" in params:
            value = params["precision"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(FieldError(
                    field="precision",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_notification_params(params: dict[str, Any]) -> list[FieldError]:
        """Validate notification parameters."""
        errors = []

        if "duration_ms" in params:
            value = params["duration_ms"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(FieldError(
                    field="duration_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        if "is_closable" in params:
            value = params["is_closable"]
            if not isinstance(value, bool):
                errors.append(FieldError(
                    field="is_closable",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[FieldError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(FieldError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(FieldError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[FieldError]:
        """Validate complete configuration."""
        errors = []

        if "source" in config:
            errors.extend(ConfigValidator.validate_source_params(config["source"]))

        if "rebase" in config:
            errors.extend(ConfigValidator.validate_rebase_params(config["rebase"]))

        if "notification" in config:
            errors.extend(ConfigValidator.validate_notification_params(config["notification"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
