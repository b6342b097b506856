"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import ROUNDING_MODES, ZERO_BASE_POLICIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_ACCURACY = 10


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_percentage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate percentage parameters."""
        errors = []

        # bool is an int subclass, reject it explicitly
        if "accuracy" in params:
            value = params["accuracy"]
            if (not isinstance(value, int) or isinstance(value, bool)
                    or abs(value) > MAX_ACCURACY):
                errors.append(ValidationError(
                    field="accuracy",
                    message=f"Must be an integer between -{MAX_ACCURACY} and {MAX_ACCURACY}",
                    value=value
                ))

        if "normalize" in params:
            value = params["normalize"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="normalize",
                    message="Must be a boolean",
                    value=value
                ))

        if "rounding" in params:
            value = params["rounding"]
            if value not in ROUNDING_MODES:
                errors.append(ValidationError(
                    field="rounding",
                    message=f"Must be one of {', '.join(ROUNDING_MODES)}",
                    value=value
                ))

        if "zero_base" in params:
            value = params["zero_base"]
            if value not in ZERO_BASE_POLICIES:
                errors.append(ValidationError(
                    field="zero_base",
                    message=f"Must be one of {', '.join(ZERO_BASE_POLICIES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        validators = {
            "percentages": ConfigValidator.validate_percentage_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, validate in validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
