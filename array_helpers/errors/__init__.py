"""
Error classification for the array helpers.

Data quality errors describe malformed caller input, system failures
describe calculations or configuration that cannot proceed.
"""

from .data_quality import (
    DataQualityError,
    InvalidArgumentError,
    MissingFieldError,
)
from .system_failures import (
    SystemFailureError,
    PercentageCalculationError,
    ZeroBaseError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingFieldError",
    "InvalidArgumentError",
    # System Failures
    "SystemFailureError",
    "PercentageCalculationError",
    "ZeroBaseError",
    "ConfigurationError",
]
