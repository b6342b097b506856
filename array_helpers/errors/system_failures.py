"""
System failure error classifications.

These exceptions represent calculations that have no defined result and
configuration that cannot be used.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class PercentageCalculationError(SystemFailureError):
    """A percentage calculation produced an undefined result."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.calculation_input = calculation_input


class ZeroBaseError(PercentageCalculationError, ZeroDivisionError):
    """Percentages were requested against a base of zero."""


class ConfigurationError(SystemFailureError):
    """Merged settings failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
