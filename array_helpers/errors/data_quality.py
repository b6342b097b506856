"""
Data quality error classifications for caller-supplied input.

These exceptions describe records and arguments that do not satisfy the
preconditions of a helper.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for input issues the caller can correct."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingFieldError(DataQualityError, AttributeError):
    """A record does not expose the field used for comparison."""

    def __init__(self, message: str, field: Optional[str] = None,
                 record_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.record_type = record_type


class InvalidArgumentError(DataQualityError, ValueError):
    """An option passed to a helper is outside its accepted values."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, allowed: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value
        self.allowed = allowed or []
