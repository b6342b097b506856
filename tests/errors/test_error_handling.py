"""
Error handling tests for the array helpers.

Tests cover the error hierarchy and the errors raised by each helper.
"""

import pytest

from array_helpers.errors import (
    ConfigurationError,
    DataQualityError,
    InvalidArgumentError,
    MissingFieldError,
    PercentageCalculationError,
    SystemFailureError,
    ZeroBaseError,
)
from array_helpers.config.validation import ValidationError
from array_helpers import percents


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test that data quality errors have proper hierarchy."""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingFieldError("no id", field="id", record_type="dict")
        assert isinstance(missing_error, DataQualityError)
        assert isinstance(missing_error, AttributeError)
        assert missing_error.field == "id"

        argument_error = InvalidArgumentError("bad mode", argument="rounding", value="up")
        assert isinstance(argument_error, ValueError)
        assert argument_error.allowed == []

    def test_system_failure_error_hierarchy(self):
        """Test that system failure errors have proper hierarchy."""
        calc_error = PercentageCalculationError("undefined", operation="percents")
        assert isinstance(calc_error, SystemFailureError)
        assert calc_error.recoverable is False
        assert calc_error.operation == "percents"

        zero_error = ZeroBaseError("zero", context={"base": 0})
        assert isinstance(zero_error, PercentageCalculationError)
        assert isinstance(zero_error, ZeroDivisionError)
        assert zero_error.context == {"base": 0}

        errors = [ValidationError(field="accuracy", message="Must be an integer", value="x")]
        config_error = ConfigurationError("invalid", errors=errors)
        assert config_error.errors == errors
        assert config_error.recoverable is False


class TestHelperErrors:
    """Test errors surfaced through the public helpers."""

    def test_zero_base_caught_as_zero_division(self):
        """Test callers can catch the built-in ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            percents({"a": 0})

    def test_error_message(self):
        """Test the zero-base message."""
        with pytest.raises(ZeroBaseError, match="zero base"):
            percents({"a": 0, "b": 0})
