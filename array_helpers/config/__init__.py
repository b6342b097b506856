"""Settings for the percentage helpers and logging"""

from .defaults import DefaultConfig, LoggingParams, PercentageParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "PercentageParams",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
