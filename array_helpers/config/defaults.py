"""Default configuration parameters for the array helpers."""

from dataclasses import dataclass

ROUNDING_MODES = ("half_up", "half_even")
ZERO_BASE_POLICIES = ("raise", "nan")


@dataclass(frozen=True)
class PercentageParams:
    """Percentage calculation parameters."""
    accuracy: int = 0                 # Decimal places, negative rounds to tens/hundreds
    normalize: bool = True            # Force the total to exactly 100
    rounding: str = "half_up"         # half_up (away from zero) or half_even
    zero_base: str = "raise"          # raise ZeroBaseError or propagate inf/nan


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    percentages: PercentageParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        percentages=PercentageParams(),
        logging=LoggingParams(),
    )
