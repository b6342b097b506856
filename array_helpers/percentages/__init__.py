"""Percentage calculations over ordered mappings"""

from .calculations import normalize, percents, percents_of_base
from .calculator import PercentageCalculator
from .rounding import round_value

__all__ = [
    "PercentageCalculator",
    "percents_of_base",
    "percents",
    "normalize",
    "round_value",
]
