"""
Array Helpers - percentage arithmetic and record membership utilities

Stateless helper functions over in-memory mappings and record sequences:
percentage calculation with sum-to-100 normalization, field-based
difference and membership tests, and an associative merge.
"""

from .merge import deep_merge, merge
from .percentages import PercentageCalculator, normalize, percents, percents_of_base
from .records import (
    active_record_in_array,
    diff_object_array_by_field,
    object_in_array_by_field,
)

__version__ = "0.1.0"
__author__ = "Array Helpers Team"

__all__ = [
    "PercentageCalculator",
    "percents_of_base",
    "percents",
    "normalize",
    "diff_object_array_by_field",
    "object_in_array_by_field",
    "active_record_in_array",
    "merge",
    "deep_merge",
]
