"""Field-based comparison of record sequences"""

from .comparison import (
    active_record_in_array,
    diff_object_array_by_field,
    object_in_array_by_field,
)
from .fields import field_value, field_values

__all__ = [
    "diff_object_array_by_field",
    "object_in_array_by_field",
    "active_record_in_array",
    "field_value",
    "field_values",
]
