"""
Membership and difference tests over sequences of records.

Records are compared by the string form of a single named field, or by
the record's own ``equals`` predicate, never by identity.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from .fields import field_value, field_values


class SupportsEquals(Protocol):
    """Record type exposing an ORM-style equality predicate."""

    def equals(self, other: Any) -> bool: ...


def diff_object_array_by_field(first: Sequence[Any], second: Sequence[Any], field: str) -> list[Any]:
    """
    Return the records of ``first`` whose field value is absent from ``second``

    Args:
        first: Records to filter
        second: Records whose field values are excluded
        field: Name of the field compared as a string

    Returns:
        Matching records of ``first`` in their original order. Empty if both
        sequences are empty or every value of ``first`` occurs in ``second``
    """
    if not first and not second:
        return []

    excluded = set(field_values(second, field))
    diff_values = {value for value in field_values(first, field) if value not in excluded}

    if not diff_values:
        return []

    return [record for record in first if str(field_value(record, field)) in diff_values]


def object_in_array_by_field(obj: Any, array: Sequence[Any], field: str) -> bool:
    """
    Check whether a record with the same field value is in ``array``

    Record types are not compared. Returns False if any argument is empty.
    """
    if obj is None or not array or not field:
        return False

    return str(field_value(obj, field)) in field_values(array, field)


def active_record_in_array(record: SupportsEquals, array: Sequence[Any]) -> bool:
    """
    Check whether ``array`` holds an element equal to ``record``

    Equality is delegated to ``record.equals``. Returns False if either
    argument is empty.
    """
    if record is None or not array:
        return False

    for element in array:
        if record.equals(element):
            return True
    return False
