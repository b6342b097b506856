"""Named field access on records"""

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import MissingFieldError


def field_value(record: Any, field: str) -> Any:
    """
    Read ``field`` from a record.

    Mappings are read by key, any other object by attribute.

    Raises:
        MissingFieldError: If the record has no such key or attribute
    """
    if isinstance(record, Mapping):
        try:
            return record[field]
        except KeyError:
            raise MissingFieldError(
                f"Record has no field '{field}'",
                field=field,
                record_type=type(record).__name__,
            ) from None

    try:
        return getattr(record, field)
    except AttributeError:
        raise MissingFieldError(
            f"Record has no field '{field}'",
            field=field,
            record_type=type(record).__name__,
        ) from None


def field_values(records: Iterable[Any], field: str) -> list[str]:
    """Project records to the string form of ``field``, keeping order."""
    return [str(field_value(record, field)) for record in records]
