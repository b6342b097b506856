"""Associative merge with empty-input short-circuits"""

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge ``override`` into ``base`` without mutating either.

    Nested mappings are merged key by key, two lists are concatenated and
    any other value in ``override`` replaces the one in ``base``.

    Args:
        base: Mapping (or list) providing the starting values
        override: Mapping (or list) whose values take precedence

    Returns:
        New merged dict (or list when both arguments are lists)
    """
    if isinstance(base, list) and isinstance(override, list):
        return base + override

    result = dict(base)

    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            result[key] = current + value
        else:
            result[key] = value

    return result


def merge(a: Any, b: Any) -> Any:
    """
    Merge two mappings, returning an empty input's counterpart unchanged.

    Args:
        a: First mapping
        b: Second mapping, wins on conflicting keys

    Returns:
        ``{}`` if both are empty, the non-empty one if the other is empty,
        otherwise ``deep_merge(a, b)``
    """
    if not a and not b:
        return {}
    if not a:
        return b
    if not b:
        return a
    return deep_merge(a, b)
