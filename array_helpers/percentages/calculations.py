"""
Percentage calculations over ordered mappings.

All functions take a mapping of key to number and return a new dict with
the same keys in the same order. Inputs are never mutated.
"""

import math
from collections.abc import Mapping
from typing import Any

import structlog

from ..config.defaults import ROUNDING_MODES, ZERO_BASE_POLICIES
from ..errors import ZeroBaseError
from .rounding import check_option, round_value

logger = structlog.get_logger(__name__)

PERCENT_TOTAL = 100


def _divide_by_zero(value: float) -> float:
    """IEEE result of ``value / 0``."""
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value)


def percents_of_base(
    base: float,
    values: Mapping[Any, float],
    accuracy: int = 0,
    *,
    rounding: str = "half_up",
    zero_base: str = "raise",
) -> dict[Any, float]:
    """
    Calculate each value as a percentage of ``base``

    percent = round(value / base * 100, accuracy)

    Args:
        base: Value taken as 100%
        values: Numbers to express as percentages
        accuracy: Decimal places, see round_value
        rounding: Rounding mode, ``half_up`` or ``half_even``
        zero_base: ``raise`` to fail on a zero base, ``nan`` to return
            infinities and NaN as float division would

    Returns:
        Percentages keyed like ``values``

    Raises:
        ZeroBaseError: If ``base`` is zero, ``values`` is not empty and
            ``zero_base`` is ``raise``
    """
    check_option("rounding", rounding, ROUNDING_MODES)
    check_option("zero_base", zero_base, ZERO_BASE_POLICIES)

    if not values:
        return {}

    if base == 0:
        if zero_base == "raise":
            raise ZeroBaseError(
                "Cannot calculate percentages of a zero base",
                operation="percents_of_base",
                calculation_input={"base": base, "count": len(values)},
            )
        logger.warning("zero_base_percentages", count=len(values))
        return {key: _divide_by_zero(value) for key, value in values.items()}

    return {
        key: round_value((value / base) * PERCENT_TOTAL, accuracy, rounding)
        for key, value in values.items()
    }


def percents(
    values: Mapping[Any, float],
    accuracy: int = 0,
    normalized: bool = True,
    *,
    rounding: str = "half_up",
    zero_base: str = "raise",
) -> dict[Any, float]:
    """
    Calculate each value as a percentage of the sum of all values

    Args:
        values: Numbers to express as percentages
        accuracy: Decimal places, see round_value
        normalized: If True, adjust the result to total exactly 100,
            see normalize
        rounding: Rounding mode, ``half_up`` or ``half_even``
        zero_base: Zero-sum policy, see percents_of_base

    Returns:
        Percentages keyed like ``values``; empty for empty input
    """
    base = sum(values.values())
    result = percents_of_base(base, values, accuracy, rounding=rounding, zero_base=zero_base)

    if normalized:
        return normalize(result, accuracy, rounding=rounding)
    return result


def normalize(values: Mapping[Any, float], accuracy: int = 0, *, rounding: str = "half_up") -> dict[Any, float]:
    """
    Adjust a percentage mapping so its values total exactly 100

    The maximum value absorbs the residual: it becomes 100 minus the sum of
    all other values. When several keys share the maximum, the last one in
    iteration order is adjusted.

    Args:
        values: Percentages to normalize
        accuracy: Decimal places for the adjusted value
        rounding: Rounding mode, ``half_up`` or ``half_even``

    Returns:
        New mapping with one value adjusted; empty for empty input
    """
    check_option("rounding", rounding, ROUNDING_MODES)

    result = dict(values)
    if not result:
        return result

    max_value = max(result.values())
    max_keys = [key for key, value in result.items() if value == max_value]

    # NaN maxima match no key
    if max_keys:
        key = max_keys[-1]
        new_max = PERCENT_TOTAL - (sum(result.values()) - max_value)
        result[key] = round_value(new_max, accuracy, rounding)
        logger.debug(
            "percentages_normalized",
            adjusted_key=key,
            previous_value=max_value,
            new_value=result[key],
        )

    return result
