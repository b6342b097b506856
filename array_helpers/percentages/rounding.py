"""Decimal-place rounding used for percentage values"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Rational
from typing import Any

from ..config.defaults import ROUNDING_MODES
from ..errors import InvalidArgumentError


def check_option(argument: str, value: Any, allowed: tuple) -> None:
    """Raise InvalidArgumentError unless ``value`` is one of ``allowed``."""
    if value not in allowed:
        raise InvalidArgumentError(
            f"{argument} must be one of {', '.join(allowed)}, got {value!r}",
            argument=argument,
            value=value,
            allowed=list(allowed),
        )


def round_value(value: float, accuracy: int = 0, rounding: str = "half_up") -> float:
    """
    Round a value to ``accuracy`` decimal places

    A negative accuracy rounds to tens, hundreds and so on. ``half_up``
    rounds halves away from zero using the shortest decimal form of the
    float, so 2.675 rounds to 2.68; fractions are divided out in decimal
    first. ``half_even`` is the built-in round.

    Args:
        value: Number to round
        accuracy: Decimal places to keep
        rounding: Rounding mode, ``half_up`` or ``half_even``

    Returns:
        Rounded value as float; NaN and infinities are returned unchanged
    """
    check_option("rounding", rounding, ROUNDING_MODES)

    if not math.isfinite(value):
        return float(value)

    if rounding == "half_even":
        return float(round(value, accuracy))

    quantum = Decimal(1).scaleb(-accuracy)
    integer_digits = len(str(int(abs(value))))

    with localcontext() as ctx:
        # quantize needs every digit down to the target exponent
        ctx.prec = max(ctx.prec, integer_digits + accuracy + 2)
        exact = _to_decimal(value)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def _to_decimal(value: Any) -> Decimal:
    """Decimal form of a number; rationals are divided in the active context."""
    if isinstance(value, Rational):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(str(value))
