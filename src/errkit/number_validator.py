"""Validation rules for numeric values.

:class:`NumberValidator` is generic over the numeric representation: ``int``,
``float``, :class:`~decimal.Decimal` or :class:`~fractions.Fraction`. All the
rules only rely on ordering, equality and ``%``.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import TypeVar

from errkit import messages as msg
from errkit.validators import BaseValidator

__all__ = ["NumberValidator", "floating", "integer", "number"]

N = TypeVar("N", int, float, Decimal, Fraction)


def _is_finite(value: int | float | Decimal | Fraction) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def _fraction_places(value: Fraction) -> int | None:
    # A reduced fraction terminates only when its denominator is 2**a * 5**b.
    denominator = value.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


def _decimal_places(value: int | float | Decimal | Fraction) -> int | None:
    """Count significant decimal places, or None if there is no finite expansion."""
    if isinstance(value, int):
        return 0
    if isinstance(value, Fraction):
        return _fraction_places(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = Decimal(repr(value))
    if not value.is_finite():
        return None
    try:
        exponent = value.normalize().as_tuple().exponent
    except InvalidOperation:
        return None
    return max(0, -int(exponent))


class NumberValidator(BaseValidator[N]):
    """Fluent validation rules for a number.

    Example:
        err = integer(42, "age").min(18).max(100).validate()
    """

    # -------------------------------------------------------------------------
    # Basic validation
    # -------------------------------------------------------------------------

    def required(self) -> NumberValidator[N]:
        """Validate that the number is not zero."""
        return self._check(self._value != 0, msg.MSG_REQUIRED, msg.MSG_MUST_BE_ZERO)

    def zero(self) -> NumberValidator[N]:
        return self._check(self._value == 0, msg.MSG_ZERO)

    def equal(self, expected: N) -> NumberValidator[N]:
        return self._check(self._value == expected, msg.MSG_EQUAL, params={"expected": expected})

    def equal_to(self, expected: N, template: str | None = None) -> NumberValidator[N]:
        """Validate that the number equals the expected value.

        Args:
            expected: Expected value.
            template: Optional message key or inline template, e.g.
                ``"{{field}} must be exactly {{expected}} years old"``.
        """
        return self._check(
            self._value == expected,
            template or msg.MSG_EQUAL_TO,
            msg.MSG_NOT_EQUAL_TO,
            {"expected": expected},
        )

    # -------------------------------------------------------------------------
    # Range validation
    # -------------------------------------------------------------------------

    def min(self, minimum: N) -> NumberValidator[N]:
        """Validate that the number is at least ``minimum``."""
        return self._check(self._value >= minimum, msg.MSG_MIN, params={"min": minimum})

    def max(self, maximum: N) -> NumberValidator[N]:
        """Validate that the number is at most ``maximum``."""
        return self._check(self._value <= maximum, msg.MSG_MAX, params={"max": maximum})

    def between(self, minimum: N, maximum: N) -> NumberValidator[N]:
        """Validate that the number is between minimum and maximum (inclusive)."""
        return self._check(
            minimum <= self._value <= maximum,
            msg.MSG_BETWEEN,
            params={"min": minimum, "max": maximum},
        )

    def greater_than(self, limit: N) -> NumberValidator[N]:
        return self._check(self._value > limit, msg.MSG_GREATER_THAN, params={"limit": limit})

    def less_than(self, limit: N) -> NumberValidator[N]:
        return self._check(self._value < limit, msg.MSG_LESS_THAN, params={"limit": limit})

    def positive(self) -> NumberValidator[N]:
        return self._check(self._value > 0, msg.MSG_POSITIVE)

    def negative(self) -> NumberValidator[N]:
        return self._check(self._value < 0, msg.MSG_NEGATIVE)

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def in_(self, *values: N) -> NumberValidator[N]:
        return self._check(
            self._value in values, msg.MSG_IN, msg.MSG_NOT_IN, {"values": list(values)}
        )

    def not_in(self, *values: N) -> NumberValidator[N]:
        return self._check(
            self._value not in values, msg.MSG_NOT_IN, msg.MSG_IN, {"values": list(values)}
        )

    # -------------------------------------------------------------------------
    # Arithmetic properties
    # -------------------------------------------------------------------------

    def multiple_of(self, divisor: N) -> NumberValidator[N]:
        """Validate that the number is a multiple of ``divisor``.

        A zero divisor is always reported, negated or not.
        """
        if divisor == 0:
            return self._record(msg.MSG_DIVISOR_ZERO)
        return self._check(
            self._value % divisor == 0, msg.MSG_MULTIPLE_OF, params={"divisor": divisor}
        )

    def even(self) -> NumberValidator[N]:
        return self._check(self._value % 2 == 0, msg.MSG_EVEN)

    def odd(self) -> NumberValidator[N]:
        return self._check(self._value % 2 != 0, msg.MSG_ODD)

    def finite(self) -> NumberValidator[N]:
        """Validate that the number is neither infinite nor NaN."""
        return self._check(_is_finite(self._value), msg.MSG_FINITE)

    def precision(self, places: int) -> NumberValidator[N]:
        """Validate that the number has at most ``places`` decimal places."""
        actual = _decimal_places(self._value)
        return self._check(
            actual is not None and actual <= places, msg.MSG_PRECISION, params={"places": places}
        )


def number(value: N, field_name: str) -> NumberValidator[N]:
    """Create a NumberValidator for any supported numeric type."""
    return NumberValidator(value, field_name)


def integer(value: int, field_name: str) -> NumberValidator[int]:
    return NumberValidator(value, field_name)


def floating(value: float, field_name: str) -> NumberValidator[float]:
    return NumberValidator(value, field_name)
