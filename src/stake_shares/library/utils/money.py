"""
Exact money helpers for the stake-shares library.

Monetary values are ``decimal.Decimal`` with exactly two fraction digits.
Conversions to and from integer cents go through ``fractions.Fraction`` so
that no step depends on the active decimal context precision.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

from stake_shares.library.constants import (
    CENTS_PER_UNIT,
    MAX_DECIMAL_EXPONENT,
    MONEY_EXPONENT,
)
from stake_shares.library.error_messages import format_error, pool_context
from stake_shares.library.exceptions import InputValidationError


def to_decimal(
    value: Any, field_name: str = "value", pool_id: str | None = None
) -> Decimal:
    """
    Convert a numeric input to a finite ``Decimal``.

    Floats are converted through their shortest round-trip representation,
    so ``177.77`` becomes ``Decimal("177.77")`` rather than the exact binary
    expansion of the float.

    Parameters
    ----------
    value
        int, float, str or Decimal
    field_name
        Name of the field for error messages
    pool_id
        Pool the value belongs to, for error messages

    Returns
    -------
    Decimal
        The converted value

    Raises
    ------
    InputValidationError
        If the value is missing, not numeric, NaN or infinite
    """

    def _fail(reason: str) -> InputValidationError:
        return InputValidationError(
            format_error(
                "invalid_number",
                field_name=field_name,
                pool_context=pool_context(pool_id),
                value=value,
                reason=reason,
            )
        )

    if value is None:
        raise _fail("value is missing")
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool):
        raise _fail("booleans are not numbers")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise _fail("not a decimal string") from exc
    else:
        raise _fail(f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise _fail("NaN and infinity are not allowed")
    return result


def check_magnitude(
    value: Decimal, field_name: str = "value", pool_id: str | None = None
) -> Decimal:
    """
    Check that a non-zero value's adjusted exponent is within the supported range.

    Raises
    ------
    InputValidationError
        If ``abs(value.adjusted())`` exceeds ``MAX_DECIMAL_EXPONENT``
    """
    if value and abs(value.adjusted()) > MAX_DECIMAL_EXPONENT:
        raise InputValidationError(
            format_error(
                "magnitude_out_of_range",
                field_name=field_name,
                pool_context=pool_context(pool_id),
                limit=MAX_DECIMAL_EXPONENT,
                value=value,
            )
        )
    return value


def truncate_to_cents(amount: Decimal) -> int:
    """
    Truncate an amount to whole cents.

    ``floor(amount * 100)``, computed exactly. ``1277.12999`` gives
    ``127712``, never ``127713``.
    """
    return math.floor(Fraction(amount) * CENTS_PER_UNIT)


def cents_to_money(cents: int) -> Decimal:
    """Build a two-fraction-digit ``Decimal`` from an integer number of cents."""
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(cents), CENTS_PER_UNIT)
    return Decimal(f"{sign}{whole}.{fraction:02d}")


def money_to_cents(amount: Decimal) -> int:
    """
    Convert a money amount to integer cents.

    Raises
    ------
    InputValidationError
        If the amount has sub-cent precision
    """
    cents = Fraction(amount) * CENTS_PER_UNIT
    if cents.denominator != 1:
        raise InputValidationError(
            format_error(
                "invalid_number",
                field_name="amount",
                pool_context="",
                value=amount,
                reason="amount has more than two fraction digits",
            )
        )
    return int(cents)


def is_money(value: Any) -> bool:
    """Return True for a finite ``Decimal`` with exactly two fraction digits."""
    return (
        isinstance(value, Decimal)
        and value.is_finite()
        and value.as_tuple().exponent == MONEY_EXPONENT
    )
