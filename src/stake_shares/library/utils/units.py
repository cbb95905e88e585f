"""
Token unit conversion utilities for the stake-shares library.

The allocation engine works in whole tokens with two fraction digits. On-chain
calls use integer base units (10^-18 ZRX). These helpers convert between the
two without rounding.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any

from stake_shares.library.constants import (
    DEFAULT_TOKEN_DECIMALS,
    MAX_DECIMAL_EXPONENT,
    MAX_TOKEN_DECIMALS,
)
from stake_shares.library.error_messages import format_error
from stake_shares.library.exceptions import InputValidationError
from stake_shares.library.utils.money import check_magnitude, to_decimal


def _validate_decimals(decimals: int) -> None:
    if (
        isinstance(decimals, bool)
        or not isinstance(decimals, int)
        or not 0 <= decimals <= MAX_TOKEN_DECIMALS
    ):
        raise InputValidationError(
            f"decimals must be an integer between 0 and {MAX_TOKEN_DECIMALS}, "
            f"got {decimals!r}"
        )


def to_base_units(amount: Any, decimals: int = DEFAULT_TOKEN_DECIMALS) -> int:
    """
    Convert a token amount to integer base units.

    Parameters
    ----------
    amount
        Token amount (Decimal, int or decimal string)
    decimals
        Number of decimals of the token (default: 18)

    Returns
    -------
    int
        ``amount * 10**decimals``

    Raises
    ------
    InputValidationError
        If the amount is negative, finer than one base unit or outside the
        supported magnitude

    Examples
    --------
    >>> to_base_units(Decimal("1.5"))
    1500000000000000000
    >>> to_base_units("0.01", decimals=6)
    10000
    """
    _validate_decimals(decimals)
    value = to_decimal(amount, field_name="amount")
    if value < 0:
        raise InputValidationError(
            format_error(
                "negative_value", field_name="amount", pool_context="", value=value
            )
        )
    check_magnitude(value, field_name="amount")
    units = Fraction(value) * 10**decimals
    if units.denominator != 1:
        raise InputValidationError(
            f"Amount {value} has more precision than {decimals} decimals allow."
        )
    return int(units)


def from_base_units(units: int, decimals: int = DEFAULT_TOKEN_DECIMALS) -> Decimal:
    """
    Convert integer base units back to a token amount.

    The result is exact: the digits of ``units`` are used directly as the
    Decimal coefficient. Token amounts of 10^1001 or more are rejected, as in
    ``to_base_units``.

    Raises
    ------
    InputValidationError
        If ``units`` is not a non-negative integer or is out of range

    Examples
    --------
    >>> from_base_units(1500000000000000000)
    Decimal('1.500000000000000000')
    """
    _validate_decimals(decimals)
    if isinstance(units, bool) or not isinstance(units, int) or units < 0:
        raise InputValidationError(
            f"units must be a non-negative integer, got {units!r}"
        )
    if units >= 10 ** (MAX_DECIMAL_EXPONENT + 1 + decimals):
        raise InputValidationError(
            f"units must be below 10^{MAX_DECIMAL_EXPONENT + 1 + decimals} "
            f"for {decimals} decimals, got a {units.bit_length()}-bit integer"
        )
    digits = tuple(int(digit) for digit in str(units))
    return Decimal((0, digits, -decimals))
