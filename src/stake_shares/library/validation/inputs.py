"""
Input validation functions for the stake-shares library.

This module contains validation functions for allocation input data including:
- Requested amount validation (finite, non-negative)
- Pool statistic ranges (operator share in [0, 1], non-negative amounts)
- Catalog consistency (unique pool ids)
- Pool count limits (max_pools)
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from stake_shares.library.error_messages import format_error, pool_context
from stake_shares.library.exceptions import ConfigurationError, InputValidationError
from stake_shares.library.utils.money import check_magnitude, to_decimal

if TYPE_CHECKING:
    from stake_shares.library.pools.models import StakingPool


def validate_non_negative(
    value: Any, field_name: str, pool_id: str | None = None
) -> Decimal:
    """
    Validate that a value is a finite, non-negative number.

    Parameters
    ----------
    value
        Value to validate (int, float, str or Decimal)
    field_name
        Name of the field for error messages
    pool_id
        Pool the value belongs to, for error messages

    Returns
    -------
    Decimal
        The value converted to Decimal

    Raises
    ------
    InputValidationError
        If the value is not numeric, not finite, negative or outside the
        supported magnitude (see ``MAX_DECIMAL_EXPONENT``)
    """
    result = to_decimal(value, field_name=field_name, pool_id=pool_id)
    if result < 0:
        raise InputValidationError(
            format_error(
                "negative_value",
                field_name=field_name,
                pool_context=pool_context(pool_id),
                value=result,
            )
        )
    return check_magnitude(result, field_name=field_name, pool_id=pool_id)


def validate_requested_amount(value: Any) -> Decimal:
    """
    Validate the requested stake amount.

    Any number of fraction digits is accepted here, truncation to cents is
    part of the allocation itself.

    Raises
    ------
    InputValidationError
        If the amount is not numeric, not finite, negative or outside the
        supported magnitude
    """
    return validate_non_negative(value, "requested_amount")


def validate_operator_share(value: Any, pool_id: str | None = None) -> Decimal:
    """
    Validate that an operator share is a fraction in [0, 1].

    Raises
    ------
    InputValidationError
        If the share is not numeric or outside [0, 1]
    """
    result = to_decimal(value, field_name="operator_share", pool_id=pool_id)
    if not 0 <= result <= 1:
        raise InputValidationError(
            format_error(
                "operator_share_out_of_range",
                pool_context=pool_context(pool_id),
                value=result,
            )
        )
    return result


def validate_pool_id(value: Any) -> str:
    """Validate that a pool id is a non-empty string (ints are accepted as ids)."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise InputValidationError(format_error("invalid_pool_id", value=value))
    return value


def validate_unique_pool_ids(pools: Iterable[StakingPool]) -> None:
    """
    Validate that no pool id appears twice in a catalog.

    Raises
    ------
    InputValidationError
        If any pool id is duplicated
    """
    counts = Counter(pool.pool_id for pool in pools)
    duplicates = sorted(pool_id for pool_id, count in counts.items() if count > 1)
    if duplicates:
        raise InputValidationError(
            format_error("duplicate_pool_ids", duplicates=", ".join(duplicates))
        )


def validate_pool_catalog(pools: Iterable[Any]) -> list[StakingPool]:
    """
    Validate a pool catalog and return it as a list.

    Raises
    ------
    InputValidationError
        If an item is not a StakingPool or pool ids are duplicated
    """
    from stake_shares.library.pools.models import StakingPool

    catalog = list(pools)
    for item in catalog:
        if not isinstance(item, StakingPool):
            raise InputValidationError(
                f"Pool catalog items must be StakingPool instances, "
                f"got {type(item).__name__}. "
                "Use build_pool_catalog() to convert backend records."
            )
    validate_unique_pool_ids(catalog)
    return catalog


def validate_max_pools(value: Any) -> int | None:
    """
    Validate a pool count limit: a positive integer, or None for no limit.

    Raises
    ------
    ConfigurationError
        If the limit is not a positive integer
    """
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(
            f"max_pools must be a positive integer or None, got {value!r}"
        )
    return value
