"""
Output validation functions for the stake-shares library.

This module contains validation functions for allocation plans including:
- Amount format (Decimal with exactly two fraction digits)
- Amount bounds (non-negative, not above the effective amount)
- Exact-sum validation (amounts add up to the effective amount to the cent)
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from stake_shares.library.error_messages import format_error
from stake_shares.library.exceptions import OutputValidationError
from stake_shares.library.utils.money import cents_to_money, is_money, money_to_cents


def validate_plan_amounts(
    pool_ids: Sequence[str],
    amounts: Sequence[Decimal],
    effective_amount: Decimal,
) -> None:
    """
    Validate that allocated amounts are well formed and sum exactly.

    Parameters
    ----------
    pool_ids
        Pool id of each allocation entry
    amounts
        Allocated amount of each entry, same order as ``pool_ids``
    effective_amount
        The truncated requested amount the plan must add up to

    Raises
    ------
    OutputValidationError
        If an amount is malformed, negative or above the effective amount,
        if pool ids repeat, or if the amounts do not sum to the effective amount
    """
    if not is_money(effective_amount) or effective_amount < 0:
        raise OutputValidationError(
            f"Effective amount must be a non-negative Decimal with two "
            f"fraction digits, got {effective_amount!r}."
        )
    if len(set(pool_ids)) != len(pool_ids):
        raise OutputValidationError("Allocation plan lists a pool more than once.")

    for pool_id, amount in zip(pool_ids, amounts, strict=True):
        reason = None
        if not is_money(amount):
            reason = "not a Decimal with exactly two fraction digits"
        elif amount < 0:
            reason = "negative amount"
        elif amount > effective_amount:
            reason = "amount exceeds the effective requested amount"
        if reason is not None:
            raise OutputValidationError(
                format_error(
                    "invalid_plan_amount",
                    pool_id=pool_id,
                    amount=amount,
                    reason=reason,
                    effective=effective_amount,
                )
            )

    # Summing integer cents keeps the check exact at any magnitude
    total_cents = sum(money_to_cents(amount) for amount in amounts)
    expected_cents = money_to_cents(effective_amount)
    if total_cents != expected_cents:
        raise OutputValidationError(
            format_error(
                "plan_sum_mismatch",
                actual=cents_to_money(total_cents),
                expected=effective_amount,
                difference=cents_to_money(total_cents - expected_cents),
            )
        )
