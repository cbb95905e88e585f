"""
Apportionment utilities for the stake-shares library.

"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction

from stake_shares.library.exceptions import AllocationError


def largest_remainder(total: int, weights: Sequence[Decimal | Fraction | int]) -> list[int]:
    """
    Split an integer total proportionally to weights, summing exactly to the total.

    Uses the largest-remainder (Hare-Niemeyer) method: each part is the floor of
    its exact quota ``total * weight / sum(weights)``; the units lost to
    flooring are then handed out one at a time to the parts with the largest
    fractional remainder. Ties go to the part that comes first in ``weights``,
    so callers pass weights in their preferred priority order.

    All arithmetic is done on ``Fraction`` values, so the result does not depend
    on float representation or on the decimal context precision.

    Parameters
    ----------
    total
        Non-negative number of indivisible units to distribute (e.g. cents)
    weights
        Non-negative weights, at least one of them positive

    Returns
    -------
    list[int]
        Units per weight, in the same order as ``weights``

    Raises
    ------
    AllocationError
        If the total is negative or the weights are empty, negative or all zero

    Examples
    --------
    >>> largest_remainder(100, [1, 1, 1])
    [34, 33, 33]
    >>> largest_remainder(10, [Decimal("0.5"), Decimal("0.3"), Decimal("0.2")])
    [5, 3, 2]
    """
    if total < 0:
        raise AllocationError(f"Cannot apportion a negative total ({total}).")
    if not weights:
        raise AllocationError("Cannot apportion over an empty list of weights.")

    exact_weights = [Fraction(weight) for weight in weights]
    if any(weight < 0 for weight in exact_weights):
        raise AllocationError("Apportionment weights must be non-negative.")
    weight_total = sum(exact_weights, Fraction(0))
    if weight_total == 0:
        raise AllocationError("Apportionment needs at least one positive weight.")

    quotas = [total * weight / weight_total for weight in exact_weights]
    units = [math.floor(quota) for quota in quotas]

    # Each floor loses less than one unit, so shortfall < len(weights)
    shortfall = total - sum(units)
    by_remainder = sorted(
        range(len(quotas)), key=lambda i: (-(quotas[i] - units[i]), i)
    )
    for i in by_remainder[:shortfall]:
        units[i] += 1

    return units
