"""
Scoring function registry and lookup functions.

This module provides the central registry mapping scoring function names to
scoring functions, along with helper functions for querying the registry.

A scoring function maps a ``StakingPool`` to a non-negative ``Decimal``.
Higher scores rank first and receive proportionally more stake.
"""

from __future__ import annotations

from decimal import Decimal
from functools import partial
from typing import TYPE_CHECKING, Callable

from stake_shares.library.constants import DEFAULT_EPSILON, MAX_DECIMAL_EXPONENT
from stake_shares.library.error_messages import format_error, suggest_similar
from stake_shares.library.exceptions import ConfigurationError

if TYPE_CHECKING:
    from stake_shares.library.pools.models import StakingPool

ScoringFunction = Callable[["StakingPool"], Decimal]


def operator_share_fees_score(
    pool: StakingPool, epsilon: Decimal = DEFAULT_EPSILON
) -> Decimal:
    """
    Score a pool by expected delegator yield.

    ``(1 - operator_share) * (seven_day_fees_generated_in_eth + epsilon)``

    Pools that keep less of the rewards and whose makers generated more
    protocol fees score higher. ``epsilon`` keeps pools without fee history
    in the ranking, below pools with any track record. A pool whose operator
    keeps everything scores zero.
    """
    return (1 - pool.operator_share) * (pool.seven_day_fees_generated_in_eth + epsilon)


def operator_share_score(
    pool: StakingPool, epsilon: Decimal = DEFAULT_EPSILON
) -> Decimal:
    """Score a pool by the delegators' share of rewards only."""
    return 1 - pool.operator_share


def stake_capacity_score(
    pool: StakingPool, epsilon: Decimal = DEFAULT_EPSILON
) -> Decimal:
    """Score a pool by the ZRX already delegated to it in the current epoch."""
    return pool.current_zrx_staked


def get_scoring_functions() -> dict[str, Callable[..., Decimal]]:
    """
    Get the scoring function registry.

    Returns
    -------
    dict[str, Callable]
        Dictionary mapping names to scoring functions. Every function takes
        ``(pool, epsilon)``.

    Notes
    -----
    The default, ``operator-share-fees``, favours low operator shares and a
    history of fee generation. Which signal should dominate is a product
    decision, so alternatives are registered alongside it.
    """
    return {
        "operator-share-fees": operator_share_fees_score,
        "operator-share": operator_share_score,
        "stake-capacity": stake_capacity_score,
    }


def get_scoring_function(
    name: str, epsilon: Decimal = DEFAULT_EPSILON
) -> ScoringFunction:
    """
    Get a scoring function by name, bound to ``epsilon``.

    Parameters
    ----------
    name : str
        Name of the scoring function (e.g., "operator-share-fees")
    epsilon : Decimal
        Small positive constant used by fee-based scores

    Returns
    -------
    Callable
        Function mapping a StakingPool to its score

    Raises
    ------
    ConfigurationError
        If the name is not registered or epsilon is not positive
    """
    scoring_functions = get_scoring_functions()
    if name not in scoring_functions:
        raise ConfigurationError(
            format_error(
                "unknown_scoring_function",
                name=name,
                suggestion=suggest_similar(name, list(scoring_functions)),
            )
        )
    if (
        not isinstance(epsilon, Decimal)
        or not epsilon.is_finite()
        or epsilon <= 0
        or abs(epsilon.adjusted()) > MAX_DECIMAL_EXPONENT
    ):
        raise ConfigurationError(
            f"epsilon must be a positive, finite Decimal with a decimal exponent "
            f"between -{MAX_DECIMAL_EXPONENT} and {MAX_DECIMAL_EXPONENT}, got {epsilon!r}"
        )
    return partial(scoring_functions[name], epsilon=epsilon)
