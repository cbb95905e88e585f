"""
Core stake allocation logic.

This module implements the allocation engine: given a requested stake amount
and a catalog of staking pools, it ranks the pools, selects the ones worth
delegating to and splits the amount between them so that the parts add up
to the truncated request to the cent.

The engine is a pure function of its arguments. It performs no I/O, keeps no
state between calls and never uses binary floating point for money.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any, Callable

from attrs import define

from stake_shares.library.allocations.registry import (
    ScoringFunction,
    get_scoring_function,
)
from stake_shares.library.allocations.results import AllocationEntry, AllocationPlan
from stake_shares.library.constants import (
    DEFAULT_EPSILON,
    DEFAULT_SCORING_FUNCTION,
    MAX_DECIMAL_EXPONENT,
)
from stake_shares.library.error_messages import format_error
from stake_shares.library.exceptions import (
    AllocationError,
    ConfigurationError,
    InsufficientCapacityError,
)
from stake_shares.library.pools.models import StakingPool
from stake_shares.library.utils.math import largest_remainder
from stake_shares.library.utils.money import cents_to_money, truncate_to_cents
from stake_shares.library.validation.inputs import validate_max_pools
from stake_shares.library.validation.models import AllocationInputs

logger = logging.getLogger(__name__)

WEIGHTING_SCORE = "score"
WEIGHTING_CAPACITY = "capacity"
WEIGHTING_UNIFORM = "uniform"


@define(frozen=True)
class RankedPool:
    """A pool with its score and position in the ranking."""

    pool: StakingPool
    score: Decimal
    rank: int


def _checked_score(score: Any, pool_id: str) -> Decimal:
    if isinstance(score, float):
        score = Decimal(repr(score))
    elif isinstance(score, int) and not isinstance(score, bool):
        score = Decimal(score)
    if (
        not isinstance(score, Decimal)
        or not score.is_finite()
        or score < 0
        or (score and abs(score.adjusted()) > MAX_DECIMAL_EXPONENT)
    ):
        raise AllocationError(
            format_error(
                "invalid_score", pool_id=pool_id, score=score, limit=MAX_DECIMAL_EXPONENT
            )
        )
    return score


def rank_pools(
    pools: Iterable[StakingPool], scoring_function: ScoringFunction
) -> list[RankedPool]:
    """
    Rank pools by descending score.

    Ties are broken by ascending pool id, so the ranking depends only on the
    set of pools and never on the order they were given in.

    Parameters
    ----------
    pools
        Pools to rank
    scoring_function
        Function mapping a pool to a non-negative score

    Returns
    -------
    list[RankedPool]
        Pools with their scores, best first

    Raises
    ------
    AllocationError
        If the scoring function returns a negative or non-finite score
    """
    scored = [
        (pool, _checked_score(scoring_function(pool), pool.pool_id)) for pool in pools
    ]
    scored.sort(key=lambda item: (-item[1], item[0].pool_id))
    return [
        RankedPool(pool=pool, score=score, rank=rank)
        for rank, (pool, score) in enumerate(scored)
    ]


def determine_weighting(ranked: Sequence[RankedPool]) -> str:
    """
    Choose how pools are weighted for the proportional split.

    - "score" when any pool has a positive score
    - "capacity" (ZRX currently staked) when every score is zero but some
      pool already holds stake
    - "uniform" when there is no signal at all
    """
    if any(item.score > 0 for item in ranked):
        return WEIGHTING_SCORE
    if any(item.pool.current_zrx_staked > 0 for item in ranked):
        return WEIGHTING_CAPACITY
    return WEIGHTING_UNIFORM


def pool_weight(item: RankedPool, weighting: str) -> Decimal:
    if weighting == WEIGHTING_SCORE:
        return item.score
    if weighting == WEIGHTING_CAPACITY:
        return item.pool.current_zrx_staked
    return Decimal(1)


def select_pools(
    ranked: Sequence[RankedPool], max_pools: int | None = None
) -> tuple[str, list[tuple[RankedPool, Decimal]]]:
    """
    Select the pools that will receive stake.

    Walks the ranking and keeps every pool with a positive weight, stopping
    once ``max_pools`` pools are selected. A pool without score, stake or fee
    history therefore only receives stake when no pool has any signal, which
    includes a single-pool catalog.

    Parameters
    ----------
    ranked
        Pools in ranked order (see ``rank_pools``)
    max_pools
        Maximum number of pools to select (default: no limit)

    Returns
    -------
    tuple[str, list[tuple[RankedPool, Decimal]]]
        The weighting mode and the selected pools with their weights,
        in ranked order
    """
    weighting = determine_weighting(ranked)
    selected: list[tuple[RankedPool, Decimal]] = []
    for item in ranked:
        if max_pools is not None and len(selected) >= max_pools:
            break
        weight = pool_weight(item, weighting)
        if weight > 0:
            selected.append((item, weight))
    return weighting, selected


def _resolve_scoring_function(
    scoring_function: str | Callable[[StakingPool], Any] | None, epsilon: Decimal
) -> tuple[ScoringFunction, str]:
    if scoring_function is None:
        scoring_function = DEFAULT_SCORING_FUNCTION
    if isinstance(scoring_function, str):
        return get_scoring_function(scoring_function, epsilon), scoring_function
    if callable(scoring_function):
        name = getattr(scoring_function, "__name__", type(scoring_function).__name__)
        return scoring_function, name
    raise ConfigurationError(
        f"scoring_function must be a registered name or a callable, "
        f"got {type(scoring_function).__name__}"
    )


def allocate(
    requested_amount: Any,
    pools: Iterable[StakingPool],
    *,
    scoring_function: str | Callable[[StakingPool], Any] | None = None,
    max_pools: int | None = None,
    epsilon: Decimal = DEFAULT_EPSILON,
) -> AllocationPlan:
    """
    Allocate a stake amount across staking pools.

    The requested amount is first truncated (not rounded) to two fraction
    digits; this effective amount is what the plan sums to. Pools are ranked
    by score, the pools worth delegating to are selected, and the amount is
    split proportionally to their weights with the largest-remainder method,
    so every part has two fraction digits and the parts add up exactly.

    Parameters
    ----------
    requested_amount
        Amount of ZRX to stake, any number of fraction digits
        (Decimal, int, decimal string or float)
    pools
        Pool catalog, in any order, with unique pool ids
    scoring_function
        Registered scoring function name or a callable
        ``StakingPool -> Decimal`` (default: "operator-share-fees")
    max_pools
        Maximum number of pools to spread the stake over (default: no limit)
    epsilon
        Small positive constant used by registered fee-based scores

    Returns
    -------
    AllocationPlan
        Entries in ranked order. Empty when the effective amount is zero.

    Raises
    ------
    InputValidationError
        If the requested amount is negative or not a finite number, or the
        catalog contains duplicate pool ids
    InsufficientCapacityError
        If the effective amount is positive and the catalog is empty
    ConfigurationError
        If the scoring function is unknown or ``max_pools`` is below one
    AllocationError
        If a scoring function returns an invalid score

    Examples
    --------
    >>> plan = allocate("1277.12999", pools)
    >>> plan.effective_amount
    Decimal('1277.12')
    >>> plan.total_amount == plan.effective_amount
    True
    """
    inputs = AllocationInputs(requested_amount=requested_amount, pools=pools)
    validate_max_pools(max_pools)
    scorer, scorer_name = _resolve_scoring_function(scoring_function, epsilon)

    total_cents = truncate_to_cents(inputs.requested_amount)
    effective_amount = cents_to_money(total_cents)

    if total_cents == 0:
        return AllocationPlan(
            entries=(),
            requested_amount=inputs.requested_amount,
            effective_amount=effective_amount,
            scoring_function=scorer_name,
        )

    if not inputs.pools:
        raise InsufficientCapacityError(
            format_error("insufficient_capacity", amount=effective_amount)
        )

    ranked = rank_pools(inputs.pools, scorer)
    weighting, selected = select_pools(ranked, max_pools=max_pools)
    logger.debug(
        "Selected %d of %d pools using %s weighting (%s)",
        len(selected),
        len(ranked),
        weighting,
        scorer_name,
    )

    cents = largest_remainder(total_cents, [weight for _, weight in selected])
    entries = [
        AllocationEntry(
            pool=item.pool,
            zrx_amount=cents_to_money(pool_cents),
            score=item.score,
            weight=weight,
        )
        for (item, weight), pool_cents in zip(selected, cents, strict=True)
    ]

    return AllocationPlan(
        entries=entries,
        requested_amount=inputs.requested_amount,
        effective_amount=effective_amount,
        scoring_function=scorer_name,
        weighting=weighting,
    )
