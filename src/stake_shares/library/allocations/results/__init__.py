"""
Result containers for stake allocations.

This module provides structured containers for the output of the allocation
engine. A plan records, next to the per-pool amounts, the requested and
effective amounts and the scoring choices that produced it, so a plan can be
rendered, audited or replayed without the call that created it.

Plans validate themselves on construction: amounts have exactly two fraction
digits, are non-negative, and add up exactly to the effective amount.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

from attrs import define, field

from stake_shares.library.pools.models import StakingPool
from stake_shares.library.validation import validate_plan_amounts


@define(frozen=True)
class AllocationEntry:
    """One pool and the amount of ZRX to stake in it.

    Attributes
    ----------
    pool
        The pool snapshot, including its opaque metadata
    zrx_amount
        Amount in whole tokens, a Decimal with exactly two fraction digits
    score
        The pool's ranking score, if produced by the engine
    weight
        The weight used for the proportional split, if produced by the engine
    """

    pool: StakingPool
    zrx_amount: Decimal
    score: Decimal | None = field(default=None, kw_only=True)
    weight: Decimal | None = field(default=None, kw_only=True)

    @property
    def pool_id(self) -> str:
        return self.pool.pool_id


@define(frozen=True)
class MoveStakeInstruction:
    """A "move stake" instruction for the transaction collaborator.

    Moves ``base_units`` of ZRX from the undelegated status to ``pool_id``.
    """

    pool_id: str
    zrx_amount: Decimal
    base_units: int


@define(frozen=True)
class AllocationPlan:
    """Container for an allocation plan with validation.

    Attributes
    ----------
    entries
        Allocation entries in ranked order. Pools that were not selected are
        absent; selected pools whose share rounds to zero carry ``0.00``.
    requested_amount
        The amount as requested, before truncation
    effective_amount
        The requested amount truncated to two fraction digits; the entries
        sum to exactly this value
    scoring_function
        Name of the scoring function used to rank the pools
    weighting
        How pools were weighted: "score", "capacity" or "uniform". None for
        an empty request.
    """

    entries: tuple[AllocationEntry, ...] = field(converter=tuple)
    requested_amount: Decimal
    effective_amount: Decimal
    scoring_function: str
    weighting: str | None = field(default=None, kw_only=True)

    def __attrs_post_init__(self):
        """Initialize and validate the plan."""
        self.validate()

    def validate(self) -> None:
        """Validate entry amounts and the exact-sum invariant."""
        validate_plan_amounts(
            pool_ids=[entry.pool_id for entry in self.entries],
            amounts=[entry.zrx_amount for entry in self.entries],
            effective_amount=self.effective_amount,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[AllocationEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> AllocationEntry:
        return self.entries[index]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def pool_ids(self) -> list[str]:
        return [entry.pool_id for entry in self.entries]

    @property
    def total_amount(self) -> Decimal:
        """Sum of the allocated amounts (equal to ``effective_amount``)."""
        return sum((entry.zrx_amount for entry in self.entries), Decimal("0.00"))

    def amount_for(self, pool_id: str) -> Decimal:
        """
        Return the amount allocated to a pool.

        Raises
        ------
        KeyError
            If the pool is not part of the plan
        """
        for entry in self.entries:
            if entry.pool_id == pool_id:
                return entry.zrx_amount
        raise KeyError(pool_id)
