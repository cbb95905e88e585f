"""Pydantic models for allocation input validation.

Import from this module directly; it is not re-exported from
``stake_shares.library.validation`` because the pool models depend on the
validation functions.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from stake_shares.library.pools.models import StakingPool
from stake_shares.library.validation.inputs import (
    validate_pool_catalog,
    validate_requested_amount,
)


class AllocationInputs(BaseModel):
    """
    Validates all input data before an allocation runs.

    It validates:

    - The requested amount (finite, non-negative, any number of fraction digits)
    - The catalog (StakingPool instances with unique pool ids)

    Pool statistics themselves are validated when each StakingPool is built.

    Examples
    --------
    >>> inputs = AllocationInputs(requested_amount="470", pools=pools)
    >>> inputs.requested_amount
    Decimal('470')
    """

    requested_amount: Decimal = Field(
        ..., description="Requested stake in whole tokens, not yet truncated"
    )
    pools: list[StakingPool] = Field(
        default_factory=list, description="Pool catalog, in any order"
    )

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @field_validator("requested_amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        """Validate the requested amount."""
        return validate_requested_amount(v)

    @field_validator("pools", mode="before")
    @classmethod
    def validate_pools(cls, v: Any) -> list[StakingPool]:
        """Validate catalog item types and pool id uniqueness."""
        return validate_pool_catalog(v)
