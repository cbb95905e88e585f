"""
Manager for orchestrating stake allocations.

This module provides the high-level interface used by the dashboard: run the
allocation engine with a stored configuration, log what happened, and turn a
plan into the "move stake" instructions the transaction layer submits.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from attrs import define, field

from stake_shares.library.allocations.core import allocate
from stake_shares.library.allocations.results import (
    AllocationPlan,
    MoveStakeInstruction,
)
from stake_shares.library.config import AllocationConfig, load_allocation_config
from stake_shares.library.pools.models import StakingPool
from stake_shares.library.utils.units import to_base_units

logger = logging.getLogger(__name__)


@define
class AllocationManager:
    """
    Manager for allocation runs with configuration and logging.

    Examples
    --------
    >>> manager = AllocationManager(AllocationConfig(max_pools=3))
    >>> plan = manager.run_allocation("470", pools)
    >>> instructions = manager.to_move_stake_instructions(plan)
    """

    config: AllocationConfig = field(factory=AllocationConfig)

    @classmethod
    def from_config_file(cls, config_path: Path | str) -> AllocationManager:
        """Create a manager from a YAML configuration file."""
        return cls(config=load_allocation_config(config_path))

    def run_allocation(
        self, requested_amount: Any, pools: Iterable[StakingPool]
    ) -> AllocationPlan:
        """
        Run the allocation engine with this manager's configuration.

        Parameters
        ----------
        requested_amount
            Amount of ZRX to stake, any number of fraction digits
        pools
            Current pool catalog

        Returns
        -------
        AllocationPlan
            The validated plan

        Raises
        ------
        InputValidationError, InsufficientCapacityError
            See ``allocate``
        """
        plan = allocate(
            requested_amount,
            pools,
            scoring_function=self.config.scoring_function,
            max_pools=self.config.max_pools,
            epsilon=self.config.epsilon,
        )

        if plan.is_empty and plan.requested_amount > 0:
            logger.warning(
                "Requested amount %s truncates to %s, nothing to allocate",
                plan.requested_amount,
                plan.effective_amount,
            )
        else:
            logger.info(
                "Allocated %s ZRX across %d pools (%s weighting, %s)",
                plan.effective_amount,
                len(plan),
                plan.weighting,
                plan.scoring_function,
            )
        return plan

    def to_move_stake_instructions(
        self, plan: AllocationPlan
    ) -> list[MoveStakeInstruction]:
        """
        Convert a plan into "move stake" instructions.

        Entries allocated ``0.00`` are skipped. Amounts are converted to base
        units using ``config.token_decimals``.

        Parameters
        ----------
        plan
            Plan produced by ``run_allocation`` or ``allocate``

        Returns
        -------
        list[MoveStakeInstruction]
            One instruction per non-zero entry, in plan order
        """
        return [
            MoveStakeInstruction(
                pool_id=entry.pool_id,
                zrx_amount=entry.zrx_amount,
                base_units=to_base_units(entry.zrx_amount, self.config.token_decimals),
            )
            for entry in plan.entries
            if entry.zrx_amount > 0
        ]
