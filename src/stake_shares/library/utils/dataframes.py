"""DataFrame utilities for the stake-shares library.

This module provides tabular views of pool catalogs and allocation plans:
- Column definitions (CATALOG_COLUMNS, PLAN_COLUMNS)
- Catalog view (catalog_to_dataframe)
- Plan view (plan_to_dataframe)

Numeric values are kept as ``decimal.Decimal`` objects (object dtype) so the
views never introduce float rounding into monetary amounts.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from stake_shares.library.allocations.results import AllocationPlan
    from stake_shares.library.pools.models import StakingPool

__all__ = [
    "CATALOG_COLUMNS",
    "INDEX_NAME",
    "PLAN_COLUMNS",
    "catalog_to_dataframe",
    "plan_to_dataframe",
]

INDEX_NAME: str = "pool-id"

CATALOG_COLUMNS: list[str] = [
    "pool-name",
    "operator-address",
    "operator-share",
    "current-zrx-staked",
    "next-epoch-zrx-staked",
    "seven-day-fees-eth",
]

PLAN_COLUMNS: list[str] = [
    "pool-name",
    "score",
    "weight",
    "zrx-amount",
    # fraction of the effective amount, None for an empty request
    "share",
]


def catalog_to_dataframe(pools: Iterable[StakingPool]) -> pd.DataFrame:
    """
    Build a DataFrame view of a pool catalog.

    Parameters
    ----------
    pools
        Staking pools, in any order

    Returns
    -------
    pd.DataFrame
        One row per pool indexed by ``pool-id``, in the order given
    """
    rows = [
        {
            INDEX_NAME: pool.pool_id,
            "pool-name": pool.name,
            "operator-address": pool.operator_address,
            "operator-share": pool.operator_share,
            "current-zrx-staked": pool.current_zrx_staked,
            "next-epoch-zrx-staked": pool.next_epoch_zrx_staked,
            "seven-day-fees-eth": pool.seven_day_fees_generated_in_eth,
        }
        for pool in pools
    ]
    return pd.DataFrame(rows, columns=[INDEX_NAME, *CATALOG_COLUMNS]).set_index(
        INDEX_NAME
    )


def plan_to_dataframe(plan: AllocationPlan) -> pd.DataFrame:
    """
    Build a DataFrame view of an allocation plan.

    Parameters
    ----------
    plan
        Allocation plan returned by the allocation engine

    Returns
    -------
    pd.DataFrame
        One row per allocated pool indexed by ``pool-id``, in ranked order.
        ``zrx-amount`` holds the exact Decimal amounts, so
        ``df["zrx-amount"].sum() == plan.effective_amount``.
    """
    rows = []
    for entry in plan.entries:
        share = None
        if plan.effective_amount > 0:
            share = entry.zrx_amount / plan.effective_amount
        rows.append(
            {
                INDEX_NAME: entry.pool_id,
                "pool-name": entry.pool.name,
                "score": entry.score,
                "weight": entry.weight,
                "zrx-amount": entry.zrx_amount,
                "share": share,
            }
        )
    return pd.DataFrame(rows, columns=[INDEX_NAME, *PLAN_COLUMNS]).set_index(
        INDEX_NAME
    )
