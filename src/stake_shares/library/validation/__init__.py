"""
Validation for the stake-shares library.

"""

from .inputs import (
    validate_max_pools,
    validate_non_negative,
    validate_operator_share,
    validate_pool_catalog,
    validate_pool_id,
    validate_requested_amount,
    validate_unique_pool_ids,
)
from .outputs import validate_plan_amounts

__all__ = [
    "validate_max_pools",
    "validate_non_negative",
    "validate_operator_share",
    "validate_plan_amounts",
    "validate_pool_catalog",
    "validate_pool_id",
    "validate_requested_amount",
    "validate_unique_pool_ids",
]
