"""
Stake allocation engine, orchestration and result handling for stake-shares library.

"""

from .core import allocate, rank_pools, select_pools
from .manager import AllocationManager
from .registry import get_scoring_function, get_scoring_functions
from .results import AllocationEntry, AllocationPlan, MoveStakeInstruction

__all__ = [
    "AllocationEntry",
    "AllocationManager",
    "AllocationPlan",
    "MoveStakeInstruction",
    "allocate",
    "get_scoring_function",
    "get_scoring_functions",
    "rank_pools",
    "select_pools",
]
