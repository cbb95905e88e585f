"""
Staking pool models and catalog loading for the stake-shares library.

"""

from .catalog import build_pool_catalog, load_pool_catalog
from .models import StakingPool

__all__ = [
    "StakingPool",
    "build_pool_catalog",
    "load_pool_catalog",
]
