"""
Main components for the stake-shares library.

Nothing is exported from this module, users should import from specific submodules:
- stake_shares.library.allocations (allocation engine, manager, result containers)
- stake_shares.library.pools (staking pool models and catalog loading)
- stake_shares.library.config (allocation configuration)
- stake_shares.library.utils (money, unit and dataframe helpers)
- stake_shares.library.validation (validation functions)
"""

from __future__ import annotations
