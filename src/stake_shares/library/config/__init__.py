"""Configuration models and utilities for stake allocation."""

from stake_shares.library.config.loader import load_allocation_config
from stake_shares.library.config.models import AllocationConfig

__all__ = [
    "AllocationConfig",
    "load_allocation_config",
]
