"""
Mathematical utilities for the stake-shares library.

"""

from stake_shares.library.utils.math.apportionment import largest_remainder

__all__ = [
    "largest_remainder",
]
