"""
Utility functions for the stake-shares library.

"""

from stake_shares.library.utils.dataframes import (
    catalog_to_dataframe,
    plan_to_dataframe,
)
from stake_shares.library.utils.math import largest_remainder
from stake_shares.library.utils.money import (
    cents_to_money,
    check_magnitude,
    is_money,
    money_to_cents,
    to_decimal,
    truncate_to_cents,
)
from stake_shares.library.utils.units import from_base_units, to_base_units

__all__ = [
    "catalog_to_dataframe",
    "cents_to_money",
    "check_magnitude",
    "from_base_units",
    "is_money",
    "largest_remainder",
    "money_to_cents",
    "plan_to_dataframe",
    "to_base_units",
    "to_decimal",
    "truncate_to_cents",
]
