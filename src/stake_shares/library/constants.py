"""
Constants shared across the stake-shares library.

"""

from __future__ import annotations

from decimal import Decimal

# Smallest monetary unit at the engine boundary is 1/100 of a token
CENTS_PER_UNIT: int = 100

# Every monetary amount produced by the engine is quantized to this exponent
MONEY_EXPONENT: int = -2

# Keeps pools without fee history rankable (but below any pool with history)
DEFAULT_EPSILON: Decimal = Decimal("1e-9")

DEFAULT_SCORING_FUNCTION: str = "operator-share-fees"

# ZRX is an 18-decimal ERC20 token
DEFAULT_TOKEN_DECIMALS: int = 18

# Largest token precision the base unit conversions accept
MAX_TOKEN_DECIMALS: int = 36

# Largest absolute adjusted exponent accepted for amounts and pool statistics,
# i.e. non-zero values lie within [10^-1000, 10^1001)
MAX_DECIMAL_EXPONENT: int = 1000
