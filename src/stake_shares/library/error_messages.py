"""
Error message templates for stake allocation.

Messages follow WHAT/CAUSE/FIX structure.
"""

from __future__ import annotations

from difflib import get_close_matches

ERROR_MESSAGES = {
    "negative_value": """
Negative value for {field_name}{pool_context}.

WHAT HAPPENED:
  {field_name} must be zero or positive.
  Got: {value}

LIKELY CAUSE:
  - Sign error when converting from base units or a UI input
  - Corrupted pool statistics from the backend

HOW TO FIX:
  Check the value before building the request or pool record:
  >>> from decimal import Decimal
  >>> Decimal("{value}") >= 0
""",
    "operator_share_out_of_range": """
Operator share out of range{pool_context}.

WHAT HAPPENED:
  operator_share must be a fraction between 0 and 1 (inclusive).
  Got: {value}

LIKELY CAUSE:
  The operator share was given in parts-per-million or as a percentage
  instead of as a fraction.

HOW TO FIX:
  Convert to a fraction before building the pool:
  - parts-per-million: 49000 -> 0.049
  - percentage: 4.9 -> 0.049
""",
    "invalid_number": """
Invalid numeric value for {field_name}{pool_context}.

WHAT HAPPENED:
  Could not interpret {value!r} as a finite decimal number.
  Reason: {reason}

LIKELY CAUSE:
  - Missing field in the pool statistics record
  - NaN or infinity produced upstream
  - A non-numeric string

HOW TO FIX:
  Provide an int, a decimal string (e.g. "1277.12") or a decimal.Decimal.
""",
    "magnitude_out_of_range": """
Value out of supported range for {field_name}{pool_context}.

WHAT HAPPENED:
  Non-zero values must have a decimal exponent between -{limit} and {limit}.
  Got: {value}

LIKELY CAUSE:
  - An exponent typo in a decimal string, e.g. "1e2000000"
  - A corrupted statistic from the backend

HOW TO FIX:
  Check the magnitude of the value before building the request or pool:
  >>> value.adjusted()
""",
    "invalid_pool_id": """
Invalid pool id.

WHAT HAPPENED:
  Every staking pool needs a non-empty string poolId.
  Got: {value!r}

LIKELY CAUSE:
  The pool record is missing its poolId field.

HOW TO FIX:
  Check the record shape returned by the pool statistics backend:
  >>> record["poolId"]
""",
    "duplicate_pool_ids": """
Duplicate pool ids in catalog.

WHAT HAPPENED:
  Pool ids must be unique within a single allocation request.
  Duplicated: {duplicates}

LIKELY CAUSE:
  The catalog was concatenated from several pages or snapshots
  without de-duplication.

HOW TO FIX:
  Keep one record per pool id, e.g. the most recent snapshot:
  >>> pools = list({{pool.pool_id: pool for pool in pools}}.values())
""",
    "insufficient_capacity": """
No staking pool available for {amount} ZRX.

WHAT HAPPENED:
  A positive amount was requested but the pool catalog is empty,
  so there is nothing to allocate to.

LIKELY CAUSE:
  - The pool statistics backend returned no pools
  - All pools were filtered out before calling the allocator

HOW TO FIX:
  Refresh the pool catalog and retry, or show the user that no pools
  are currently accepting stake.
""",
    "invalid_plan_amount": """
Invalid allocation amount for pool {pool_id}.

WHAT HAPPENED:
  Got: {amount!r}
  Problem: {reason}

CONTEXT:
  Every allocated amount must be a decimal.Decimal with exactly two
  fraction digits, non-negative and not above the effective amount ({effective}).

HOW TO FIX:
  This is likely a bug in the allocation or in code that modified the
  plan afterwards. Build plans through allocate() instead.
""",
    "plan_sum_mismatch": """
Allocation amounts do not sum to the effective amount.

WHAT HAPPENED:
  The allocated amounts sum to {actual}, expected {expected}.
  Difference: {difference}

CONTEXT:
  The requested amount is truncated to two fraction digits, then split
  with the largest-remainder method so the parts add up exactly.

HOW TO FIX:
  This is likely a bug. Please report this with:
  - The requested amount
  - The pool catalog (pool ids, operator shares, staked amounts, fees)
  - The scoring function and max_pools used
""",
    "unknown_scoring_function": """
Scoring function '{name}' not recognized.

WHAT HAPPENED:
  The specified scoring function is not registered.

LIKELY CAUSE:
  Possible typo in the scoring function name.

HOW TO FIX:
  {suggestion}

  Registered scoring functions:
  - 'operator-share-fees': (1 - operator share) * (7-day fees + epsilon)
  - 'operator-share': 1 - operator share
  - 'stake-capacity': ZRX currently staked in the pool
""",
    "invalid_score": """
Invalid score for pool {pool_id}.

WHAT HAPPENED:
  The scoring function returned {score!r}.
  Scores must be finite, non-negative numbers, and non-zero scores need
  a decimal exponent between -{limit} and {limit}.

LIKELY CAUSE:
  A custom scoring function produced a negative or NaN value.

HOW TO FIX:
  Clamp the score at zero inside the scoring function:
  >>> def my_score(pool):
  ...     return max(Decimal(0), raw_score(pool))
""",
}


def format_error(key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Parameters
    ----------
    key
        The error message key from ERROR_MESSAGES
    **kwargs
        Parameters to format into the message template

    Returns
    -------
    str
        The formatted error message
    """
    template = ERROR_MESSAGES.get(key)
    if template is None:
        return f"Unknown error: {key}"
    return template.format(**kwargs).strip()


def pool_context(pool_id: str | None) -> str:
    """Return the ' (pool <id>)' suffix used in pool-level messages."""
    if pool_id is None:
        return ""
    return f" (pool {pool_id})"


def suggest_similar(
    value: str, valid_options: list[str], max_suggestions: int = 3
) -> str:
    """
    Suggest similar valid options for typos.

    Parameters
    ----------
    value
        The invalid value that was provided
    valid_options
        List of valid options to match against
    max_suggestions
        Maximum number of suggestions to return (default: 3)

    Returns
    -------
    str
        A formatted suggestion message
    """
    matches = get_close_matches(value, valid_options, n=max_suggestions, cutoff=0.6)
    if matches:
        return f"Did you mean: {', '.join(matches)}?"
    return f"Valid options: {', '.join(valid_options)}"
