"""
Exceptions that are used throughout the stake-shares library.

"""

from __future__ import annotations


class StakeSharesError(Exception):
    """Base exception for stake-shares library."""

    pass


class ConfigurationError(StakeSharesError):
    """Raised when configuration is invalid or missing."""

    pass


class DataError(StakeSharesError):
    """Base exception for data-related errors."""

    pass


class DataLoadingError(DataError):
    """Raised when pool catalog or configuration files cannot be loaded."""

    pass


class AllocationError(StakeSharesError):
    """Raised when stake allocation calculations fail."""

    pass


class InsufficientCapacityError(AllocationError):
    """
    Raised when a positive amount is requested but no pool can receive it.

    This is a user-facing condition (e.g. the pool catalog is empty), callers
    should surface it rather than treat it as a crash.
    """

    pass


class ValidationError(StakeSharesError):
    """Base exception for validation errors."""

    pass


class InputValidationError(ValidationError):
    """
    Raised when input validation fails.

    Input validation covers the requested amount (finite, non-negative) and
    pool records (operator share in [0, 1], non-negative staked and fee values,
    unique pool ids).
    """

    pass


class OutputValidationError(ValidationError):
    """
    Raised when output validation fails.

    Output validation checks that every allocated amount has exactly two
    fraction digits, is non-negative, and that the amounts sum exactly to the
    effective requested amount.
    """

    pass
