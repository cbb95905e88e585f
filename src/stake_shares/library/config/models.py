"""Pydantic models for allocation configuration validation.

"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stake_shares.library.constants import (
    DEFAULT_EPSILON,
    DEFAULT_SCORING_FUNCTION,
    DEFAULT_TOKEN_DECIMALS,
    MAX_TOKEN_DECIMALS,
)
from stake_shares.library.error_messages import format_error, suggest_similar
from stake_shares.library.exceptions import ConfigurationError, InputValidationError
from stake_shares.library.utils.money import check_magnitude, to_decimal
from stake_shares.library.validation.inputs import validate_max_pools


class AllocationConfig(BaseModel):
    """
    Configuration for the allocation engine.

    Examples
    --------
    >>> config = AllocationConfig(scoring_function="operator-share", max_pools=5)
    >>> config.epsilon
    Decimal('1E-9')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scoring_function: str = Field(
        DEFAULT_SCORING_FUNCTION,
        description="Registered scoring function used to rank and weight pools",
    )
    epsilon: Decimal = Field(
        DEFAULT_EPSILON,
        description="Small positive constant added to fee history in fee-based scores",
    )
    max_pools: int | None = Field(
        None, description="Maximum number of pools to spread stake over (None: no limit)"
    )
    token_decimals: int = Field(
        DEFAULT_TOKEN_DECIMALS,
        description="Decimals of the staked token, used for base unit conversion",
    )

    @field_validator("scoring_function")
    @classmethod
    def validate_scoring_function(cls, v: str) -> str:
        """Validate that the scoring function is registered."""
        from stake_shares.library.allocations.registry import get_scoring_functions

        available = list(get_scoring_functions())
        if v not in available:
            raise ConfigurationError(
                format_error(
                    "unknown_scoring_function",
                    name=v,
                    suggestion=suggest_similar(v, available),
                )
            )
        return v

    @field_validator("epsilon", mode="before")
    @classmethod
    def validate_epsilon(cls, v: Any) -> Decimal:
        """Validate that epsilon is a small positive number."""
        try:
            value = check_magnitude(to_decimal(v, field_name="epsilon"), "epsilon")
        except InputValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
        if value <= 0:
            raise ConfigurationError(f"epsilon must be positive, got {value}")
        return value

    @field_validator("max_pools", mode="before")
    @classmethod
    def check_max_pools(cls, v: Any) -> int | None:
        """Validate that max_pools is a positive integer or None."""
        return validate_max_pools(v)

    @field_validator("token_decimals", mode="before")
    @classmethod
    def validate_token_decimals(cls, v: Any) -> int:
        """Validate token decimals are within the supported range."""
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= MAX_TOKEN_DECIMALS:
            raise ConfigurationError(
                f"token_decimals must be an integer between 0 and "
                f"{MAX_TOKEN_DECIMALS}, got {v!r}"
            )
        return v
