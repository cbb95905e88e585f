"""Pydantic model for staking pool snapshots.

A ``StakingPool`` is an immutable snapshot of one pool's statistics at the
time the catalog was fetched. The allocation engine reads the numeric fields;
everything else (operator address, metadata, creation info) is carried along
untouched so the plan can be rendered and executed without a second lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import Any

import pydantic
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from stake_shares.library.error_messages import format_error, pool_context
from stake_shares.library.exceptions import InputValidationError
from stake_shares.library.validation.inputs import (
    validate_non_negative,
    validate_operator_share,
    validate_pool_id,
)


class StakingPool(BaseModel):
    """
    Snapshot of one staking pool.

    Field names are snake_case; the camelCase names used by the pool
    statistics backend are accepted as aliases.

    Numeric fields accept int, str, float or Decimal and are stored as Decimal.
    Invalid values raise ``InputValidationError``. ``metadata`` and
    ``created_at`` are stored as read-only mappings.

    Examples
    --------
    >>> pool = StakingPool(
    ...     pool_id="8",
    ...     operator_share="0",
    ...     current_zrx_staked="1474.0966666666668",
    ... )
    >>> pool.operator_share
    Decimal('0')
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pool_id: str = Field(..., alias="poolId", description="Unique pool identifier")
    operator_share: Decimal = Field(
        ...,
        alias="operatorShare",
        description="Fraction of rewards kept by the operator, in [0, 1]",
    )
    current_zrx_staked: Decimal = Field(
        Decimal("0"),
        alias="currentZrxStaked",
        description="ZRX staked in the pool for the current epoch",
    )
    next_epoch_zrx_staked: Decimal = Field(
        Decimal("0"),
        alias="nextEpochZrxStaked",
        description="ZRX staked in the pool for the next epoch",
    )
    seven_day_fees_generated_in_eth: Decimal = Field(
        Decimal("0"),
        alias="sevenDayFeesGeneratedInEth",
        description="Protocol fees generated by the pool's makers over 7 days",
    )
    operator_address: str | None = Field(None, alias="operatorAddress")
    metadata: Mapping[str, Any] = Field(default_factory=dict, alias="metaData")
    created_at: Mapping[str, Any] | None = Field(None, alias="createdAt")

    @field_validator("pool_id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> str:
        """Validate the pool id."""
        return validate_pool_id(v)

    @field_validator("operator_share", mode="before")
    @classmethod
    def validate_share(cls, v: Any, info: ValidationInfo) -> Decimal:
        """Validate operator share is in [0, 1]."""
        return validate_operator_share(v, pool_id=info.data.get("pool_id"))

    @field_validator(
        "current_zrx_staked",
        "next_epoch_zrx_staked",
        "seven_day_fees_generated_in_eth",
        mode="before",
    )
    @classmethod
    def validate_amounts(cls, v: Any, info: ValidationInfo) -> Decimal:
        """Validate staked and fee values are non-negative."""
        return validate_non_negative(
            v, info.field_name, pool_id=info.data.get("pool_id")
        )

    @field_validator("metadata", "created_at")
    @classmethod
    def freeze_mapping(cls, v: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        if v is None:
            return v
        return MappingProxyType(dict(v))

    @field_serializer("metadata", "created_at")
    def serialize_mapping(self, v: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return None if v is None else dict(v)

    def __hash__(self) -> int:
        # metadata and created_at take part in equality but not in the hash
        return hash(
            (
                self.pool_id,
                self.operator_share,
                self.current_zrx_staked,
                self.next_epoch_zrx_staked,
                self.seven_day_fees_generated_in_eth,
                self.operator_address,
            )
        )

    @property
    def name(self) -> str | None:
        """Display name from the pool metadata, if the operator set one."""
        return self.metadata.get("name")

    @property
    def is_verified(self) -> bool:
        return bool(self.metadata.get("isVerified", False))

    @classmethod
    def from_api_record(cls, record: Mapping[str, Any]) -> StakingPool:
        """
        Build a pool from a pool statistics backend record.

        The backend nests per-epoch statistics::

            {
                "poolId": "1",
                "operatorAddress": "0x5409...",
                "createdAt": {"blockNumber": 14491738, "txHash": "0xea30..."},
                "metaData": {"name": "Over 9000", "isVerified": false},
                "sevenDayProtocolFeesGeneratedInEth": 0,
                "currentEpochStats": {"zrxStaked": 29602.75, "operatorShare": 0.000004},
                "nextEpochStats": {"zrxStaked": 29602.75, "operatorShare": 0.000004},
            }

        The operator share is taken from the current epoch, falling back to the
        next epoch for pools created during the current one.

        Raises
        ------
        InputValidationError
            If the record is not a mapping, lacks a pool id or operator share,
            or holds invalid values
        """
        if not isinstance(record, Mapping):
            raise InputValidationError(
                f"Pool record must be a mapping, got {type(record).__name__}."
            )
        if "poolId" not in record:
            raise InputValidationError(format_error("invalid_pool_id", value=None))

        context = pool_context(record["poolId"])
        for key in ("currentEpochStats", "nextEpochStats", "metaData", "createdAt"):
            value = record.get(key)
            if value is not None and not isinstance(value, Mapping):
                raise InputValidationError(
                    f"Pool record field '{key}'{context} must be a mapping, "
                    f"got {type(value).__name__}."
                )

        current = record.get("currentEpochStats") or {}
        upcoming = record.get("nextEpochStats") or {}
        operator_share = current.get("operatorShare")
        if operator_share is None:
            operator_share = upcoming.get("operatorShare")

        try:
            return cls(
                pool_id=record["poolId"],
                operator_share=operator_share,
                current_zrx_staked=current.get("zrxStaked", 0),
                next_epoch_zrx_staked=upcoming.get("zrxStaked", 0),
                seven_day_fees_generated_in_eth=record.get(
                    "sevenDayProtocolFeesGeneratedInEth", 0
                ),
                operator_address=record.get("operatorAddress"),
                metadata=record.get("metaData") or {},
                created_at=record.get("createdAt"),
            )
        except pydantic.ValidationError as exc:
            raise InputValidationError(f"Invalid pool record{context}:\n{exc}") from exc
