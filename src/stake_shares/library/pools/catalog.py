"""
Pool catalog construction and loading.

This module turns the records served by the pool statistics backend into
validated ``StakingPool`` snapshots. Fetching the records over the network is
left to the caller; snapshots saved to disk can be loaded with
``load_pool_catalog``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any

from stake_shares.library.exceptions import DataLoadingError
from stake_shares.library.pools.models import StakingPool
from stake_shares.library.validation.inputs import validate_unique_pool_ids

logger = logging.getLogger(__name__)

# Key under which the backend wraps the pool list in its staking pools response
POOLS_RESPONSE_KEY = "stakingPools"


def build_pool_catalog(
    records: Iterable[Mapping[str, Any] | StakingPool],
) -> list[StakingPool]:
    """
    Build a validated pool catalog from backend records.

    Parameters
    ----------
    records
        Backend records (see ``StakingPool.from_api_record``) or already built
        StakingPool instances, in any order

    Returns
    -------
    list[StakingPool]
        One pool per record, in input order

    Raises
    ------
    InputValidationError
        If a record is invalid or pool ids are duplicated
    """
    catalog = [
        record if isinstance(record, StakingPool) else StakingPool.from_api_record(record)
        for record in records
    ]
    validate_unique_pool_ids(catalog)
    return catalog


def load_pool_catalog(path: Path | str) -> list[StakingPool]:
    """
    Load a pool catalog from a JSON snapshot file.

    The file holds either a list of pool records or the backend response object
    with the list under ``"stakingPools"``. Numbers are parsed straight to
    Decimal, so no float ever touches the statistics.

    Parameters
    ----------
    path
        Path to the JSON snapshot

    Returns
    -------
    list[StakingPool]
        The validated catalog

    Raises
    ------
    DataLoadingError
        If the file does not exist, cannot be read as UTF-8 text, is not
        valid JSON or has an unexpected shape
    InputValidationError
        If a record holds invalid values
    """
    path = Path(path)
    if not path.exists():
        raise DataLoadingError(f"Pool catalog file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise DataLoadingError(f"Pool catalog file is not valid JSON: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadingError(f"Could not read pool catalog file {path}: {exc}") from exc

    if isinstance(payload, Mapping):
        if POOLS_RESPONSE_KEY not in payload:
            raise DataLoadingError(
                f"Pool catalog object in {path} has no '{POOLS_RESPONSE_KEY}' key. "
                f"Found keys: {sorted(payload)}"
            )
        payload = payload[POOLS_RESPONSE_KEY]

    if not isinstance(payload, list):
        raise DataLoadingError(
            f"Pool catalog in {path} must be a list of pool records, "
            f"got {type(payload).__name__}."
        )

    catalog = build_pool_catalog(payload)
    logger.debug("Loaded %d staking pools from %s", len(catalog), path)
    return catalog
