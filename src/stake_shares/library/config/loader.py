"""
Configuration loading utilities.

This module builds ``AllocationConfig`` objects from YAML files, e.g.::

    scoring_function: operator-share-fees
    epsilon: "1e-9"
    max_pools: 5
    token_decimals: 18
"""

from __future__ import annotations

from pathlib import Path

import pydantic
import yaml

from stake_shares.library.config.models import AllocationConfig
from stake_shares.library.exceptions import ConfigurationError, DataLoadingError


def load_allocation_config(config_path: Path | str) -> AllocationConfig:
    """
    Load and validate an allocation configuration from a YAML file.

    Missing keys take their defaults. An empty file gives the default
    configuration.

    Parameters
    ----------
    config_path : Path | str
        Path to the YAML configuration file

    Returns
    -------
    AllocationConfig
        Validated configuration

    Raises
    ------
    DataLoadingError
        If the file does not exist, cannot be read as UTF-8 text or is not
        valid YAML
    ConfigurationError
        If the document is not a mapping or holds invalid or unknown keys
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise DataLoadingError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DataLoadingError(f"Config file is not valid YAML: {config_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadingError(f"Could not read config file {config_path}: {exc}") from exc

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, "
            f"got {type(raw_config).__name__}"
        )

    # YAML parses bare floats such as 1e-9 to float; keep epsilon exact
    if isinstance(raw_config.get("epsilon"), float):
        raw_config["epsilon"] = repr(raw_config["epsilon"])

    try:
        return AllocationConfig(**raw_config)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(
            f"Invalid allocation config in {config_path}:\n{exc}"
        ) from exc
