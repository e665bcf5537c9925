"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import ExplorerConfig
from infrastructure.constants import DATA_FILE_ENV

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_explorer_config(config_path: Path | None = None) -> ExplorerConfig:
    """
    Load explorer.yaml and construct a fully-resolved ExplorerConfig.

    Without a path, defaults are used. The data file can be overridden with the
    VERB_EXPLORER_DATA_FILE environment variable (e.g. from a .env file).

    Raises:
        FileNotFoundError: If config_path is given but missing
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(config_path) if config_path is not None else {}

    for key in ("catalog", "logging"):
        if key in data and not isinstance(data[key] or {}, dict):
            raise ValueError(f"explorer.yaml key '{key}' must be a mapping")
        data[key] = data.get(key) or {}

    env_data_file = os.environ.get(DATA_FILE_ENV, "").strip()
    if env_data_file:
        logger.debug("Overriding data_file from %s=%s", DATA_FILE_ENV, env_data_file)
        data["data_file"] = env_data_file

    return ExplorerConfig.model_validate(data)
