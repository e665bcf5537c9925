"""Verbs document reading utilities."""

import json
from pathlib import Path
from typing import Any

import yaml

from domain.errors import CatalogLoadError


def read_document(path: Path) -> dict[str, Any]:
    """
    Read a verbs document (JSON or YAML) based on file extension.

    Supported formats:
    - JSON: .json
    - YAML: .yaml, .yml

    Args:
        path: Path to the document

    Returns:
        Parsed top-level mapping

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If file format is not supported
        CatalogLoadError: If the content is not UTF-8, cannot be parsed, or is not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"Verbs document not found: {path}")

    suffix = path.suffix.lower()

    try:
        with path.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .json, .yaml, .yml")
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Verbs document is not valid {suffix.lstrip('.').upper()}: {path}") from e

    if not isinstance(data, dict):
        raise CatalogLoadError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")

    return data
