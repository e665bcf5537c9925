"""
Configuration management: models, loading, and validation.

Handles:
- ExplorerConfig: data location, output directory, logging
- AdapterSettings: palette and schema defaults used during normalization
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_explorer_config
from infrastructure.config.models import ExplorerConfig, LoggingConfig

__all__ = [
    "ExplorerConfig",
    "LoggingConfig",
    "load_explorer_config",
]
