"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Verbs document reading (JSON, YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ExplorerConfig, load_explorer_config
from infrastructure.io import read_document

__all__ = [
    "load_explorer_config",
    "ExplorerConfig",
    "read_document",
]
