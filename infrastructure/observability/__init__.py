"""
Observability: logging and context management.

Provides:
- Contextual logging with load tag and document source
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    make_load_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "make_load_tag",
]
