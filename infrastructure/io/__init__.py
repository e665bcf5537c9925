"""I/O utilities: filesystem checks and verbs document reading."""

from infrastructure.io.documents import read_document
from infrastructure.io.fs import ensure_exists

__all__ = [
    "ensure_exists",
    "read_document",
]
