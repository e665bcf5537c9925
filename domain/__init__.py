"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for the raw verbs document
- taxonomy: Level catalog ordering and lookups
- catalog: Verb normalization, lookups, and content resolution
"""

from domain.catalog import VerbCatalog, build_catalog
from domain.errors import CatalogLoadError
from domain.schemas import RawDocument

__all__ = [
    "VerbCatalog",
    "build_catalog",
    "CatalogLoadError",
    "RawDocument",
]
