"""
Taxonomy management: level ordering, colors, and id/name lookups.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_levels
from domain.taxonomy.normalizer import Level, LevelCatalog

__all__ = [
    "Level",
    "LevelCatalog",
    "parse_levels",
]
