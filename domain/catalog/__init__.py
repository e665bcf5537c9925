"""
Verb catalog: normalization of the verbs document and queries over it.

Provides:
- build_catalog: raw document -> immutable VerbCatalog
- index: identity/text lookup, level grouping, format filtering
- resolver: level-aware phrasing/guidance resolution and mapping order
- tables: level coverage table

Everything except the *_and_save helper is pure.
"""

from domain.catalog.adapter import AdapterSettings, VerbCatalog, build_catalog
from domain.catalog.formats import AssessmentFormat, FormatCatalog, build_format_catalog
from domain.catalog.index import (
    LevelGroup,
    filter_by_format,
    find_verbs_by_text,
    get_verb_by_id,
    group_by_level,
    order_by_first_level,
    ordered_level_names,
    rank_for_level,
    unique_verb_texts,
)
from domain.catalog.resolver import (
    VerbDetail,
    resolve_by_level,
    resolve_guidance,
    resolve_phrasings,
    resolve_verb_detail,
    sort_format_mappings,
)
from domain.catalog.tables import (
    compute_level_coverage_table,
    compute_level_coverage_table_and_save,
)
from domain.catalog.verbs import (
    FormatMapping,
    Meaning,
    TaskIdea,
    VerbEntry,
    derive_entry_id,
    expand_level_membership,
    normalize_verb,
    slugify,
)

__all__ = [
    # Building
    "AdapterSettings",
    "VerbCatalog",
    "build_catalog",
    "build_format_catalog",
    "normalize_verb",
    "expand_level_membership",
    "derive_entry_id",
    "slugify",
    # Models
    "AssessmentFormat",
    "FormatCatalog",
    "FormatMapping",
    "Meaning",
    "TaskIdea",
    "VerbEntry",
    "LevelGroup",
    "VerbDetail",
    # Queries
    "get_verb_by_id",
    "find_verbs_by_text",
    "group_by_level",
    "filter_by_format",
    "rank_for_level",
    "ordered_level_names",
    "order_by_first_level",
    "unique_verb_texts",
    # Resolution
    "resolve_by_level",
    "resolve_phrasings",
    "resolve_guidance",
    "sort_format_mappings",
    "resolve_verb_detail",
    # Tables
    "compute_level_coverage_table",
    "compute_level_coverage_table_and_save",
]
