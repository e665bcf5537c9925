"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the search and browse workflows over a loaded catalog.
"""

from application.browse import (
    FormatBrowseResult,
    SearchStatus,
    VerbSearchResult,
    browse_format,
    browse_hierarchy,
    search_verbs,
    select_verb,
)
from application.serialize import dumps, summarize_groups, to_payload, write_json
from application.session import CatalogSession

__all__ = [
    # Session
    "CatalogSession",
    # Workflows
    "search_verbs",
    "select_verb",
    "browse_hierarchy",
    "browse_format",
    "SearchStatus",
    "VerbSearchResult",
    "FormatBrowseResult",
    # Serialization
    "to_payload",
    "summarize_groups",
    "dumps",
    "write_json",
]
