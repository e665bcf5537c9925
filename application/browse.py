"""Search and browse workflows over a loaded catalog."""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.catalog import (
    LevelGroup,
    VerbCatalog,
    VerbDetail,
    VerbEntry,
    filter_by_format,
    find_verbs_by_text,
    get_verb_by_id,
    group_by_level,
    order_by_first_level,
    resolve_verb_detail,
)

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    """Outcome of a verb text search."""

    EMPTY_QUERY = "empty-query"
    NO_MATCH = "no-match"
    SINGLE = "single"
    MULTIPLE = "multiple"


class VerbSearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    status: SearchStatus
    matches: tuple[VerbEntry, ...] = ()
    detail: VerbDetail | None = None


class FormatBrowseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    format_id: str
    format_name: str
    disclaimer: str = ""
    groups: tuple[LevelGroup, ...] = ()


def select_verb(catalog: VerbCatalog, verb_id: str, selected_level_id: str | None = None) -> VerbDetail:
    """
    Resolve the detail view for one entry, seen from `selected_level_id`.

    Raises:
        KeyError: If no entry has this id
    """
    entry = get_verb_by_id(catalog, verb_id)
    if entry is None:
        raise KeyError(f"Verb entry {verb_id!r} not found")
    return resolve_verb_detail(catalog, entry, selected_level_id)


def search_verbs(catalog: VerbCatalog, query: str | None) -> VerbSearchResult:
    """
    Exact (case-insensitive) verb text search.

    - blank query: EMPTY_QUERY
    - no entry: NO_MATCH
    - one entry: SINGLE, with its detail resolved for its primary level
    - several entries: MULTIPLE, ordered by the rank of each entry's first level
    """
    q = (query or "").strip()
    if not q:
        return VerbSearchResult(query=q, status=SearchStatus.EMPTY_QUERY)

    matches = find_verbs_by_text(catalog, q)
    if not matches:
        logger.debug("No exact match for %r", q)
        return VerbSearchResult(query=q, status=SearchStatus.NO_MATCH)

    if len(matches) == 1:
        entry = matches[0]
        return VerbSearchResult(
            query=q,
            status=SearchStatus.SINGLE,
            matches=(entry,),
            detail=resolve_verb_detail(catalog, entry, entry.primary_level_id),
        )

    return VerbSearchResult(
        query=q,
        status=SearchStatus.MULTIPLE,
        matches=tuple(order_by_first_level(catalog, matches)),
    )


def browse_hierarchy(catalog: VerbCatalog) -> list[LevelGroup]:
    """Every declared level with its member entries (levels without entries included)."""
    return group_by_level(catalog.verbs, catalog.taxonomy)


def browse_format(catalog: VerbCatalog, format_id: str | None) -> FormatBrowseResult:
    """Entries mapped to a format, grouped by level; levels without entries are omitted."""
    fid = (format_id or "").strip()
    matching = filter_by_format(catalog, fid)
    groups = [g for g in group_by_level(matching, catalog.taxonomy) if g.entries]
    return FormatBrowseResult(
        format_id=fid,
        format_name=catalog.formats.display_name(fid),
        disclaimer=catalog.disclaimer,
        groups=tuple(groups),
    )
