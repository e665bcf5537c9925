"""Resolve level-specific content for a verb entry."""

from collections.abc import Callable, Iterable, Mapping
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

from domain.catalog.adapter import VerbCatalog
from domain.catalog.index import ordered_level_names
from domain.catalog.verbs import FormatMapping, VerbEntry
from domain.constants import SUITABILITY_RANK, UNKNOWN_SUITABILITY_RANK

T = TypeVar("T")


def resolve_by_level(
    by_level: Mapping[str, object],
    *,
    selected_level_id: str | None,
    primary_level_id: str | None,
    is_kind: Callable[[object], bool],
    default: T,
) -> T:
    """
    Three-tier fallback over a level-keyed map.

    1. the value for the selected level, if it is of the right kind and non-empty
    2. the value for the primary level, same condition
    3. the value under the first key, if it is of the right kind (may be empty)
    4. `default`
    """
    for level_id in (selected_level_id, primary_level_id):
        if not level_id:
            continue
        value = by_level.get(level_id)
        if is_kind(value) and value:
            return value  # type: ignore[return-value]

    if by_level:
        first = next(iter(by_level.values()))
        if is_kind(first):
            return first  # type: ignore[return-value]
    return default


def _is_phrase_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _is_text(value: object) -> bool:
    return isinstance(value, str)


def resolve_phrasings(entry: VerbEntry, selected_level_id: str | None = None) -> list[str]:
    """Example outcome phrasings for the level in view; empty means none written yet."""
    stems = resolve_by_level(
        entry.stems_by_level,
        selected_level_id=selected_level_id,
        primary_level_id=entry.primary_level_id,
        is_kind=_is_phrase_list,
        default=(),
    )
    return list(stems)


def resolve_guidance(entry: VerbEntry, selected_level_id: str | None = None) -> str:
    return resolve_by_level(
        entry.level_guidance,
        selected_level_id=selected_level_id,
        primary_level_id=entry.primary_level_id,
        is_kind=_is_text,
        default="",
    )


def suitability_rank(suitability: str) -> int:
    return SUITABILITY_RANK.get(suitability, UNKNOWN_SUITABILITY_RANK)


def sort_format_mappings(mappings: Iterable[FormatMapping]) -> list[FormatMapping]:
    """Most defensible tiers first (high, context-dependent, medium, low); source order within a tier."""
    return sorted(mappings, key=lambda m: suitability_rank(m.suitability))


class VerbDetail(BaseModel):
    """Everything a detail view needs for one entry seen from one level."""

    model_config = ConfigDict(frozen=True)

    entry: VerbEntry
    selected_level_id: str | None = None
    level_names: tuple[str, ...] = ()
    phrasings: tuple[str, ...] = ()
    guidance: str = ""
    format_mappings: tuple[FormatMapping, ...] = ()
    format_names: tuple[str, ...] = ()
    disclaimer: str = ""


def resolve_verb_detail(
    catalog: VerbCatalog,
    entry: VerbEntry,
    selected_level_id: str | None = None,
) -> VerbDetail:
    return VerbDetail(
        entry=entry,
        selected_level_id=selected_level_id,
        level_names=tuple(ordered_level_names(catalog, entry)),
        phrasings=tuple(resolve_phrasings(entry, selected_level_id)),
        guidance=resolve_guidance(entry, selected_level_id),
        format_mappings=tuple(sort_format_mappings(entry.format_mappings)),
        format_names=tuple(catalog.formats.names_for_ids(entry.assessment_format_ids)),
        disclaimer=catalog.disclaimer,
    )
