"""Lookup and grouping queries over a VerbCatalog."""

import unicodedata
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from domain.catalog.adapter import VerbCatalog
from domain.catalog.verbs import VerbEntry
from domain.taxonomy import Level, LevelCatalog


class LevelGroup(BaseModel):
    """Entries that belong to one level, sorted by verb text."""

    model_config = ConfigDict(frozen=True)

    level: Level
    entries: tuple[VerbEntry, ...] = ()


def collation_key(text: str) -> tuple[str, str]:
    """
    Sort key approximating locale-aware comparison: accents and case are ignored first,
    then the raw text breaks ties so ordering stays total.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return base, text


def get_verb_by_id(catalog: VerbCatalog, verb_id: str) -> VerbEntry | None:
    for entry in catalog.verbs:
        if entry.id == verb_id:
            return entry
    return None


def find_verbs_by_text(catalog: VerbCatalog, query: str | None) -> list[VerbEntry]:
    """
    All entries whose verb text equals the trimmed query, ignoring case, in source order.

    A blank query matches nothing.
    """
    q = (query or "").strip().casefold()
    if not q:
        return []
    return [entry for entry in catalog.verbs if entry.verb.casefold() == q]


def group_by_level(entries: Iterable[VerbEntry], taxonomy: LevelCatalog) -> list[LevelGroup]:
    """
    One group per declared level (catalog order) holding the entries whose expanded
    membership includes that level. Entries sharing a verb text stay separate rows.
    """
    buckets: dict[str, list[VerbEntry]] = {lvl.id: [] for lvl in taxonomy.levels}
    for entry in entries:
        for level_id in dict.fromkeys(entry.level_ids):
            if level_id in buckets:
                buckets[level_id].append(entry)

    return [
        LevelGroup(
            level=lvl,
            entries=tuple(sorted(buckets[lvl.id], key=lambda e: collation_key(e.verb))),
        )
        for lvl in taxonomy.levels
    ]


def filter_by_format(catalog: VerbCatalog, format_id: str | None) -> list[VerbEntry]:
    if not format_id:
        return []
    return [entry for entry in catalog.verbs if format_id in entry.assessment_format_ids]


def rank_for_level(catalog: VerbCatalog, level_name: str) -> int | float:
    """Declared rank of a level display name; unknown names sort last."""
    return catalog.taxonomy.rank_for_level(level_name)


def ordered_level_names(catalog: VerbCatalog, entry: VerbEntry) -> list[str]:
    """An entry's level display names, lowest rank first."""
    return catalog.taxonomy.ordered_names(entry.levels)


def order_by_first_level(catalog: VerbCatalog, entries: Iterable[VerbEntry]) -> list[VerbEntry]:
    """Stable ordering by the rank of each entry's first membership level."""
    return sorted(
        entries,
        key=lambda e: rank_for_level(catalog, e.levels[0] if e.levels else ""),
    )


def unique_verb_texts(catalog: VerbCatalog) -> list[str]:
    """Distinct non-empty verb texts, sorted for autocomplete."""
    texts = dict.fromkeys(entry.verb for entry in catalog.verbs if entry.verb)
    return sorted(texts, key=collation_key)
