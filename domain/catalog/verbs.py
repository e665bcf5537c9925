"""Verb entry models and normalization of raw verb records."""

import logging
import re
from collections.abc import Collection, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.catalog.formats import FormatCatalog
from domain.constants import DEFAULT_SUITABILITY, DEFAULT_TAXONOMY_ID
from domain.schemas import RawFormatMapping, RawVerb
from domain.taxonomy.normalizer import LevelCatalog

logger = logging.getLogger(__name__)


class Meaning(BaseModel):
    model_config = ConfigDict(frozen=True)

    short: str = ""
    expanded: str = ""


class TaskIdea(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    description: str = ""
    evidence_produced: tuple[str, ...] = ()


class FormatMapping(BaseModel):
    """How well a verb entry fits one assessment format."""

    model_config = ConfigDict(frozen=True)

    assessment_format_id: str
    format_name: str
    suitability: str = DEFAULT_SUITABILITY
    rationale: str = ""
    design_notes: tuple[str, ...] = ()


class VerbEntry(BaseModel):
    """
    One (verb text, context) record.

    The same verb text may appear in several entries (e.g. "analyse" at two levels
    with different guidance); entries are never merged by text.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    verb: str = ""
    taxonomy_id: str = DEFAULT_TAXONOMY_ID

    primary_level_id: str | None = None
    also_fits_level_ids: tuple[str, ...] = ()
    level_ids: tuple[str, ...] = Field(
        default=(),
        description="Expanded level membership, restricted to declared level ids.",
    )
    levels: tuple[str, ...] = Field(default=(), description="Display names of level_ids, same order.")

    meaning: Meaning = Field(default_factory=Meaning)
    synonyms: tuple[str, ...] = ()
    search_keywords: tuple[str, ...] = ()

    stems_by_level: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    level_guidance: dict[str, str] = Field(default_factory=dict)
    diagnostic_strength: str | None = None

    task_ideas: tuple[TaskIdea, ...] = ()
    tags: dict[str, Any] | tuple[str, ...] = Field(default_factory=dict)

    assessment_format_ids: tuple[str, ...] = ()
    format_mappings: tuple[FormatMapping, ...] = ()


def slugify(text: object) -> str:
    """
    Lowercase slug with runs of non-alphanumerics collapsed to single hyphens.

    Examples:
        >>> slugify("  Critically Evaluate! ")
        'critically-evaluate'
        >>> slugify(None)
        ''
    """
    s = str(text or "").strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    return s.strip("-")


def derive_entry_id(primary_level_id: str | None, verb: str, index: int) -> str:
    """Identity for a record without an explicit id; the positional index keeps duplicate texts apart."""
    return f"{slugify(primary_level_id)}-{slugify(verb)}-{index}"


def membership_signals(
    *,
    primary_level_id: str | None,
    also_fits_level_ids: Iterable[str],
    stems_level_ids: Iterable[str],
    guidance_level_ids: Iterable[str],
) -> list[str]:
    """Union of every level id a record points at, de-duplicated in order of first appearance."""
    sources: tuple[Iterable[str | None], ...] = (
        [primary_level_id],
        also_fits_level_ids,
        stems_level_ids,
        guidance_level_ids,
    )
    return list(dict.fromkeys(lvl for source in sources for lvl in source if lvl))


def expand_level_membership(
    *,
    primary_level_id: str | None,
    also_fits_level_ids: Iterable[str],
    stems_level_ids: Iterable[str],
    guidance_level_ids: Iterable[str],
    known_level_ids: Collection[str],
) -> list[str]:
    """
    Expanded level membership of a verb record.

    Sources: the primary level, the also-fits list, the phrasing map keys and the
    guidance map keys. Ids not declared in the taxonomy are dropped.

    Examples:
        >>> expand_level_membership(
        ...     primary_level_id="understand",
        ...     also_fits_level_ids=[],
        ...     stems_level_ids=["understand", "apply"],
        ...     guidance_level_ids=["bogus"],
        ...     known_level_ids={"understand", "apply"},
        ... )
        ['understand', 'apply']
    """
    candidates = membership_signals(
        primary_level_id=primary_level_id,
        also_fits_level_ids=also_fits_level_ids,
        stems_level_ids=stems_level_ids,
        guidance_level_ids=guidance_level_ids,
    )
    return [lvl for lvl in candidates if lvl in known_level_ids]


def _normalize_mapping(
    raw: RawFormatMapping,
    formats: FormatCatalog,
    default_suitability: str,
) -> FormatMapping:
    format_id = raw.assessment_format_id
    if format_id and format_id not in formats.id_to_name:
        logger.debug("Format id %r is not declared; showing the raw id", format_id)

    suitability = (raw.suitability or "").strip().lower() or default_suitability
    return FormatMapping(
        assessment_format_id=format_id,
        format_name=formats.display_name(format_id),
        suitability=suitability,
        rationale=raw.rationale,
        design_notes=tuple(raw.design_notes),
    )


def normalize_verb(
    raw: RawVerb,
    index: int,
    *,
    levels: LevelCatalog,
    formats: FormatCatalog,
    default_taxonomy_id: str = DEFAULT_TAXONOMY_ID,
    default_suitability: str = DEFAULT_SUITABILITY,
) -> VerbEntry:
    """
    Normalize one raw verb record into a VerbEntry.

    Args:
        raw: Validated raw record
        index: Position of the record in the source list (used only for id derivation)
        levels: Level catalog (membership filter and display names)
        formats: Format catalog (format display names)
        default_taxonomy_id: Scheme tag for records without one
        default_suitability: Tier for mappings without one

    Returns:
        Fully populated VerbEntry; optional collections are empty, never None
    """
    entry_id = raw.id or derive_entry_id(raw.primary_level_id, raw.verb, index)

    signals = {
        "primary_level_id": raw.primary_level_id,
        "also_fits_level_ids": raw.also_fits_level_ids,
        "stems_level_ids": list(raw.stems_by_level),
        "guidance_level_ids": list(raw.level_guidance),
    }
    level_ids = expand_level_membership(**signals, known_level_ids=levels.known_ids)
    if logger.isEnabledFor(logging.DEBUG):
        dropped = [lvl for lvl in membership_signals(**signals) if lvl not in levels.known_ids]
        if dropped:
            logger.debug("Entry %s: dropped undeclared level ids %s", entry_id, dropped)

    mappings = [_normalize_mapping(m, formats, default_suitability) for m in raw.format_mappings]

    return VerbEntry(
        id=entry_id,
        verb=raw.verb,
        taxonomy_id=raw.taxonomy_id or default_taxonomy_id,
        primary_level_id=raw.primary_level_id,
        also_fits_level_ids=tuple(raw.also_fits_level_ids),
        level_ids=tuple(level_ids),
        levels=tuple(levels.display_name(lvl) for lvl in level_ids),
        meaning=Meaning(short=raw.meaning.short, expanded=raw.meaning.expanded),
        synonyms=tuple(raw.synonyms),
        search_keywords=tuple(raw.search_keywords),
        stems_by_level={lvl: tuple(stems) for lvl, stems in raw.stems_by_level.items()},
        level_guidance=dict(raw.level_guidance),
        diagnostic_strength=raw.diagnostic_strength,
        task_ideas=tuple(
            TaskIdea(
                title=t.title,
                description=t.description,
                evidence_produced=tuple(t.evidence_produced),
            )
            for t in raw.task_ideas
        ),
        tags=tuple(raw.tags) if isinstance(raw.tags, list) else dict(raw.tags),
        assessment_format_ids=tuple(m.assessment_format_id for m in mappings if m.assessment_format_id),
        format_mappings=tuple(mappings),
    )
