"""Build the immutable VerbCatalog from a parsed verbs document."""

import logging
from collections import Counter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.catalog.formats import FormatCatalog, build_format_catalog
from domain.catalog.verbs import VerbEntry, normalize_verb
from domain.constants import (
    DEFAULT_LEVEL_COLORS,
    DEFAULT_SUITABILITY,
    DEFAULT_TAXONOMY_ID,
    NEUTRAL_LEVEL_COLOR,
    SUITABILITY_TIERS,
)
from domain.errors import CatalogLoadError
from domain.schemas import RawDocument
from domain.taxonomy import LevelCatalog, parse_levels

logger = logging.getLogger(__name__)

_HEX_COLOR_LEN = 7


def _check_color(value: str) -> str:
    v = value.strip()
    if len(v) != _HEX_COLOR_LEN or not v.startswith("#"):
        raise ValueError(f"Expected a '#rrggbb' color, got {value!r}")
    try:
        int(v[1:], 16)
    except ValueError as e:
        raise ValueError(f"Expected a '#rrggbb' color, got {value!r}") from e
    return v.lower()


class AdapterSettings(BaseModel):
    """
    Knobs for document normalization.

    Defaults reproduce the stock Bloom palette and schema defaults.
    """

    level_colors: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LEVEL_COLORS))
    fallback_color: str = NEUTRAL_LEVEL_COLOR
    default_taxonomy_id: str = DEFAULT_TAXONOMY_ID
    default_suitability: str = DEFAULT_SUITABILITY

    @field_validator("level_colors")
    @classmethod
    def _validate_palette(cls, value: dict[str, str]) -> dict[str, str]:
        return {str(k): _check_color(v) for k, v in value.items()}

    @field_validator("fallback_color")
    @classmethod
    def _validate_fallback(cls, value: str) -> str:
        return _check_color(value)

    @field_validator("default_suitability")
    @classmethod
    def _validate_suitability(cls, value: str) -> str:
        v = value.strip().lower()
        if v not in SUITABILITY_TIERS:
            raise ValueError(f"default_suitability must be one of {list(SUITABILITY_TIERS)}, got {value!r}")
        return v


class VerbCatalog(BaseModel):
    """
    Normalized, read-only view of one document load.

    Every query and resolution function takes this value explicitly; a reload
    produces a new catalog instead of mutating an existing one.
    """

    model_config = ConfigDict(frozen=True)

    disclaimer: str = ""
    taxonomy: LevelCatalog
    formats: FormatCatalog = Field(default_factory=FormatCatalog)
    verbs: tuple[VerbEntry, ...] = ()


def _format_validation_error(err: ValidationError) -> str:
    parts = []
    for e in err.errors()[:5]:
        loc = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{loc or '<document>'}: {e.get('msg')}")
    more = err.error_count() - len(parts)
    if more > 0:
        parts.append(f"... and {more} more")
    return "; ".join(parts)


def build_catalog(raw: Any, settings: AdapterSettings | None = None) -> VerbCatalog:
    """
    Validate a parsed verbs document and build the catalog.

    This is a pure function - it does NOT perform file I/O.
    Reading the document happens in infrastructure.io.documents.

    Args:
        raw: Parsed document (e.g. from json.load / yaml.safe_load)
        settings: Normalization settings (defaults when None)

    Returns:
        Fully built VerbCatalog

    Raises:
        CatalogLoadError: If the document is structurally invalid or declares no levels
    """
    settings = settings or AdapterSettings()

    if not isinstance(raw, dict):
        raise CatalogLoadError(f"Verbs document must be a mapping, got {type(raw).__name__}")

    try:
        doc = RawDocument.model_validate(raw)
    except ValidationError as e:
        raise CatalogLoadError(f"Verbs document failed validation: {_format_validation_error(e)}") from e

    bloom = doc.taxonomies.bloom
    taxonomy = parse_levels(
        bloom.levels if bloom is not None else [],
        level_colors=settings.level_colors,
        fallback_color=settings.fallback_color,
    )
    formats = build_format_catalog(doc.assessment_formats)

    verbs = tuple(
        normalize_verb(
            raw_verb,
            idx,
            levels=taxonomy,
            formats=formats,
            default_taxonomy_id=settings.default_taxonomy_id,
            default_suitability=settings.default_suitability,
        )
        for idx, raw_verb in enumerate(doc.verbs)
    )

    dupes = sorted(vid for vid, n in Counter(v.id for v in verbs).items() if n > 1)
    if dupes:
        logger.warning("Duplicate verb entry ids (first occurrence wins on lookup): %s", dupes)

    unplaced = sum(1 for v in verbs if not v.level_ids)
    if unplaced:
        logger.debug("%d verb entries resolve to no declared level", unplaced)

    return VerbCatalog(
        disclaimer=doc.meta.disclaimer,
        taxonomy=taxonomy,
        formats=formats,
        verbs=verbs,
    )
