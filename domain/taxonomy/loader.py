"""Parse declared taxonomy levels into a LevelCatalog."""

from collections.abc import Mapping, Sequence

from domain.constants import DEFAULT_LEVEL_COLORS, NEUTRAL_LEVEL_COLOR, UNRANKED_ORDER
from domain.errors import CatalogLoadError
from domain.schemas import RawLevel
from domain.taxonomy.normalizer import Level, LevelCatalog


def parse_levels(
    raw_levels: Sequence[RawLevel],
    *,
    level_colors: Mapping[str, str] | None = None,
    fallback_color: str = NEUTRAL_LEVEL_COLOR,
) -> LevelCatalog:
    """
    Build the ordered level catalog from validated level declarations.

    This is a pure function - it does NOT perform file I/O.

    Levels are sorted ascending by `order` (stable, so ties keep input order).
    A level without a usable `order` gets the last-place sentinel, which is raised
    above the largest declared rank when a document declares ranks past it.

    Args:
        raw_levels: Validated level declarations, in source order
        level_colors: Level id -> display color (defaults to the Bloom palette)
        fallback_color: Color for level ids missing from the palette

    Returns:
        LevelCatalog with id->name and name->level lookups

    Raises:
        CatalogLoadError: If no levels are declared or a level id repeats
    """
    if not raw_levels:
        raise CatalogLoadError("Missing taxonomies.bloom.levels[]: at least one level is required")

    palette = DEFAULT_LEVEL_COLORS if level_colors is None else level_colors

    seen: set[str] = set()
    for raw in raw_levels:
        if raw.id in seen:
            raise CatalogLoadError(f"Duplicate level id in taxonomies.bloom.levels[]: {raw.id!r}")
        seen.add(raw.id)

    declared = [raw.order for raw in raw_levels if raw.order is not None]
    unranked = max([UNRANKED_ORDER, *(o + 1 for o in declared)])

    levels = [
        Level(
            id=raw.id,
            name=raw.label or raw.id,
            order=raw.order if raw.order is not None else unranked,
            color=palette.get(raw.id, fallback_color),
            description=raw.short_definition,
            prompts=tuple(raw.prompts),
            guardrails=raw.verb_guardrails or None,
        )
        for raw in raw_levels
    ]
    levels.sort(key=lambda lvl: lvl.order)

    return LevelCatalog(
        levels=tuple(levels),
        id_to_name={lvl.id: lvl.name for lvl in levels},
        name_to_level={lvl.name: lvl for lvl in levels},
        known_ids=frozenset(lvl.id for lvl in levels),
        unranked_order=unranked,
    )
