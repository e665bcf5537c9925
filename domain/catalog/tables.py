"""Level coverage table generation."""

from pathlib import Path

import pandas as pd

from domain.catalog.adapter import VerbCatalog
from domain.catalog.index import group_by_level

COVERAGE_COLUMNS = [
    "Level",
    "Level id",
    "Rank",
    "Entries",
    "Primary entries",
    "With phrasings",
    "With guidance",
]


def compute_level_coverage_table(catalog: VerbCatalog) -> pd.DataFrame:
    """
    Build a per-level table of how much content the catalog has.

    Columns in the result:
      - Level / Level id / Rank: the declared level, in catalog order
      - Entries: entries whose expanded membership includes the level
      - Primary entries: entries whose primary level is this level
      - With phrasings: member entries with at least one phrasing for this level
      - With guidance: member entries with non-empty guidance for this level

    Args:
        catalog: Loaded VerbCatalog

    Returns:
        DataFrame with one row per declared level
    """
    rows = []
    for group in group_by_level(catalog.verbs, catalog.taxonomy):
        level_id = group.level.id
        rows.append(
            {
                "Level": group.level.name,
                "Level id": level_id,
                "Rank": group.level.order,
                "Entries": len(group.entries),
                "Primary entries": sum(1 for e in group.entries if e.primary_level_id == level_id),
                "With phrasings": sum(1 for e in group.entries if e.stems_by_level.get(level_id)),
                "With guidance": sum(1 for e in group.entries if e.level_guidance.get(level_id)),
            }
        )
    return pd.DataFrame(rows, columns=COVERAGE_COLUMNS)


def compute_level_coverage_table_and_save(
    catalog: VerbCatalog,
    output_dir: Path,
    filename: str = "level_coverage.csv",
) -> Path:
    """Compute the coverage table and save it as CSV in output_dir."""
    table = compute_level_coverage_table(catalog)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / filename
    table.to_csv(out_path, index=False)
    return out_path
