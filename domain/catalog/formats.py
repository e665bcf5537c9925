"""Assessment format catalog."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.schemas import RawAssessmentFormat

logger = logging.getLogger(__name__)


class AssessmentFormat(BaseModel):
    """One evaluation mechanism (exam, portfolio, viva, ...)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str = ""
    typical_evidence: tuple[str, ...] = ()
    scalability: Any = None
    ai_risk: Any = None


class FormatCatalog(BaseModel):
    """Flat format list in source order plus an id -> name lookup."""

    model_config = ConfigDict(frozen=True)

    formats: tuple[AssessmentFormat, ...] = ()
    id_to_name: dict[str, str] = Field(default_factory=dict)

    def get(self, format_id: str) -> AssessmentFormat | None:
        for fmt in self.formats:
            if fmt.id == format_id:
                return fmt
        return None

    def display_name(self, format_id: str) -> str:
        """Resolve a format id to its name, echoing the raw id when it is not declared."""
        return self.id_to_name.get(format_id, format_id)

    def names_for_ids(self, format_ids: Iterable[str]) -> list[str]:
        """Names of the given format ids, in catalog order (undeclared ids are skipped)."""
        wanted = set(format_ids)
        return [fmt.name for fmt in self.formats if fmt.id in wanted]


def build_format_catalog(raw_formats: Sequence[RawAssessmentFormat]) -> FormatCatalog:
    """
    Build the format catalog from validated declarations.

    An empty list is valid: formats are optional. A repeated id is skipped with a
    warning, so the first declaration wins.
    """
    formats: list[AssessmentFormat] = []
    seen: set[str] = set()
    for raw in raw_formats:
        if raw.id in seen:
            logger.warning("Duplicate assessment format id %r ignored (first declaration wins)", raw.id)
            continue
        seen.add(raw.id)
        formats.append(
            AssessmentFormat(
                id=raw.id,
                name=raw.label or raw.id,
                category=raw.category,
                typical_evidence=tuple(raw.typical_evidence),
                scalability=raw.scalability or None,
                ai_risk=raw.ai_risk or None,
            )
        )

    return FormatCatalog(
        formats=tuple(formats),
        id_to_name={fmt.id: fmt.name for fmt in formats},
    )
