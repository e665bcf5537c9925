"""Result serialization utilities."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from domain.catalog import LevelGroup

logger = logging.getLogger(__name__)


def to_payload(obj: Any) -> Any:
    """Convert models (and lists/dicts of them) into JSON-ready structures."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, dict):
        return {str(k): to_payload(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_payload(v) for v in obj]
    return obj


def summarize_groups(groups: Iterable[LevelGroup]) -> list[dict[str, Any]]:
    """Compact rows for level groups: level metadata plus entry id/verb pairs."""
    rows: list[dict[str, Any]] = []
    for group in groups:
        rows.append(
            {
                "level_id": group.level.id,
                "level": group.level.name,
                "color": group.level.color,
                "entries": [
                    {
                        "id": e.id,
                        "verb": e.verb,
                        "diagnostic_strength": e.diagnostic_strength,
                    }
                    for e in group.entries
                ],
            }
        )
    return rows


def dumps(payload: Any) -> str:
    return json.dumps(to_payload(payload), ensure_ascii=False, indent=2)


def write_json(payload: Any, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(to_payload(payload), f, ensure_ascii=False, indent=2)
    logger.info("Saved JSON: %s", path)
    return path
