"""Taxonomy level catalog and lookup tables."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Level(BaseModel):
    """One stage of the cognitive taxonomy."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    order: int | float
    color: str
    description: str = ""
    prompts: tuple[str, ...] = ()
    guardrails: Any = None


class LevelCatalog(BaseModel):
    """Ordered level catalog with id/name lookup tables."""

    model_config = ConfigDict(frozen=True)

    levels: tuple[Level, ...]
    id_to_name: dict[str, str] = Field(default_factory=dict)
    name_to_level: dict[str, Level] = Field(default_factory=dict)  # display name -> level
    known_ids: frozenset[str] = frozenset()
    unranked_order: int | float

    def get(self, level_id: str | None) -> Level | None:
        """Return the level with this id, or None."""
        if not level_id:
            return None
        for level in self.levels:
            if level.id == level_id:
                return level
        return None

    def display_name(self, level_id: str) -> str:
        return self.id_to_name.get(level_id, level_id)

    def rank_for_level(self, level_name: str) -> int | float:
        """
        Declared rank of the level with this display name.

        Unrecognized names get the last-place sentinel so they sort after every declared level.
        """
        level = self.name_to_level.get(level_name)
        return level.order if level is not None else self.unranked_order

    def ordered_names(self, level_names: list[str] | tuple[str, ...]) -> list[str]:
        return sorted(level_names, key=self.rank_for_level)
