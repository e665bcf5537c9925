"""Pydantic models for the raw verbs document (input boundary).

These models accept the loosely-typed source document and coerce it into a
total structure: optional arrays become empty lists, optional objects become
empty mappings, and scalar fields of the wrong type are dropped. Required
structure (level/format ids, list-typed collections) is still enforced and
fails validation.
"""

import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _str_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def _object_list(value: object) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _none_to_list(value: object) -> object:
    return [] if value is None else value


def _mapping(value: object) -> dict:
    return value if isinstance(value, dict) else {}


def _text(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _optional_text(value: object) -> str | None:
    return _text(value) or None


def _rank(value: object) -> int | float | None:
    # Numeric strings ("3") rank by their value; anything else unusable ranks last.
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() else number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _stems_map(value: object) -> dict[str, list[str]]:
    # Keys are kept even when the value is unusable: they still signal level membership.
    return {str(k): _str_list(v) for k, v in _mapping(value).items()}


def _guidance_map(value: object) -> dict[str, str]:
    return {str(k): (v if isinstance(v, str) else "") for k, v in _mapping(value).items()}


def _tags(value: object) -> dict[str, Any] | list[str]:
    if isinstance(value, list):
        return _str_list(value)
    return _mapping(value)


StrList = Annotated[list[str], BeforeValidator(_str_list)]
Text = Annotated[str, BeforeValidator(_text)]
OptionalText = Annotated[str | None, BeforeValidator(_optional_text)]
Rank = Annotated[int | float | None, BeforeValidator(_rank)]
StemsMap = Annotated[dict[str, list[str]], BeforeValidator(_stems_map)]
GuidanceMap = Annotated[dict[str, str], BeforeValidator(_guidance_map)]
Tags = Annotated[dict[str, Any] | list[str], BeforeValidator(_tags)]


class _RawModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RawLevel(_RawModel):
    """One declared taxonomy level."""

    id: str = Field(..., min_length=1, description="Stable level identifier, e.g. 'analyse'.")
    order: Rank = Field(default=None, description="Sort rank; numeric strings are accepted, anything else sorts last.")
    label: OptionalText = None
    short_definition: Text = ""
    prompts: StrList = Field(default_factory=list)
    verb_guardrails: Any = None


class RawBloomTaxonomy(_RawModel):
    levels: Annotated[list[RawLevel], BeforeValidator(_none_to_list)] = Field(default_factory=list)


class RawTaxonomies(_RawModel):
    bloom: RawBloomTaxonomy | None = None


class RawAssessmentFormat(_RawModel):
    """One declared assessment format."""

    id: str = Field(..., min_length=1)
    label: OptionalText = None
    category: Text = ""
    typical_evidence: StrList = Field(default_factory=list)
    scalability: Any = None
    ai_risk: Any = None


class RawMeaning(_RawModel):
    short: Text = ""
    expanded: Text = ""


class RawTaskIdea(_RawModel):
    title: Text = ""
    description: Text = ""
    evidence_produced: StrList = Field(default_factory=list)


class RawFormatMapping(_RawModel):
    assessment_format_id: Text = ""
    suitability: OptionalText = None
    rationale: Text = ""
    design_notes: StrList = Field(default_factory=list)


class RawVerb(_RawModel):
    """One raw verb record. Every field is optional; absence is normalized to empty values."""

    id: OptionalText = Field(default=None, description="Explicit entry id; derived when absent.")
    verb: Text = ""
    taxonomy_id: OptionalText = None
    primary_level_id: OptionalText = None
    also_fits_level_ids: StrList = Field(default_factory=list)
    stems_by_level: StemsMap = Field(
        default_factory=dict,
        description="Level id -> example outcome phrasings. Keys also signal level membership.",
    )
    level_guidance: GuidanceMap = Field(
        default_factory=dict,
        description="Level id -> guidance text. Keys also signal level membership.",
    )
    diagnostic_strength: OptionalText = None
    meaning: Annotated[RawMeaning, BeforeValidator(_mapping)] = Field(default_factory=RawMeaning)
    synonyms: StrList = Field(default_factory=list)
    search_keywords: StrList = Field(default_factory=list)
    task_ideas: Annotated[list[RawTaskIdea], BeforeValidator(_object_list)] = Field(default_factory=list)
    tags: Tags = Field(default_factory=dict)
    format_mappings: Annotated[list[RawFormatMapping], BeforeValidator(_object_list)] = Field(
        default_factory=list
    )


class RawMeta(_RawModel):
    disclaimer: Text = ""


class RawDocument(_RawModel):
    """Top-level verbs document."""

    meta: Annotated[RawMeta, BeforeValidator(_mapping)] = Field(default_factory=RawMeta)
    taxonomies: Annotated[RawTaxonomies, BeforeValidator(_mapping)] = Field(default_factory=RawTaxonomies)
    assessment_formats: Annotated[list[RawAssessmentFormat], BeforeValidator(_none_to_list)] = Field(
        default_factory=list
    )
    verbs: Annotated[list[RawVerb], BeforeValidator(_none_to_list)] = Field(default_factory=list)
