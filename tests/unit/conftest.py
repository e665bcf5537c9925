import copy

import pytest

from domain.catalog import VerbCatalog, build_catalog

BLOOM_LEVELS = [
    {"id": "remember", "order": 1, "label": "Remember"},
    {"id": "understand", "order": 2, "label": "Understand"},
    {"id": "apply", "order": 3, "label": "Apply"},
    {"id": "analyse", "order": 4, "label": "Analyse"},
    {"id": "evaluate", "order": 5, "label": "Evaluate"},
    {"id": "create", "order": 6, "label": "Create"},
]

FORMATS = [
    {"id": "mcq", "label": "Multiple-choice quiz", "category": "objective"},
    {"id": "case-study", "label": "Case study report", "category": "written"},
    {"id": "portfolio", "label": "Portfolio", "category": "authentic"},
]

SAMPLE_VERBS = [
    {
        "verb": "explain",
        "primaryLevelId": "understand",
        "stemsByLevel": {"understand": ["Explain X"], "apply": ["Use X to solve Y"]},
        "formatMappings": [
            {"assessmentFormatId": "mcq", "suitability": "low"},
            {"assessmentFormatId": "case-study", "suitability": "high"},
        ],
    },
    {
        "verb": "analyse",
        "primaryLevelId": "analyse",
        "levelGuidance": {"analyse": "Break it into parts."},
        "formatMappings": [{"assessmentFormatId": "case-study"}],
    },
    {
        "verb": "analyse",
        "primaryLevelId": "evaluate",
        "alsoFitsLevelIds": ["analyse"],
        "levelGuidance": {"evaluate": "End in a justified judgement."},
        "formatMappings": [{"assessmentFormatId": "portfolio", "suitability": "context-dependent"}],
    },
    {
        "id": "create-design",
        "verb": "design",
        "primaryLevelId": "create",
        "levelGuidance": {"create": "Focus on originality."},
        "formatMappings": [{"assessmentFormatId": "portfolio-x"}],
    },
]


def make_doc(verbs=None, formats=None, levels=None, disclaimer=None) -> dict:
    doc = {
        "taxonomies": {"bloom": {"levels": copy.deepcopy(BLOOM_LEVELS if levels is None else levels)}},
        "assessmentFormats": copy.deepcopy(FORMATS if formats is None else formats),
        "verbs": copy.deepcopy(verbs or []),
    }
    if disclaimer is not None:
        doc["meta"] = {"disclaimer": disclaimer}
    return doc


@pytest.fixture
def sample_doc() -> dict:
    return make_doc(SAMPLE_VERBS, disclaimer="Indicative only.")


@pytest.fixture
def sample_catalog(sample_doc) -> VerbCatalog:
    return build_catalog(sample_doc)


@pytest.fixture
def doc_factory():
    return make_doc
