from domain.catalog import (
    FormatMapping,
    VerbEntry,
    resolve_by_level,
    resolve_guidance,
    resolve_phrasings,
    resolve_verb_detail,
    sort_format_mappings,
)


def _entry(**kwargs) -> VerbEntry:
    return VerbEntry(id="x", verb="verb", **kwargs)


def _mapping(fid: str, suitability: str) -> FormatMapping:
    return FormatMapping(assessment_format_id=fid, format_name=fid.upper(), suitability=suitability)


def test_guidance_falls_back_to_primary_level_when_selected_level_has_none() -> None:
    entry = _entry(primary_level_id="create", level_guidance={"create": "Focus on originality."})
    assert resolve_guidance(entry, "evaluate") == "Focus on originality."


def test_selected_level_wins_over_primary() -> None:
    entry = _entry(
        primary_level_id="understand",
        stems_by_level={"understand": ("Explain X",), "apply": ("Use X to solve Y",)},
        level_guidance={"understand": "U", "apply": "A"},
    )
    assert resolve_phrasings(entry, "apply") == ["Use X to solve Y"]
    assert resolve_guidance(entry, "apply") == "A"
    assert resolve_phrasings(entry) == ["Explain X"]
    assert resolve_guidance(entry, None) == "U"


def test_empty_selected_value_falls_through_to_primary() -> None:
    entry = _entry(
        primary_level_id="understand",
        stems_by_level={"apply": (), "understand": ("Explain X",)},
        level_guidance={"apply": "", "understand": "U"},
    )
    assert resolve_phrasings(entry, "apply") == ["Explain X"]
    assert resolve_guidance(entry, "apply") == "U"


def test_first_key_is_the_last_resort() -> None:
    entry = _entry(
        primary_level_id="remember",
        stems_by_level={"analyse": ("A1", "A2"), "create": ("C1",)},
        level_guidance={"create": "C"},
    )
    assert resolve_phrasings(entry, "evaluate") == ["A1", "A2"]
    assert resolve_guidance(entry, "evaluate") == "C"


def test_no_content_resolves_to_empty_values() -> None:
    entry = _entry(primary_level_id="remember")
    assert resolve_phrasings(entry, "apply") == []
    assert resolve_guidance(entry, "apply") == ""


def test_first_key_value_is_returned_even_when_empty() -> None:
    entry = _entry(primary_level_id="remember", stems_by_level={"analyse": (), "create": ("C1",)})
    assert resolve_phrasings(entry, "evaluate") == []


def test_generic_resolver_checks_kind_at_every_tier() -> None:
    by_level = {"a": "text", "b": 0, "c": 5}
    is_int = lambda v: isinstance(v, int)  # noqa: E731
    assert resolve_by_level(by_level, selected_level_id="a", primary_level_id="c", is_kind=is_int, default=-1) == 5
    assert resolve_by_level(by_level, selected_level_id="b", primary_level_id=None, is_kind=is_int, default=-1) == -1
    assert resolve_by_level({}, selected_level_id="a", primary_level_id="b", is_kind=is_int, default=-1) == -1


def test_resolver_never_returns_empty_when_selected_or_primary_has_content() -> None:
    stems = {"apply": ("A",), "create": ("C",)}
    for selected in (None, "apply", "create", "remember"):
        for primary in ("apply", "create", None):
            entry = _entry(primary_level_id=primary, stems_by_level=stems)
            assert resolve_phrasings(entry, selected)


def test_format_mappings_sorted_by_tier_and_stable_within_tier() -> None:
    mappings = [
        _mapping("a", "low"),
        _mapping("b", "medium"),
        _mapping("c", "high"),
        _mapping("d", "context-dependent"),
        _mapping("e", "high"),
        _mapping("f", "unrated"),
    ]
    ordered = sort_format_mappings(mappings)
    assert [m.assessment_format_id for m in ordered] == ["c", "e", "d", "b", "a", "f"]


def test_verb_detail_combines_resolution_for_the_level_in_view(sample_catalog) -> None:
    entry = next(e for e in sample_catalog.verbs if e.verb == "explain")
    detail = resolve_verb_detail(sample_catalog, entry, "apply")

    assert detail.selected_level_id == "apply"
    assert detail.level_names == ("Understand", "Apply")
    assert detail.phrasings == ("Use X to solve Y",)
    assert detail.guidance == ""
    assert [m.suitability for m in detail.format_mappings] == ["high", "low"]
    assert detail.format_names == ("Multiple-choice quiz", "Case study report")
    assert detail.disclaimer == "Indicative only."
