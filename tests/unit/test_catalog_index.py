from domain.catalog import (
    build_catalog,
    filter_by_format,
    find_verbs_by_text,
    get_verb_by_id,
    group_by_level,
    order_by_first_level,
    ordered_level_names,
    rank_for_level,
    unique_verb_texts,
)


def test_get_by_identity(sample_catalog) -> None:
    entry = get_verb_by_id(sample_catalog, "create-design")
    assert entry is not None
    assert entry.verb == "design"
    assert get_verb_by_id(sample_catalog, "nope") is None


def test_text_lookup_returns_every_duplicate_in_source_order(sample_catalog) -> None:
    matches = find_verbs_by_text(sample_catalog, "  ANALYSE ")
    assert [m.id for m in matches] == ["analyse-analyse-1", "evaluate-analyse-2"]


def test_blank_text_query_matches_nothing(sample_catalog) -> None:
    assert find_verbs_by_text(sample_catalog, "") == []
    assert find_verbs_by_text(sample_catalog, "   ") == []
    assert find_verbs_by_text(sample_catalog, None) == []
    assert find_verbs_by_text(sample_catalog, "analys") == []


def test_group_by_level_is_a_partition_with_overlap(sample_catalog) -> None:
    groups = group_by_level(sample_catalog.verbs, sample_catalog.taxonomy)
    assert [g.level.id for g in groups] == [lvl.id for lvl in sample_catalog.taxonomy.levels]

    for group in groups:
        for entry in group.entries:
            assert group.level.id in entry.level_ids
    for entry in sample_catalog.verbs:
        for level_id in entry.level_ids:
            group = next(g for g in groups if g.level.id == level_id)
            assert entry in group.entries


def test_group_keeps_duplicate_texts_as_distinct_rows(sample_catalog) -> None:
    groups = {g.level.id: g for g in group_by_level(sample_catalog.verbs, sample_catalog.taxonomy)}
    assert [e.id for e in groups["analyse"].entries] == ["analyse-analyse-1", "evaluate-analyse-2"]
    assert groups["remember"].entries == ()


def test_group_entries_sorted_by_verb_text(doc_factory) -> None:
    catalog = build_catalog(
        doc_factory(
            [
                {"verb": "judge", "primaryLevelId": "evaluate"},
                {"verb": "Assess", "primaryLevelId": "evaluate"},
                {"verb": "appraise", "primaryLevelId": "evaluate"},
                {"verb": "évaluer", "primaryLevelId": "evaluate"},
            ]
        )
    )
    groups = {g.level.id: g for g in group_by_level(catalog.verbs, catalog.taxonomy)}
    assert [e.verb for e in groups["evaluate"].entries] == ["appraise", "Assess", "évaluer", "judge"]


def test_group_by_level_over_a_subset(sample_catalog) -> None:
    subset = [e for e in sample_catalog.verbs if e.verb == "explain"]
    groups = [g for g in group_by_level(subset, sample_catalog.taxonomy) if g.entries]
    assert [g.level.id for g in groups] == ["understand", "apply"]


def test_filter_by_format(sample_catalog) -> None:
    assert [e.verb for e in filter_by_format(sample_catalog, "case-study")] == ["explain", "analyse"]
    assert [e.id for e in filter_by_format(sample_catalog, "portfolio-x")] == ["create-design"]
    assert filter_by_format(sample_catalog, "viva") == []
    assert filter_by_format(sample_catalog, "") == []


def test_rank_for_level(sample_catalog) -> None:
    assert rank_for_level(sample_catalog, "Apply") == 3
    assert rank_for_level(sample_catalog, "apply") == 999
    assert rank_for_level(sample_catalog, "") == 999


def test_ordered_level_names_and_first_level_ordering(sample_catalog) -> None:
    second = get_verb_by_id(sample_catalog, "evaluate-analyse-2")
    assert second.levels == ("Evaluate", "Analyse")
    assert ordered_level_names(sample_catalog, second) == ["Analyse", "Evaluate"]

    matches = find_verbs_by_text(sample_catalog, "analyse")
    ordered = order_by_first_level(sample_catalog, list(reversed(matches)))
    assert [e.primary_level_id for e in ordered] == ["analyse", "evaluate"]


def test_unique_verb_texts(sample_catalog) -> None:
    assert unique_verb_texts(sample_catalog) == ["analyse", "design", "explain"]
