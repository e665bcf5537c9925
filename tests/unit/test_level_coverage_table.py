from domain.catalog import compute_level_coverage_table, compute_level_coverage_table_and_save
from domain.catalog.tables import COVERAGE_COLUMNS


def test_coverage_table_counts_per_level(sample_catalog) -> None:
    table = compute_level_coverage_table(sample_catalog)

    assert list(table.columns) == COVERAGE_COLUMNS
    assert list(table["Level id"]) == ["remember", "understand", "apply", "analyse", "evaluate", "create"]

    analyse = table.set_index("Level id").loc["analyse"]
    assert analyse["Entries"] == 2
    assert analyse["Primary entries"] == 1
    assert analyse["With phrasings"] == 0
    assert analyse["With guidance"] == 1

    apply = table.set_index("Level id").loc["apply"]
    assert apply["Entries"] == 1
    assert apply["Primary entries"] == 0
    assert apply["With phrasings"] == 1


def test_coverage_table_saved_as_csv(tmp_path, sample_catalog) -> None:
    out_path = compute_level_coverage_table_and_save(sample_catalog, tmp_path / "reports")
    assert out_path.exists()
    header = out_path.read_text(encoding="utf-8").splitlines()[0]
    assert header == ",".join(COVERAGE_COLUMNS)
