from decimal import Decimal

from rich.console import Console

from statement_ingest import CanonicalRecord, FileResult
from statement_ingest.display import build_table, render_results


def _result() -> FileResult:
    ok = CanonicalRecord("A1", "ACC", "coffee", Decimal("100"), Decimal("-25.5"), Decimal("74.5"))
    bad = CanonicalRecord("A1", "ACC", "tea", "74.5", "-1", "75", invalid=["reference", "balance"])
    return FileResult("records.csv", [ok, bad])


def test_table_has_canonical_columns_and_one_row_per_record():
    table = build_table(_result())

    assert [c.header for c in table.columns] == [
        "reference",
        "accountNumber",
        "description",
        "startBalance",
        "mutation",
        "endBalance",
    ]
    assert table.row_count == 2


def test_flagged_cells_are_highlighted():
    table = build_table(_result())

    ref_cells = list(table.columns[0].cells)
    end_cells = list(table.columns[5].cells)
    desc_cells = list(table.columns[2].cells)
    assert ref_cells[0].style == "" and ref_cells[1].style == "bold red"
    assert end_cells[1].style == "bold red"
    assert desc_cells[1].style == ""


def test_render_results_prints_tables_and_summary():
    console = Console(record=True, width=120)

    render_results([_result()], console)

    text = console.export_text()
    assert "records.csv" in text
    assert "-25.5" in text
    assert "1 file(s), 2 record(s), 1 flagged" in text
