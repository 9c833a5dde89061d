"""Adapter for mapping a CSV statement export to canonical records.

CSV header (exact labels; case and spacing matter):
Reference, Account Number, Description, Start Balance, Mutation, End Balance

Columns outside this set are dropped, as are surplus cells beyond the header.
Numeric-looking cells become ``Decimal``; everything else stays text.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Iterator, Mapping

from ...amounts import coerce_cell
from ...errors import StatementParseError
from ...logging_setup import get_logger
from ...record import CanonicalRecord

# Header label -> CanonicalRecord attribute, in canonical order.
HEADER_MAP: dict[str, str] = {
    "Reference": "reference",
    "Account Number": "account_number",
    "Description": "description",
    "Start Balance": "start_balance",
    "Mutation": "mutation",
    "End Balance": "end_balance",
}

_logger = get_logger("statement_ingest.ingest.adapters.csv_records")


def _is_blank(row: Mapping[str | None, object]) -> bool:
    return all(
        v is None or (isinstance(v, str) and v.strip() == "")
        for k, v in row.items()
        if k is not None
    )


def to_records(rows: Iterable[Mapping[str | None, str | None]]) -> Iterator[CanonicalRecord]:
    """Convert ``csv.DictReader`` rows to canonical records.

    ``DictReader`` collects surplus cells under the ``None`` key; only the
    labels in :data:`HEADER_MAP` are ever read, so those cells are ignored.
    """

    for row in rows:
        if _is_blank(row):
            continue
        yield CanonicalRecord(
            **{attr: coerce_cell(row.get(label)) for label, attr in HEADER_MAP.items()}
        )


def parse_csv_records(content: str, *, filename: str = "<csv>") -> list[CanonicalRecord]:
    """Parse CSV text (header on the first row) into canonical records.

    The whole document is parsed before anything is returned, so a row-level
    error never yields a partial list. Raises
    :class:`~statement_ingest.errors.StatementParseError` on malformed quoting
    or when the header row is missing.
    """

    # Spreadsheet exports often start with a BOM, which would glue onto "Reference".
    content = content.removeprefix("\ufeff")
    reader = csv.DictReader(io.StringIO(content, newline=""), strict=True)
    try:
        if not reader.fieldnames:
            raise csv.Error("CSV appears to have no header row")
        records = list(to_records(reader))
    except csv.Error as exc:
        detail = str(exc)
        if reader.line_num:
            detail = f"line {reader.line_num}: {detail}"
        raise StatementParseError(filename, "csv", detail) from exc

    _logger.debug("parsed %d CSV record(s) from %s", len(records), filename)
    return records


__all__ = ["HEADER_MAP", "parse_csv_records", "to_records"]
