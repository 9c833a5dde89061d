"""Rich table rendering of validated results.

A pure consumer: records are read, never modified. Cells belonging to a
flagged field are highlighted; a ``balance`` flag marks all three balance
columns since any of them may be the wrong one.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .record import FIELD_ORDER, CanonicalRecord, FileResult

_FLAGGED_STYLE = "bold red"

# Wire keys highlighted for each invalid tag.
_TAG_COLUMNS: dict[str, frozenset[str]] = {
    "reference": frozenset({"reference"}),
    "balance": frozenset({"startBalance", "mutation", "endBalance"}),
}

_NUMERIC_COLUMNS = frozenset({"startBalance", "mutation", "endBalance"})


def _cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _flagged_columns(record: CanonicalRecord) -> frozenset[str]:
    cols: set[str] = set()
    for tag in record.invalid or ():
        cols |= _TAG_COLUMNS.get(tag, frozenset())
    return frozenset(cols)


def build_table(result: FileResult) -> Table:
    table = Table(title=result.name, title_justify="left")
    for key, _attr in FIELD_ORDER:
        table.add_column(key, justify="right" if key in _NUMERIC_COLUMNS else "left")

    for record in result.records:
        flagged = _flagged_columns(record)
        row = record.to_dict()
        table.add_row(
            *(
                Text(_cell(row[key]), style=_FLAGGED_STYLE if key in flagged else "")
                for key, _attr in FIELD_ORDER
            )
        )
    return table


def render_results(results: Sequence[FileResult], console: Console | None = None) -> None:
    """Print one table per file followed by a one-line summary."""

    out = console or Console()
    total = flagged = 0
    for result in results:
        out.print(build_table(result))
        total += len(result.records)
        flagged += sum(1 for r in result.records if r.invalid)
    out.print(f"{len(results)} file(s), {total} record(s), {flagged} flagged")


__all__ = ["build_table", "render_results"]
