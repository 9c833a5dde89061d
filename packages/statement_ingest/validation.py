"""Annotate one file's records with reference and balance violations.

Validation never drops a record. It appends tags to ``record.invalid`` in a
fixed order (``"reference"`` then ``"balance"``) and leaves ``invalid`` unset
on records that pass both checks.

Reference uniqueness is scoped to a single call: each file gets a fresh set
of seen references unless the caller passes one explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence

from .amounts import balance_matches
from .logging_setup import get_logger
from .record import CanonicalRecord, InvalidTag

_logger = get_logger("statement_ingest.validation")


def _balance_ok(record: CanonicalRecord) -> bool:
    try:
        return balance_matches(record.start_balance, record.mutation, record.end_balance)
    except ValueError:
        # An operand that is not a number can never satisfy the equation.
        return False


def validate_records(
    records: Sequence[CanonicalRecord], seen: set[object] | None = None
) -> list[CanonicalRecord]:
    """Tag invalid fields on ``records`` in place and return them as a list.

    Parameters
    ----------
    records:
        Records extracted from one file, in file order.
    seen:
        Scope for reference uniqueness. Defaults to a new empty set, so no
        state is shared between files.
    """

    scope: set[object] = set() if seen is None else seen
    flagged = 0
    for record in records:
        tags: list[InvalidTag] = []
        if record.reference in scope:
            tags.append("reference")
        else:
            scope.add(record.reference)
        if not _balance_ok(record):
            tags.append("balance")
        if tags:
            record.invalid = tags
            flagged += 1

    if flagged:
        _logger.debug("flagged %d of %d record(s)", flagged, len(records))
    return list(records)


__all__ = ["validate_records"]
