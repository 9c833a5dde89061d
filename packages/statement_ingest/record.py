"""Canonical transaction record model and helpers.

Every extractor produces :class:`CanonicalRecord` instances with the same
field set regardless of the source format. Serialized field order (exact):

    - reference: string (unique within one file's batch)
    - accountNumber: string
    - description: string
    - startBalance: numeric or numeric-looking string
    - mutation: numeric or numeric-looking string (signed delta)
    - endBalance: numeric or numeric-looking string
    - invalid: list of tags, only present when validation flagged the record

The dataclass is deliberately not frozen: the validator adds ``invalid`` in a
single pass after extraction. Nothing else mutates a record.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Literal, TypeAlias

InvalidTag: TypeAlias = Literal["reference", "balance"]
FieldValue: TypeAlias = str | Decimal | None

# Wire keys in output order, paired with the attribute that backs each one.
FIELD_ORDER: tuple[tuple[str, str], ...] = (
    ("reference", "reference"),
    ("accountNumber", "account_number"),
    ("description", "description"),
    ("startBalance", "start_balance"),
    ("mutation", "mutation"),
    ("endBalance", "end_balance"),
)


@dataclass(slots=True)
class CanonicalRecord:
    """A single normalized statement row.

    XML sources populate every field with strings; CSV sources convert
    numeric-looking cells to :class:`~decimal.Decimal`. Comparison semantics
    live in :mod:`statement_ingest.amounts` so both shapes validate the same.
    """

    reference: FieldValue
    account_number: FieldValue
    description: FieldValue
    start_balance: FieldValue
    mutation: FieldValue
    end_balance: FieldValue
    invalid: list[InvalidTag] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping, omitting ``invalid`` on valid records."""

        out: dict[str, Any] = {key: getattr(self, attr) for key, attr in FIELD_ORDER}
        if self.invalid is not None:
            out["invalid"] = list(self.invalid)
        return out

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> CanonicalRecord:
        """Build a record from camelCase keys; unknown keys are ignored."""

        return cls(**{attr: data.get(key) for key, attr in FIELD_ORDER})


@dataclass(frozen=True, slots=True)
class FileResult:
    """Validated records for one source file, labelled with its name."""

    name: str
    records: list[CanonicalRecord]

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.name, "records": [r.to_dict() for r in self.records]}


__all__ = ["CanonicalRecord", "FIELD_ORDER", "FieldValue", "FileResult", "InvalidTag"]
