"""Route a statement file to the extractor for its format.

The format is resolved once from the filename suffix into a
:class:`SourceFormat`, then dispatched through a fixed registry. No content
sniffing is performed.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import TypeAlias

from ..errors import UnsupportedFormatError
from ..logging_setup import get_logger
from ..record import CanonicalRecord
from .adapters.csv_records import parse_csv_records
from .adapters.xml_records import parse_xml_records


class SourceFormat(StrEnum):
    XML = "xml"
    CSV = "csv"


Extractor: TypeAlias = Callable[..., list[CanonicalRecord]]

_EXTRACTORS: dict[SourceFormat, Extractor] = {
    SourceFormat.XML: parse_xml_records,
    SourceFormat.CSV: parse_csv_records,
}

_SUFFIXES: dict[str, SourceFormat] = {f".{fmt.value}": fmt for fmt in SourceFormat}

_logger = get_logger("statement_ingest.ingest.router")


def detect_format(filename: str, *, case_insensitive: bool = False) -> SourceFormat | None:
    """Return the format for ``filename``'s suffix, or ``None`` when unknown.

    Matching is case-sensitive unless ``case_insensitive`` is set, so
    ``BANK.XML`` is only recognized in relaxed mode.
    """

    name = filename.lower() if case_insensitive else filename
    for suffix, fmt in _SUFFIXES.items():
        if name.endswith(suffix):
            return fmt
    return None


def extract_records(
    filename: str, content: str, *, case_insensitive: bool = False
) -> list[CanonicalRecord]:
    """Extract canonical records from already-read ``content``.

    Raises :class:`~statement_ingest.errors.UnsupportedFormatError` for an
    unknown suffix; extractor errors propagate unchanged.
    """

    fmt = detect_format(filename, case_insensitive=case_insensitive)
    if fmt is None:
        raise UnsupportedFormatError(filename)
    _logger.debug("routing %s as %s", filename, fmt.value)
    return _EXTRACTORS[fmt](content, filename=filename)


__all__ = ["Extractor", "SourceFormat", "detect_format", "extract_records"]
