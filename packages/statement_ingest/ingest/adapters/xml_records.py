"""Adapter for mapping an XML statement export to canonical records.

Expected document shape::

    <records>
      <record reference="131254">
        <accountNumber>NL93ABNA0585619023</accountNumber>
        <description>Candy from Rik Theuß</description>
        <startBalance>102.12</startBalance>
        <mutation>+5.55</mutation>
        <endBalance>107.67</endBalance>
      </record>
      ...
    </records>

``reference`` is read from the attribute; the other five fields are child
elements. Values stay strings; numeric coercion happens in validation.
"""

from __future__ import annotations

from xml.etree import ElementTree as ET

from ...errors import StatementParseError
from ...logging_setup import get_logger
from ...record import CanonicalRecord

RECORD_TAG = "record"

# Child element names in canonical order (reference comes from the attribute).
ELEMENT_FIELDS: tuple[str, ...] = (
    "accountNumber",
    "description",
    "startBalance",
    "mutation",
    "endBalance",
)

_logger = get_logger("statement_ingest.ingest.adapters.xml_records")


def _record_elements(root: ET.Element) -> list[ET.Element]:
    # A document may be a bare <record> with no collection wrapper; it still
    # yields a one-element list rather than a lone element.
    if root.tag == RECORD_TAG:
        return [root]
    return root.findall(RECORD_TAG)


def _text(elem: ET.Element, tag: str) -> str:
    return (elem.findtext(tag) or "").strip()


def to_record(elem: ET.Element) -> CanonicalRecord:
    """Map one ``<record>`` element to a :class:`CanonicalRecord`.

    All attributes other than ``reference`` are discarded.
    """

    account_number, description, start, mutation, end = (
        _text(elem, tag) for tag in ELEMENT_FIELDS
    )
    return CanonicalRecord(
        reference=elem.get("reference", ""),
        account_number=account_number,
        description=description,
        start_balance=start,
        mutation=mutation,
        end_balance=end,
    )


def parse_xml_records(content: str, *, filename: str = "<xml>") -> list[CanonicalRecord]:
    """Parse an XML statement into canonical records in document order.

    Raises :class:`~statement_ingest.errors.StatementParseError` with the
    parser's message when the document is malformed.
    """

    try:
        root = ET.fromstring(content.removeprefix("\ufeff"))
    except ET.ParseError as exc:
        raise StatementParseError(filename, "xml", str(exc)) from exc

    records = [to_record(elem) for elem in _record_elements(root)]
    _logger.debug("parsed %d XML record(s) from %s", len(records), filename)
    return records


__all__ = ["ELEMENT_FIELDS", "RECORD_TAG", "parse_xml_records", "to_record"]
