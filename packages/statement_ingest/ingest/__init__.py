"""Format routing and per-format extractors."""

from .adapters.csv_records import parse_csv_records
from .adapters.xml_records import parse_xml_records
from .router import SourceFormat, detect_format, extract_records

__all__ = [
    "SourceFormat",
    "detect_format",
    "extract_records",
    "parse_csv_records",
    "parse_xml_records",
]
