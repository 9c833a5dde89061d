"""Public interface for the ``statement_ingest`` package.

This module exposes the package's pipeline functions and public models/types
as the stable import surface. There is no runtime logic here, only symbol
re-exports.
"""

from .amounts import balance_matches, coerce_cell, to_decimal
from .batch import StatementBatch, StatementFile, process_files
from .config import IngestSettings
from .errors import StatementIngestError, StatementParseError, UnsupportedFormatError
from .ingest import (
    SourceFormat,
    detect_format,
    extract_records,
    parse_csv_records,
    parse_xml_records,
)
from .notify import LoggingSink, Notification, NotificationSink, RecordingSink
from .record import CanonicalRecord, FileResult
from .validation import validate_records

__all__ = [
    # Pipeline
    "detect_format",
    "extract_records",
    "parse_csv_records",
    "parse_xml_records",
    "validate_records",
    "process_files",
    "StatementBatch",
    "StatementFile",
    # Numeric helpers
    "balance_matches",
    "coerce_cell",
    "to_decimal",
    # Models / types
    "CanonicalRecord",
    "FileResult",
    "SourceFormat",
    "IngestSettings",
    # Notifications
    "LoggingSink",
    "Notification",
    "NotificationSink",
    "RecordingSink",
    # Errors
    "StatementIngestError",
    "StatementParseError",
    "UnsupportedFormatError",
]
