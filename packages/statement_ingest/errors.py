"""Exceptions raised while turning a statement file into records.

Every error here is terminal for the single file that produced it. The batch
orchestrator catches :class:`StatementIngestError` per file, reports it once
through the notification sink and moves on to the next file.
"""

from __future__ import annotations


class StatementIngestError(Exception):
    """Base class for per-file ingestion failures.

    ``str(err)`` is the user-facing notification text: ``"<filename>: <detail>"``.
    """

    def __init__(self, filename: str, detail: str) -> None:
        self.filename = filename
        self.detail = detail
        super().__init__(f"{filename}: {detail}")


class UnsupportedFormatError(StatementIngestError):
    """The filename suffix does not map to a known source format."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename, "unsupported file type")


class StatementParseError(StatementIngestError):
    """The document could not be parsed; ``detail`` is the parser's message."""

    def __init__(self, filename: str, source_format: str, detail: str) -> None:
        self.source_format = source_format
        super().__init__(filename, detail)


__all__ = ["StatementIngestError", "StatementParseError", "UnsupportedFormatError"]
