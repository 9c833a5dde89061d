"""Batch orchestration over a user selection of statement files.

Each call to :meth:`StatementBatch.select` replaces the selection:

1. accumulated results are cleared and a new generation starts;
2. every file is read concurrently (the read is the only suspension point);
3. as each read completes, the file is routed, extracted and validated
   synchronously, then its :class:`~statement_ingest.record.FileResult` is
   appended and exactly one notification is emitted.

Results land in completion order, which need not match selection order.
Reads are never cancelled. A completion belonging to a superseded generation
is discarded without appending or notifying.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .config import IngestSettings
from .errors import StatementIngestError
from .ingest.router import extract_records
from .logging_setup import get_logger
from .notify import NotificationSink
from .record import FileResult
from .validation import validate_records

_logger = get_logger("statement_ingest.batch")


@dataclass(frozen=True, slots=True)
class StatementFile:
    """A selected file: a display ``name`` plus in-memory text or a path."""

    name: str
    content: str | None = None
    path: Path | None = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.path is None):
            raise ValueError("StatementFile requires exactly one of content or path")

    @classmethod
    def from_text(cls, name: str, content: str) -> StatementFile:
        return cls(name=name, content=content)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> StatementFile:
        p = Path(path)
        return cls(name=p.name, path=p)

    async def read(self, encoding: str = "utf-8") -> str:
        if self.path is None:
            if self.content is None:
                raise ValueError(f"{self.name}: nothing to read")
            return self.content
        return await asyncio.to_thread(self.path.read_text, encoding=encoding)


class StatementBatch:
    """Owns the result collection for the current selection."""

    def __init__(self, sink: NotificationSink, settings: IngestSettings | None = None) -> None:
        self._sink = sink
        self._settings = settings or IngestSettings()
        self.generation = 0
        self.results: list[FileResult] = []

    async def select(self, files: Iterable[StatementFile]) -> list[FileResult]:
        """Replace the selection with ``files`` and process them.

        Returns the result list of this selection. If another ``select`` starts
        before this one finishes, late completions from this one are dropped.
        """

        self.generation += 1
        generation = self.generation
        results: list[FileResult] = []
        self.results = results

        selected = list(files)
        _logger.info("generation %d: processing %d file(s)", generation, len(selected))
        await asyncio.gather(*(self._process(f, generation, results) for f in selected))
        return results

    def _is_current(self, generation: int, name: str) -> bool:
        if generation == self.generation:
            return True
        _logger.debug(
            "discarding %s from superseded generation %d (current %d)",
            name,
            generation,
            self.generation,
        )
        return False

    async def _process(
        self, file: StatementFile, generation: int, results: list[FileResult]
    ) -> None:
        try:
            content = await file.read(self._settings.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            if self._is_current(generation, file.name):
                _logger.warning("failed to read %s: %s", file.name, exc)
                self._sink.notify(f"{file.name}: {exc}", "error")
            return

        # Everything below runs without suspending, so the append and the
        # notification are observed together by other callbacks.
        if not self._is_current(generation, file.name):
            return
        try:
            records = extract_records(
                file.name, content, case_insensitive=self._settings.case_insensitive_suffix
            )
        except StatementIngestError as exc:
            _logger.warning("rejected %s", exc)
            self._sink.notify(str(exc), "error")
            return
        except Exception as exc:
            _logger.exception("unexpected failure processing %s", file.name)
            self._sink.notify(f"{file.name}: {exc}", "error")
            return

        self._sink.notify(f"{file.name} loaded successfully", "success")
        records = validate_records(records)
        results.append(FileResult(file.name, records))
        _logger.info("loaded %s: %d record(s)", file.name, len(records))


def process_files(
    files: Iterable[StatementFile],
    sink: NotificationSink,
    settings: IngestSettings | None = None,
) -> list[FileResult]:
    """Run one selection to completion from synchronous code."""

    batch = StatementBatch(sink, settings)
    return asyncio.run(batch.select(files))


__all__ = ["StatementBatch", "StatementFile", "process_files"]
