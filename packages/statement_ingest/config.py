"""Runtime settings resolved from the environment.

Entrypoints call :func:`IngestSettings.from_env` after loading ``.env`` with
``python-dotenv``; library code receives the resulting object explicitly and
never reads the environment itself.

Variables
---------
- ``STATEMENT_INGEST_LOG_LEVEL``: level name or number (default ``INFO``).
- ``STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX``: ``1/true/yes`` or
  ``0/false/no`` (default false).
- ``STATEMENT_INGEST_ENCODING``: text encoding used when reading files from
  disk (default ``utf-8``).
"""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

LOG_LEVEL_ENV = "STATEMENT_INGEST_LOG_LEVEL"
CASE_INSENSITIVE_SUFFIX_ENV = "STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX"
ENCODING_ENV = "STATEMENT_INGEST_ENCODING"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_level(raw: str) -> int:
    v = raw.strip()
    if v.isdigit():
        return int(v)
    level = logging.getLevelNamesMapping().get(v.upper())
    if level is None:
        raise ValueError(f"unknown log level {raw!r}")
    return level


def _parse_flag(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be one of 1/true/yes or 0/false/no, got {raw!r}")


class IngestSettings(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True, str_strip_whitespace=True)

    log_level: int = logging.INFO
    case_insensitive_suffix: bool = False
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v!r}") from exc
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> IngestSettings:
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Invalid values raise ``ValueError`` naming the offending variable.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        raw_level = env.get(LOG_LEVEL_ENV)
        if raw_level:
            try:
                values["log_level"] = _parse_level(raw_level)
            except ValueError as exc:
                raise ValueError(f"{LOG_LEVEL_ENV}: {exc}") from exc

        raw_flag = env.get(CASE_INSENSITIVE_SUFFIX_ENV)
        if raw_flag:
            values["case_insensitive_suffix"] = _parse_flag(CASE_INSENSITIVE_SUFFIX_ENV, raw_flag)

        raw_encoding = env.get(ENCODING_ENV)
        if raw_encoding:
            values["encoding"] = raw_encoding

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ValueError(f"{ENCODING_ENV}: {exc.errors()[0]['msg']}") from exc


__all__ = ["CASE_INSENSITIVE_SUFFIX_ENV", "ENCODING_ENV", "IngestSettings", "LOG_LEVEL_ENV"]
