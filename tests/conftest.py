"""Pytest configuration for test isolation.

Settings are resolved from ``STATEMENT_INGEST_*`` environment variables and the
CLI configures the package logger once per process. Both leak between tests
unless reset, so an autouse fixture clears the variables and detaches any
handler installed during the test.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from statement_ingest.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for key in list(os.environ):
        if key.startswith("STATEMENT_INGEST_"):
            monkeypatch.delenv(key)
    # The CLI loads .env from the working directory; run from an empty one.
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()
    # Drop anything load_dotenv set during the test; monkeypatch then restores
    # the original values.
    for key in list(os.environ):
        if key.startswith("STATEMENT_INGEST_"):
            del os.environ[key]
