import logging

import pytest

from statement_ingest import IngestSettings


def test_defaults_without_environment():
    s = IngestSettings.from_env({})

    assert s.log_level == logging.INFO
    assert s.case_insensitive_suffix is False
    assert s.encoding == "utf-8"


def test_values_from_environment():
    s = IngestSettings.from_env(
        {
            "STATEMENT_INGEST_LOG_LEVEL": "debug",
            "STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX": "yes",
            "STATEMENT_INGEST_ENCODING": "latin-1",
        }
    )

    assert s.log_level == logging.DEBUG
    assert s.case_insensitive_suffix is True
    assert s.encoding == "latin-1"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX", "0")
    monkeypatch.setenv("STATEMENT_INGEST_LOG_LEVEL", "30")

    s = IngestSettings.from_env()

    assert s.case_insensitive_suffix is False
    assert s.log_level == logging.WARNING


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("STATEMENT_INGEST_LOG_LEVEL", "chatty"),
        ("STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX", "maybe"),
        ("STATEMENT_INGEST_ENCODING", "no-such-codec"),
    ],
)
def test_invalid_values_name_the_variable(key, value):
    with pytest.raises(ValueError, match=key):
        IngestSettings.from_env({key: value})


def test_settings_reject_unknown_fields():
    with pytest.raises(ValueError):
        IngestSettings(colour="blue")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("warning", logging.WARNING), (" ERROR ", logging.ERROR), ("15", 15)],
)
def test_log_level_accepts_names_and_numbers(raw, expected):
    assert IngestSettings.from_env({"STATEMENT_INGEST_LOG_LEVEL": raw}).log_level == expected
