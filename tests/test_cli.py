import json
from pathlib import Path

from typer.testing import CliRunner

from statement_ingest.cli import app

runner = CliRunner()

CSV_OK = (
    "Reference,Account Number,Description,Start Balance,Mutation,End Balance\n"
    "A1,ACC,coffee,100,-25.5,74.5\n"
)
CSV_FLAGGED = CSV_OK + "A1,ACC,tea,74.5,-1,75\n"


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_validate_json_output(tmp_path: Path):
    path = _write(tmp_path, "ok.csv", CSV_OK)

    result = runner.invoke(app, ["validate", "--json", str(path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload == [
        {
            "file": "ok.csv",
            "records": [
                {
                    "reference": "A1",
                    "accountNumber": "ACC",
                    "description": "coffee",
                    "startBalance": "100",
                    "mutation": "-25.5",
                    "endBalance": "74.5",
                }
            ],
        }
    ]


def test_validate_flagged_records_exit_nonzero_in_strict_mode(tmp_path: Path):
    path = _write(tmp_path, "flagged.csv", CSV_FLAGGED)

    strict = runner.invoke(app, ["validate", "--json", str(path)])
    relaxed = runner.invoke(app, ["validate", "--json", "--no-strict", str(path)])

    assert strict.exit_code == 1
    assert relaxed.exit_code == 0
    records = json.loads(relaxed.stdout)[0]["records"]
    assert records[1]["invalid"] == ["reference", "balance"]


def test_validate_reports_unsupported_files(tmp_path: Path):
    good = _write(tmp_path, "ok.csv", CSV_OK)
    bad = _write(tmp_path, "statement.txt", CSV_OK)

    result = runner.invoke(app, ["validate", str(good), str(bad)])

    assert result.exit_code == 1
    assert "statement.txt: unsupported file type" in result.output
    assert "ok.csv loaded successfully" in result.output
    assert "1 file(s), 1 record(s), 0 flagged" in result.output


def test_validate_rejects_invalid_environment(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("STATEMENT_INGEST_ENCODING", "no-such-codec")
    path = _write(tmp_path, "ok.csv", CSV_OK)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 2
    assert "STATEMENT_INGEST_ENCODING" in result.output


def test_dotenv_in_working_directory_is_loaded(tmp_path: Path, monkeypatch):
    # conftest chdirs into tmp_path; write .env there.
    (tmp_path / ".env").write_text("STATEMENT_INGEST_CASE_INSENSITIVE_SUFFIX=1\n")
    path = _write(tmp_path, "OK.CSV", CSV_OK)

    result = runner.invoke(app, ["validate", "--json", str(path)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["file"] == "OK.CSV"
