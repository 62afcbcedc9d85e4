"""
Test the command-line interface with a stubbed client
"""

from datetime import date
from unittest.mock import patch

import pytest

from treasury_curve import cli
from treasury_curve.core.history import build_history
from treasury_curve.errors import InvalidYear


class StubClient:
    def __init__(self, csv_text):
        self.history = build_history(csv_text)
        self.requested = []

    def fetch_latest(self):
        return self.history.latest()

    def fetch_date(self, request_date):
        self.requested.append(request_date)
        return self.history.as_of(request_date)

    def fetch_year(self, year):
        if year < 1990:
            raise InvalidYear(year)
        return self.history


@pytest.fixture
def stub_client(new_csv_data):
    client = StubClient(new_csv_data)
    with patch.object(cli, "build_client", return_value=client):
        yield client


def test_latest(stub_client, capsys):
    assert cli.main(["latest", "--label", "10 Yr"]) == 0
    out = capsys.readouterr().out
    assert "07/07/2023" in out
    assert "4.06" in out


def test_date_accepts_both_formats(stub_client, capsys):
    assert cli.main(["date", "07/02/2023"]) == 0
    assert cli.main(["date", "2023-07-02"]) == 0
    assert stub_client.requested == [date(2023, 7, 2), date(2023, 7, 2)]
    assert "06/30/2023" in capsys.readouterr().out


def test_bad_date(stub_client):
    assert cli.main(["date", "July 2nd"]) == 2


def test_unknown_label(stub_client):
    assert cli.main(["latest", "--label", "9 Mo"]) == 1


def test_invalid_year(stub_client):
    assert cli.main(["year", "1985"]) == 1


def test_year_to_csv(stub_client, tmp_path, capsys):
    output = tmp_path / "curves.csv"
    assert cli.main(["year", "2023", "--output", str(output)]) == 0
    lines = output.read_text().splitlines()
    assert lines[0].startswith("Date,1 Mo,2 Mo")
    assert lines[1].startswith("07/07/2023,5.32")
    assert len(lines) == 10


def test_config_create_and_validate(tmp_path, capsys):
    path = tmp_path / "config.json"
    assert cli.main(["config", "create", "--output", str(path)]) == 0
    assert cli.main(["config", "validate", str(path)]) == 0
    assert "PASSED" in capsys.readouterr().out


def test_no_command():
    assert cli.main([]) == 1


def test_missing_config_file_exits_cleanly(tmp_path):
    missing = str(tmp_path / "absent.json")
    assert cli.main(["--config", missing, "latest"]) == 1
    assert cli.main(["--config", missing, "config", "show"]) == 1


def test_non_numeric_env_timeout_exits_cleanly(monkeypatch):
    monkeypatch.setenv("TREASURY_CURVE_TIMEOUT", "soon")
    assert cli.main(["config", "show"]) == 1
    assert cli.main(["date", "07/02/2023"]) == 1


def test_wrongly_typed_config_file(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"timeout": "abc"}')
    assert cli.main(["--config", str(path), "config", "show"]) == 1
    assert cli.main(["config", "validate", str(path)]) == 1
    assert "timeout must be a number" in capsys.readouterr().out


def test_unknown_field_in_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"timeout": 10, "retries": 3}')
    assert cli.main(["config", "validate", str(path)]) == 1
    assert cli.main(["--config", str(path), "year", "2023"]) == 1


def test_invalid_json_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert cli.main(["config", "validate", str(path)]) == 1
    assert cli.main(["--config", str(path), "config", "show"]) == 1
