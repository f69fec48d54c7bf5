import json

import pytest

from app import cli
from app.weather.errors import CityNotFound


def test_prints_normalized_json(monkeypatch, capsys):
    monkeypatch.setattr(cli, "run", lambda city, tz: {"name": city, "uvIndex": 0, "tz": tz})

    assert cli.main(["--city", "London", "--tz", "UTC"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"name": "London", "uvIndex": 0, "tz": "UTC"}


def test_error_exit_code(monkeypatch, capsys):
    def _raise(city, tz):
        raise CityNotFound(city)

    monkeypatch.setattr(cli, "run", _raise)

    assert cli.main(["--city", "Atlantis"]) == 1
    assert "Atlantis" in capsys.readouterr().err


def test_blank_city(capsys):
    assert cli.main(["--city", "  "]) == 2


def test_unknown_timezone_exits_with_message(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--city", "London", "--tz", "Mars/Base"])

    assert exc.value.code == 2
    assert "Mars/Base" in capsys.readouterr().err


def test_valid_timezone_is_passed_through(monkeypatch, capsys):
    seen = {}

    def _run(city, tz):
        seen["tz"] = tz
        return {"name": city}

    monkeypatch.setattr(cli, "run", _run)

    assert cli.main(["--city", "London", "--tz", "Europe/London"]) == 0
    assert seen["tz"] == "Europe/London"


def test_malformed_payload_exit_code(monkeypatch, capsys):
    def _raise(city, tz):
        raise KeyError("main")

    monkeypatch.setattr(cli, "run", _raise)

    assert cli.main(["--city", "London"]) == 1
    assert "KeyError" in capsys.readouterr().err
