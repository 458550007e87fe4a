import json

import pytest

from roman_converter.__main__ import load_config, main
from roman_converter.conversion_history import ConversionHistory


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"history_path": str(tmp_path / "history.json")}))
    return path


def run_menu(monkeypatch, config_file, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config_file)])
    assert exc_info.value.code == 0


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_single_conversions_are_saved(monkeypatch, capsys, config_file, tmp_path):
    run_menu(monkeypatch, config_file, ["1", "xiv", "2", "1994", "0"])

    out = capsys.readouterr().out
    assert "Success! XIV = 14" in out
    assert "Success! 1994 = MCMXCIV" in out

    conversions = ConversionHistory(tmp_path / "history.json").get_conversions()
    assert [(c.input, c.output, c.mode) for c in conversions] == [
        ("1994", "MCMXCIV", "int-to-roman"),
        ("xiv", "14", "roman-to-int"),
    ]


def test_errors_keep_the_menu_running(monkeypatch, capsys, config_file):
    run_menu(monkeypatch, config_file, ["1", "IIII", "2", "4000", "42", "0"])

    out = capsys.readouterr().out
    assert "Error: Invalid Roman numeral: IIII" in out
    assert "Error: Number must be an integer between 1 and 3999" in out
    assert "Invalid choice" in out


def test_historical_mode_toggle(monkeypatch, capsys, config_file):
    run_menu(monkeypatch, config_file, ["10", "1", "IIII", "0"])

    out = capsys.readouterr().out
    assert "Historical mode enabled" in out
    assert "Success! IIII = 4" in out


def test_analyze(monkeypatch, capsys, config_file):
    run_menu(monkeypatch, config_file, ["3", "MCMXCIIII", "0"])

    out = capsys.readouterr().out
    assert "Period: Medieval" in out
    assert "Additive notation for 4" in out
    assert "Modern equivalent: MCMXCIV" in out


def test_stats_and_clear(monkeypatch, capsys, config_file, tmp_path):
    run_menu(monkeypatch, config_file, ["1", "X", "7", "9", "y", "6", "0"])

    out = capsys.readouterr().out
    assert "Total conversions: 1" in out
    assert "History cleared" in out
    assert "No conversions saved yet" in out
    assert not (tmp_path / "history.json").exists()


def test_batch_file_from_menu(monkeypatch, capsys, config_file, tmp_path):
    input_file = tmp_path / "years.txt"
    input_file.write_text("1990\n2750\n")

    run_menu(monkeypatch, config_file, ["4", str(input_file), "2", "0"])

    assert "Converted 2 of 2 entries" in capsys.readouterr().out
    assert (tmp_path / "years_converted.csv").exists()
