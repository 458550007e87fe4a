from datetime import datetime, timedelta

import pandas as pd
import pytest

from roman_converter.conversion_history import (
    ConversionHistory,
    ConversionRecord,
    export_history_csv,
    export_to_csv,
    record_conversion,
)


@pytest.fixture
def history(tmp_path):
    return ConversionHistory(tmp_path / "history.json")


def make_record(text, output, mode="roman-to-int", timestamp=None):
    return ConversionRecord(input=text, output=output, mode=mode, timestamp=timestamp or datetime(2024, 3, 1, 10, 15))


def test_empty_history(history):
    assert history.get_conversions() == []


def test_save_and_load_most_recent_first(history):
    history.save_conversion(make_record("X", "10"))
    history.save_conversion(make_record("14", "XIV", mode="int-to-roman"))

    conversions = history.get_conversions()
    assert [c.input for c in conversions] == ["14", "X"]
    assert conversions[0].mode == "int-to-roman"
    assert conversions[1].timestamp == datetime(2024, 3, 1, 10, 15)


def test_history_is_capped(tmp_path):
    history = ConversionHistory(tmp_path / "history.json", max_items=100)
    for n in range(1, 106):
        history.save_conversion(make_record(str(n), "x", mode="int-to-roman"))

    conversions = history.get_conversions()
    assert len(conversions) == 100
    assert conversions[0].input == "105"
    assert conversions[-1].input == "6"


def test_history_creates_parent_folder(tmp_path):
    history = ConversionHistory(tmp_path / "nested" / "dir" / "history.json")
    history.save_conversion(make_record("I", "1"))
    assert len(history.get_conversions()) == 1


def test_corrupt_history_is_treated_as_empty(history, capsys):
    history.history_path.write_text("{not json")
    assert history.get_conversions() == []
    assert "Warning" in capsys.readouterr().out


def test_wrong_shape_history_is_treated_as_empty(history, capsys):
    history.history_path.write_text('{"input": "X"}')
    assert history.get_conversions() == []
    assert "Warning" in capsys.readouterr().out


def test_clear_history(history):
    history.save_conversion(make_record("X", "10"))
    history.clear_history()
    assert history.get_conversions() == []
    history.clear_history()


def test_record_conversion_stamps_current_time(history):
    before = datetime.now()
    record = record_conversion(history, "XIV", "14", "roman-to-int")

    assert before <= record.timestamp <= datetime.now()
    assert history.get_conversions() == [record]


def test_record_rejects_unknown_mode():
    with pytest.raises(ValueError):
        make_record("X", "10", mode="sideways")


def test_conversion_stats(history):
    now = datetime(2024, 3, 10, 12, 0)
    history.save_conversion(make_record("X", "10", timestamp=now - timedelta(hours=1)))
    history.save_conversion(make_record("5", "V", mode="int-to-roman", timestamp=now - timedelta(days=2)))
    history.save_conversion(make_record("L", "50", timestamp=now - timedelta(days=30)))

    stats = history.get_conversion_stats(now=now)
    assert stats == {
        "total": 3,
        "roman_to_int": 2,
        "int_to_roman": 1,
        "today": 1,
        "this_week": 2,
    }


def test_export_to_csv_quotes_every_field():
    csv_text = export_to_csv([make_record("XIV", "14"), make_record("4", "IV", mode="int-to-roman")])

    assert csv_text.splitlines() == [
        '"Input","Output","Mode","Timestamp"',
        '"XIV","14","roman-to-int","2024-03-01T10:15:00"',
        '"4","IV","int-to-roman","2024-03-01T10:15:00"',
    ]


def test_export_to_csv_without_records():
    assert export_to_csv([]).strip() == '"Input","Output","Mode","Timestamp"'


def test_export_history_csv(history, tmp_path):
    history.save_conversion(make_record("XIV", "14"))
    output = export_history_csv(history, tmp_path / "out" / "history.csv")

    df = pd.read_csv(output, dtype=str)
    assert list(df.columns) == ["Input", "Output", "Mode", "Timestamp"]
    assert df.loc[0, "Input"] == "XIV"
    assert df.loc[0, "Output"] == "14"
