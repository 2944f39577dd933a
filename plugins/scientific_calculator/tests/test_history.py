import pytest

from plugins.scientific_calculator.core import CalculationHistory


def test_history_keeps_most_recent_entries():
    history = CalculationHistory()
    for index in range(25):
        history.record(str(index), str(index), "degree")
    entries = history.entries()
    assert len(entries) == 20
    assert entries[0].expression == "5"
    assert entries[-1].expression == "24"


def test_history_clear_and_format():
    history = CalculationHistory(limit=3)
    entry = history.record("1 + 1", "2", "radian")
    assert str(entry) == "1 + 1 = 2"
    assert entry.to_dict() == {"expression": "1 + 1", "display": "2", "angle_mode": "radian"}
    history.clear()
    assert len(history) == 0
    assert history.limit == 3


def test_history_limit_must_be_positive():
    with pytest.raises(ValueError):
        CalculationHistory(limit=0)
