import json

import pytest

from kriptocalc.core.history import DEFAULT_CAPACITY, HistoryError, RunHistory
from kriptocalc.core.results import CipherRun


def _run(i: int) -> CipherRun:
    return CipherRun.create("vigenere", "encrypt", f"in{i}", f"out{i}", "KEY")


def test_push_is_newest_first():
    h = RunHistory()
    a, b = h.push(_run(1)), h.push(_run(2))
    assert h.entries() == [b, a]
    assert len(h) == 2


def test_capacity_drops_oldest():
    h = RunHistory(capacity=3)
    runs = [h.push(_run(i)) for i in range(5)]
    assert h.entries() == [runs[4], runs[3], runs[2]]


def test_default_capacity():
    h = RunHistory()
    for i in range(DEFAULT_CAPACITY + 10):
        h.push(_run(i))
    assert len(h) == DEFAULT_CAPACITY == 50


def test_bad_capacity():
    with pytest.raises(ValueError):
        RunHistory(capacity=0)


def test_remove_and_clear():
    h = RunHistory()
    a, b = h.push(_run(1)), h.push(_run(2))
    assert h.remove(a.id) is True
    assert h.remove("missing") is False
    assert list(h) == [b]
    h.clear()
    assert len(h) == 0


def test_entries_are_copies():
    h = RunHistory()
    h.push(_run(1))
    h.entries().clear()
    assert len(h) == 1


def test_save_and_load(tmp_path):
    path = tmp_path / "sub" / "history.json"
    h = RunHistory(path=path)
    a, b = h.push(_run(1)), h.push(_run(2))
    h.save()

    loaded = RunHistory.load(path)
    assert loaded.entries() == [b, a]
    assert json.loads(path.read_text(encoding="utf-8"))[0]["output"] == "out2"


def test_load_truncates_to_capacity(tmp_path):
    path = tmp_path / "history.json"
    h = RunHistory(path=path)
    for i in range(5):
        h.push(_run(i))
    h.save()
    assert len(RunHistory.load(path, capacity=2)) == 2


def test_load_missing_file(tmp_path):
    h = RunHistory.load(tmp_path / "nope.json")
    assert len(h) == 0


def test_save_without_path_is_noop(tmp_path):
    RunHistory().save()
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("content", ["{not json", '{"a": 1}'])
def test_load_corrupt_file(tmp_path, content):
    path = tmp_path / "history.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(HistoryError):
        RunHistory.load(path)


def test_run_dict_roundtrip():
    r = _run(7)
    assert CipherRun.from_dict(r.to_dict()) == r
    with pytest.raises(ValueError):
        CipherRun.from_dict({"id": "x"})


def test_load_malformed_entry(tmp_path):
    path = tmp_path / "history.json"
    path.write_text('[{"id": "x"}]', encoding="utf-8")
    with pytest.raises(HistoryError):
        RunHistory.load(path)
