import json
from pathlib import Path

import pytest

from calcifer.state import AppState, load_state, save_path, save_state


def test_round_trip(tmp_path):
    state = AppState([Path("/tmp/a.rs"), Path("/tmp/b.py")], 3, 1.5)
    target = tmp_path / "save.json"
    save_state(state, target)
    assert load_state(target) == state


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "deep" / "nested" / "save.json"
    save_state(AppState(), target)
    assert target.is_file()
    assert load_state(target) == AppState()


def test_serialized_field_order(tmp_path):
    target = tmp_path / "save.json"
    save_state(AppState([Path("x.rs")], 2, 1.5), target)
    text = target.read_text(encoding="utf-8")
    assert text == '{"tabs":["x.rs"],"theme":2,"zoom":1.5}'


def test_save_overwrites_previous_content(tmp_path):
    target = tmp_path / "save.json"
    save_state(AppState([Path("first.rs"), Path("second.rs")], 1, 2.0), target)
    save_state(AppState([], 0, 1.0), target)
    assert json.loads(target.read_text(encoding="utf-8"))["tabs"] == []


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_state(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"tabs": [], "theme": 0}',
        '{"tabs": "x", "theme": 0, "zoom": 1.0}',
        '{"tabs": [], "theme": -1, "zoom": 1.0}',
        '{"tabs": [], "theme": 0, "zoom": "big"}',
    ],
)
def test_load_invalid_content_raises(tmp_path, content):
    target = tmp_path / "save.json"
    target.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_state(target)


def test_load_accepts_integer_zoom(tmp_path):
    target = tmp_path / "save.json"
    target.write_text('{"tabs": ["a"], "theme": 1, "zoom": 2}', encoding="utf-8")
    state = load_state(target)
    assert state.zoom == 2.0
    assert state.tabs == [Path("a")]


def test_save_path_release(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert save_path() == tmp_path / ".config" / "calcifer" / "save.json"


def test_save_path_debug(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert save_path(True).name == "debug_save.json"
    assert save_path(True).parent == save_path(False).parent