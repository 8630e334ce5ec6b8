"""Tests for persisting the last form inputs."""

import json

from period_pace.settings import (
    STORAGE_KEY,
    JsonFileStore,
    MemoryStore,
    Settings,
    load_settings,
    save_settings,
)


def test_defaults() -> None:
    assert Settings() == Settings("3:45", "1", "")


def test_record_shape() -> None:
    s = Settings("4:00", "8", "4:10")
    assert s.to_record() == {"goal": "4:00", "dayOfPeriod": "8", "currentAvg": "4:10"}


def test_missing_key_loads_nothing() -> None:
    assert load_settings(MemoryStore()) is None


def test_save_then_load_memory_store() -> None:
    store = MemoryStore()
    save_settings(store, Settings("4:00", "8", "4:10"))
    assert json.loads(store.data[STORAGE_KEY]) == {"goal": "4:00", "dayOfPeriod": "8", "currentAvg": "4:10"}
    assert load_settings(store) == Settings("4:00", "8", "4:10")


def test_partial_record_fills_defaults() -> None:
    store = MemoryStore({STORAGE_KEY: json.dumps({"goal": "5:00", "dayOfPeriod": 3})})
    assert load_settings(store) == Settings("5:00", "1", "")


def test_corrupt_value_loads_nothing() -> None:
    assert load_settings(MemoryStore({STORAGE_KEY: "{not json"})) is None
    assert load_settings(MemoryStore({STORAGE_KEY: "[1, 2]"})) is None


def test_json_file_store_round_trip(tmp_path) -> None:
    path = tmp_path / "nested" / "settings.json"
    store = JsonFileStore(path)
    assert load_settings(store) is None
    save_settings(store, Settings("3:30", "15", "3:40"))
    assert path.exists()
    assert load_settings(JsonFileStore(path)) == Settings("3:30", "15", "3:40")


def test_json_file_store_keeps_other_keys(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"other": "x"}), encoding="utf-8")
    save_settings(JsonFileStore(path), Settings())
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["other"] == "x"
    assert STORAGE_KEY in data


def test_unreadable_file_loads_nothing_and_is_replaced_on_save(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("garbage", encoding="utf-8")
    store = JsonFileStore(path)
    assert load_settings(store) is None
    save_settings(store, Settings("4:00", "2", "4:05"))
    assert load_settings(store) == Settings("4:00", "2", "4:05")


def test_save_failure_is_swallowed(tmp_path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    # Parent is a regular file, so mkdir/write fails with an OSError.
    save_settings(JsonFileStore(blocker / "settings.json"), Settings())
