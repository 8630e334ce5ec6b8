"""End-to-end runs of the Streamlit page."""

import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def settings_file(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "settings.json"
    monkeypatch.setenv("PERIOD_PACE_SETTINGS", str(path))
    return path


def page_text(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


def run_app() -> AppTest:
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_first_run_shows_day_one(settings_file: Path) -> None:
    at = run_app()
    text = page_text(at)
    assert "Day 1 — Hit Your Goal" in text
    assert "3:45" in text
    assert at.text_input(key="goal").value == "3:45"
    assert len(at.text_input) == 2
    saved = json.loads(json.loads(settings_file.read_text(encoding="utf-8"))["dt-speed-calc"])
    assert saved == {"goal": "3:45", "dayOfPeriod": "1", "currentAvg": ""}


def test_mid_period_flow(settings_file: Path) -> None:
    at = run_app()
    at.text_input(key="day_of_period").input("8").run()
    assert len(at.text_input) == 3
    assert "Required Avg From Today" not in page_text(at)
    at.text_input(key="current_avg").input("4:10").run()
    assert not at.exception
    text = page_text(at)
    assert "3:37" in text
    assert "Week 2" in text
    assert "Trending ahead" in text
    saved = json.loads(json.loads(settings_file.read_text(encoding="utf-8"))["dt-speed-calc"])
    assert saved == {"goal": "3:45", "dayOfPeriod": "8", "currentAvg": "4:10"}


def test_restores_saved_inputs(settings_file: Path) -> None:
    settings_file.write_text(
        json.dumps({"dt-speed-calc": json.dumps({"goal": "4:00", "dayOfPeriod": "15", "currentAvg": "3:50"})}),
        encoding="utf-8",
    )
    at = run_app()
    assert at.text_input(key="goal").value == "4:00"
    assert at.text_input(key="current_avg").value == "3:50"
    assert "Week 3" in page_text(at)


def test_bad_goal_shows_inline_error(settings_file: Path) -> None:
    at = run_app()
    at.text_input(key="goal").input("abc").run()
    text = page_text(at)
    assert "Enter time as m:ss (e.g. 3:45)" in text
    assert "Hit Your Goal" not in text


def test_reset_restores_defaults(settings_file: Path) -> None:
    at = run_app()
    at.text_input(key="goal").input("5:00").run()
    at.text_input(key="day_of_period").input("10").run()
    at.button[0].click().run()
    assert at.text_input(key="goal").value == "3:45"
    assert at.text_input(key="day_of_period").value == "1"
