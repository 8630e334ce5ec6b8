"""Load/save of the last form inputs.

The three raw strings live under one fixed key in a key-value store as a flat
JSON record ``{"goal", "dayOfPeriod", "currentAvg"}``. The page receives the
store as an argument; nothing here is module-level state.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from loguru import logger

STORAGE_KEY = "dt-speed-calc"
DEFAULT_GOAL = "3:45"
DEFAULT_DAY = "1"
DEFAULT_CURRENT_AVG = ""


@dataclass(frozen=True)
class Settings:
    goal: str = DEFAULT_GOAL
    day_of_period: str = DEFAULT_DAY
    current_avg: str = DEFAULT_CURRENT_AVG

    def to_record(self) -> Dict[str, str]:
        return {"goal": self.goal, "dayOfPeriod": self.day_of_period, "currentAvg": self.current_avg}

    @classmethod
    def from_record(cls, record: Dict[str, object]) -> "Settings":
        def pick(key: str, default: str) -> str:
            v = record.get(key)
            return v if isinstance(v, str) else default

        return cls(
            goal=pick("goal", DEFAULT_GOAL),
            day_of_period=pick("dayOfPeriod", DEFAULT_DAY),
            current_avg=pick("currentAvg", DEFAULT_CURRENT_AVG),
        )


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """String key-value store backed by a single JSON object on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except ValueError:
            # Unreadable file is replaced rather than blocking every save.
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_settings(store: KeyValueStore) -> Optional[Settings]:
    try:
        raw = store.get(STORAGE_KEY)
        if raw is None:
            logger.debug(f"No saved inputs under {STORAGE_KEY}")
            return None
        record = json.loads(raw)
    except (OSError, ValueError) as exc:
        logger.warning(f"Could not load saved inputs: {type(exc).__name__}: {exc}")
        return None
    if not isinstance(record, dict):
        logger.warning(f"Ignoring saved inputs of type {type(record).__name__}")
        return None
    return Settings.from_record(record)


def save_settings(store: KeyValueStore, settings: Settings) -> None:
    try:
        store.set(STORAGE_KEY, json.dumps(settings.to_record()))
    except (OSError, TypeError, ValueError) as exc:
        logger.warning(f"Could not save inputs: {type(exc).__name__}: {exc}")
