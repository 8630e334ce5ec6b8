from dataclasses import dataclass
from typing import Optional

from period_pace.period import PeriodResult

CRITICAL_RATIO = 1.15


@dataclass(frozen=True)
class Tier:
    name: str
    bg: str
    border: str
    text: str
    accent: str


@dataclass(frozen=True)
class StatusNote:
    kind: str
    bg: str
    border: str
    text: str
    message: str


POSITIVE = Tier("positive", bg="#0d3320", border="#16a34a", text="#4ade80", accent="#22c55e")
COMPLETE = Tier("complete", bg="#1e1b4b", border="#7c3aed", text="#a78bfa", accent="#8b5cf6")
CRITICAL = Tier("critical", bg="#3b1118", border="#ef4444", text="#f87171", accent="#ef4444")
CAUTION = Tier("caution", bg="#3b2508", border="#f59e0b", text="#fbbf24", accent="#f59e0b")


def presentation_tier(status: str, required_seconds: Optional[float], goal_seconds: Optional[float]) -> Tier:
    if status in {"ahead", "day1"}:
        return POSITIVE
    if status == "final":
        return COMPLETE
    if required_seconds is None or goal_seconds is None:
        return POSITIVE
    if required_seconds > goal_seconds * CRITICAL_RATIO:
        return CRITICAL
    if required_seconds > goal_seconds:
        return CAUTION
    return POSITIVE


def plural_days(n: int) -> str:
    return f"{n} day{'' if n == 1 else 's'}"


def status_note(result: Optional[PeriodResult], goal_seconds: Optional[float], days_left: int) -> Optional[StatusNote]:
    if result is None or result.status != "ok" or result.required_seconds is None:
        return None
    goal = goal_seconds or 0
    if result.required_seconds > goal * CRITICAL_RATIO:
        return StatusNote(
            "behind",
            bg="rgba(239,68,68,0.1)",
            border="rgba(239,68,68,0.2)",
            text="#fca5a5",
            message=f"Significantly behind — you'll need to push hard for {plural_days(days_left)}.",
        )
    if result.required_seconds < goal:
        return StatusNote(
            "ahead",
            bg="rgba(34,197,94,0.08)",
            border="rgba(34,197,94,0.15)",
            text="#86efac",
            message="Trending ahead — required speed is faster than your goal.",
        )
    return None
