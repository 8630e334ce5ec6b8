from dataclasses import dataclass, field
from typing import Dict, Optional

from period_pace.period import (
    TOTAL_DAYS,
    PeriodResult,
    WeekDayPosition,
    compute_period_result,
    days_done,
    days_left,
    week_day_of,
)
from period_pace.settings import Settings
from period_pace.tiers import StatusNote, Tier, presentation_tier, status_note
from period_pace.timecodec import parse_day, parse_time

GOAL_ERROR = "Enter time as m:ss (e.g. 3:45)"
DAY_ERROR = "Must be 1–28"
CURRENT_AVG_ERROR = "Enter time as m:ss (e.g. 4:10)"

HEADLINES = {
    "day1": ("Day 1 — Hit Your Goal", "No history yet. Run at goal speed to start on track."),
    "final": ("Period Complete", f"All {TOTAL_DAYS} days are done. Your final average is your period result."),
    "ahead": ("Ahead of Goal", "Even at 0:00 the math says you're beating goal. Keep it up!"),
    "ok": ("Required Avg From Today", ""),
}


@dataclass(frozen=True)
class ViewState:
    goal_seconds: Optional[int]
    day_index: Optional[int]
    days_done: int
    days_left: int
    week_day: Optional[WeekDayPosition]
    current_avg_seconds: Optional[int]
    result: Optional[PeriodResult]
    tier: Optional[Tier]
    note: Optional[StatusNote]
    needs_current_avg: bool
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid_day(self) -> bool:
        return self.day_index is not None

    @property
    def can_calculate(self) -> bool:
        return self.result is not None

    @property
    def progress(self) -> float:
        return self.days_done / TOTAL_DAYS

    @property
    def progress_pct(self) -> int:
        return int(round(self.progress * 100))

    @property
    def headline(self) -> str:
        return HEADLINES[self.result.status][0] if self.result else ""

    @property
    def message(self) -> str:
        return HEADLINES[self.result.status][1] if self.result else ""


def input_errors(inputs: Settings, goal: Optional[int], day: Optional[int], current: Optional[int], interacted: bool) -> Dict[str, str]:
    if not interacted:
        return {}
    errors: Dict[str, str] = {}
    if inputs.goal and goal is None:
        errors["goal"] = GOAL_ERROR
    if inputs.day_of_period and day is None:
        errors["day_of_period"] = DAY_ERROR
    if inputs.current_avg and current is None:
        errors["current_avg"] = CURRENT_AVG_ERROR
    return errors


def recompute(inputs: Settings, interacted: bool = False) -> ViewState:
    """Everything the page renders, derived from the three raw input strings."""
    goal = parse_time(inputs.goal)
    day = parse_day(inputs.day_of_period, TOTAL_DAYS)
    current = parse_time(inputs.current_avg)
    done = days_done(day) if day is not None else 0
    left = days_left(day) if day is not None else 0

    result = None
    if goal is not None and day is not None:
        result = compute_period_result(goal, day, current)
    tier = presentation_tier(result.status, result.required_seconds, goal) if result else None

    return ViewState(
        goal_seconds=goal,
        day_index=day,
        days_done=done,
        days_left=left,
        week_day=week_day_of(day) if day is not None else None,
        current_avg_seconds=current,
        result=result,
        tier=tier,
        note=status_note(result, goal, left),
        needs_current_avg=done > 0,
        errors=input_errors(inputs, goal, day, current, interacted),
    )
